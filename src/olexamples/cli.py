"""Command line interface for olexamples."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from olexamples.config import BuildConfig
from olexamples.pipeline import build as build_site
from olexamples.web.app import app as web_app, configure


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="olexamples - build the library example pages")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _make_config(
    src: Optional[Path],
    dest: Optional[Path],
    templates: Optional[Path] = None,
    package_json: Optional[Path] = None,
    clean: bool = True,
) -> BuildConfig:
    defaults = BuildConfig()
    config = BuildConfig(
        src_dir=src if src is not None else defaults.src_dir,
        dest_dir=dest if dest is not None else defaults.dest_dir,
        templates_dir=templates if templates is not None else defaults.templates_dir,
        package_json=package_json if package_json is not None else defaults.package_json,
        clean=clean,
    )
    return config.resolve(Path.cwd())


@app.command()
def build(
    src: Path = typer.Option(None, "--src", help="Directory with the example sources"),
    dest: Path = typer.Option(None, "--dest", help="Output directory"),
    templates: Path = typer.Option(None, "--templates", help="Page templates directory"),
    package_json: Path = typer.Option(
        None, "--package-json", help="package.json providing the library version"
    ),
    clean: bool = typer.Option(True, "--clean/--no-clean", help="Empty the output directory first"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the example pages and the search index."""
    _setup_logging(verbose)
    config = _make_config(src, dest, templates, package_json, clean)

    console.print(f"Building examples into [bold]{config.dest_dir}[/bold]...")
    try:
        stats = build_site(config)
    except Exception as exc:
        err_console.print("Building examples failed.  See the full trace below.\n")
        err_console.print_exception()
        err_console.print(str(exc), style="red", markup=False)
        raise typer.Exit(code=1) from exc

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Files")
    table.add_column("Examples")
    table.add_column("Indexed words")
    table.add_column("Rendered")
    table.add_row(str(stats.files), str(stats.examples), str(stats.words), str(stats.rendered))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    src: Path = typer.Option(None, "--src", help="Directory with the example sources"),
    dest: Path = typer.Option(None, "--dest", help="Built site directory"),
) -> None:
    """Preview the built examples in a local web server."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    config = _make_config(src, dest)
    if not config.dest_dir.exists():
        console.print("[yellow]Warning: site not built yet, run 'olexamples build' first.[/yellow]")

    configure(config)
    console.print(f"Serving {config.dest_dir} on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
