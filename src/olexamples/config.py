"""Build configuration defaults."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict

LOGGER = logging.getLogger(__name__)


def _get_default_templates_dir() -> Path:
    """Get the templates directory for the current working tree."""
    # A checkout of the library keeps its example templates here
    local_templates = Path("config/examples")
    if local_templates.is_dir():
        return local_templates

    # Fall back to the templates shipped with the package
    return Path(str(files("olexamples").joinpath("templates")))


@dataclass(slots=True)
class BuildConfig:
    src_dir: Path = Path("examples")
    dest_dir: Path = Path("build/examples")
    templates_dir: Path | None = None
    package_json: Path = Path("package.json")
    api_root: str = "../apidoc"
    loader_script: str = "loader.js"
    index_filename: str = "index.js"
    index_page: str = "index.html"
    clean: bool = True

    def __post_init__(self) -> None:
        if self.templates_dir is None:
            self.templates_dir = _get_default_templates_dir()

    def resolve(self, base_dir: Path | None = None) -> "BuildConfig":
        """Return a copy with relative directories anchored at ``base_dir``."""
        if base_dir is None:
            return replace(self)

        def anchor(path: Path) -> Path:
            path = Path(path)
            return path if path.is_absolute() else base_dir / path

        return replace(
            self,
            src_dir=anchor(self.src_dir),
            dest_dir=anchor(self.dest_dir),
            templates_dir=anchor(self.templates_dir),
            package_json=anchor(self.package_json),
        )

    def site_metadata(self) -> Dict[str, Any]:
        """Global context shared by every rendered page."""
        version = None
        path = Path(self.package_json)
        if path.is_file():
            try:
                version = json.loads(path.read_text(encoding="utf-8")).get("version")
            except ValueError as exc:
                LOGGER.warning("Ignoring unreadable %s: %s", path, exc)
        return {"olVersion": version}
