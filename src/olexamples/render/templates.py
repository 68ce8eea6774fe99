"""Jinja2 rendering of pages that name a template in their front-matter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import jinja2
import markdown
from markupsafe import Markup

from olexamples.config import BuildConfig
from olexamples.errors import BuildError
from olexamples.models import FileRecord, FileStore

LOGGER = logging.getLogger(__name__)


def markdown_filter(text: Any) -> Markup:
    """Render Markdown text (e.g. a page ``shortdesc``) to HTML."""
    if not text:
        return Markup("")
    return Markup(markdown.markdown(str(text)))


def create_environment(templates_dir: Path) -> jinja2.Environment:
    """Get the Jinja2 environment for the example templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(templates_dir)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
    )
    env.filters["md"] = markdown_filter
    return env


def render_page(
    env: jinja2.Environment, name: str, record: FileRecord, site: Dict[str, Any]
) -> str:
    template_name = record.metadata["template"]
    try:
        template = env.get_template(template_name)
    except jinja2.TemplateNotFound as exc:
        raise BuildError(f"{name}: Template not found: {template_name}", name) from exc

    context = dict(site)
    context.update(record.metadata)
    context["contents"] = Markup(record.text())
    return template.render(**context)


def render_pages(
    files: FileStore,
    config: BuildConfig | None = None,
    env: jinja2.Environment | None = None,
) -> int:
    """Replace the contents of every templated record with its rendered page."""
    config = config or BuildConfig()
    env = env or create_environment(config.templates_dir)
    site = config.site_metadata()

    rendered = 0
    for name, record in files.items():
        if not record.metadata.get("template"):
            continue
        record.contents = render_page(env, name, record, site).encode("utf-8")
        LOGGER.debug("Rendered %s with %s", name, record.metadata["template"])
        rendered += 1
    LOGGER.info("Rendered %d pages", rendered)
    return rendered
