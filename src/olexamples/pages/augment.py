"""Attach script, stylesheet and resource markup to example pages."""

from __future__ import annotations

import logging
from typing import Any, List

from olexamples.config import BuildConfig
from olexamples.errors import InvalidResource, MissingScript, MissingTemplate
from olexamples.models import FileStore
from olexamples.pages.naming import example_id, sibling
from olexamples.source.requires import clean_source, find_requires, render_api_links

LOGGER = logging.getLogger(__name__)


def resource_tag(resource: Any, path: str) -> str:
    """Return the head markup loading an extra resource of ``path``."""
    if not isinstance(resource, str):
        raise InvalidResource(str(resource), path)
    if resource.endswith(".js"):
        return f'<script src="{resource}"></script>'
    if resource.endswith(".css"):
        return f'<link rel="stylesheet" href="{resource}">'
    raise InvalidResource(resource, path)


def render_resources(resources: Any, path: str) -> str:
    if not isinstance(resources, (list, tuple)):
        resources = [resources]
    return "\n".join(resource_tag(resource, path) for resource in resources)


def augment_examples(files: FileStore, config: BuildConfig | None = None) -> List[str]:
    """Add ``js``, ``css`` and ``extraHead`` metadata to every example page.

    Writes into ``files`` in place and returns the augmented page paths. The
    first invalid page raises and stops the pass.
    """
    config = config or BuildConfig()
    augmented: List[str] = []

    for path, record in files.items():
        example = example_id(path, config.index_page)
        if example is None:
            continue

        metadata = record.metadata
        if not metadata.get("template"):
            raise MissingTemplate(path)

        js_path = sibling(path, example, ".js")
        if js_path not in files:
            raise MissingScript(path)

        js_source = files[js_path].text()
        metadata["js"] = {
            "tag": f'<script src="{config.loader_script}?id={example}"></script>',
            "source": clean_source(js_source),
            "apiHtml": render_api_links(find_requires(js_source), config.api_root),
        }

        css_path = sibling(path, example, ".css")
        if css_path in files:
            metadata["css"] = {
                "tag": f'<link rel="stylesheet" href="{example}.css">',
                "source": files[css_path].text(),
            }

        if metadata.get("resources") is not None:
            metadata["extraHead"] = render_resources(metadata["resources"], path)

        LOGGER.debug("Augmented %s", path)
        augmented.append(path)

    LOGGER.info("Augmented %d example pages", len(augmented))
    return augmented
