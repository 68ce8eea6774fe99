"""Naming rules tying example pages to their scripts and stylesheets."""

from __future__ import annotations

import posixpath
import re
from typing import Optional

PAGE_PATTERN = re.compile(r"([^/^.]*)\.html$")


def example_id(path: str, index_page: str = "index.html") -> Optional[str]:
    """Return the example id for an example page path, or None."""
    if path == index_page:
        return None
    match = PAGE_PATTERN.search(path)
    return match.group(1) if match else None


def sibling(path: str, example: str, extension: str) -> str:
    """Path of the file next to ``path`` named after the example."""
    return posixpath.join(posixpath.dirname(path), example + extension)
