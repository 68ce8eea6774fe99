"""Helpers for reading dependency declarations out of example scripts."""

from __future__ import annotations

import html
import re
from typing import Iterable, List

# ``goog.require('ol.Map');``, one per line. The leading ``.*`` is greedy, so
# a line holding two declarations yields only the last one.
REQUIRE_PATTERN = re.compile(r".*goog\.require\('(ol\.\S*)'\);")

# Lines dropped from the source shown to readers: dependency declarations
# and the renderer override used by the test harness, with trailing newlines.
CLEANUP_PATTERN = re.compile(r".*(goog\.require(.*);|.*renderer: common\..*,?)\n*")


def find_requires(source: str) -> List[str]:
    """Return the library symbols declared with ``goog.require`` in source order.

    Duplicates are kept. Text without declarations gives an empty list.
    """
    return REQUIRE_PATTERN.findall(source)


def clean_source(source: str) -> str:
    """Strip require lines and the renderer override from example source."""
    return CLEANUP_PATTERN.sub("", source)


def render_api_links(symbols: Iterable[str], api_root: str = "../apidoc") -> str:
    """Render an HTML list linking each symbol to its API documentation page.

    Order and duplicates follow ``symbols``. An empty input renders nothing
    so templates can leave out the whole section.
    """
    items = []
    for symbol in symbols:
        name = html.escape(symbol)
        href = f"{api_root}/{name}.html"
        items.append(
            f'<li><a href="{href}" title="API documentation for {name}">{name}</a></li>'
        )
    if not items:
        return ""
    return '<ul class="inline">' + "".join(items) + "</ul>"
