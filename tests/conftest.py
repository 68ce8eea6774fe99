"""Shared fixtures for olexamples tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from olexamples.config import BuildConfig
from olexamples.models import FileRecord, FileStore


LINE_JS = """goog.require('ol.Map');
goog.require('ol.View');
goog.require('ol.layer.Tile');

var map = new ol.Map({
  layers: [new ol.layer.Tile()],
  renderer: common.getRendererFromQueryString(),
  target: 'map',
  view: new ol.View()
});
"""


@pytest.fixture
def config(tmp_path: Path) -> BuildConfig:
    return BuildConfig(
        src_dir=tmp_path / "examples",
        dest_dir=tmp_path / "build",
        package_json=tmp_path / "package.json",
    )


@pytest.fixture
def store() -> FileStore:
    """A small in-memory example tree."""
    return {
        "index.html": FileRecord(
            contents=b"<p>All examples</p>",
            metadata={"template": "index.html", "title": "Examples"},
        ),
        "draw-line.html": FileRecord(
            contents=b'<div id="map"></div>',
            metadata={
                "template": "example.html",
                "title": "Draw a line",
                "shortdesc": "Draw a line on the map.",
                "tags": "draw, geom",
            },
        ),
        "draw-line.js": FileRecord(contents=LINE_JS.encode("utf-8")),
        "draw-line.css": FileRecord(contents=b"#map { height: 256px; }\n"),
        "loader.js": FileRecord(contents=b"// loader\n"),
    }


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Write an example source directory to disk."""
    root = tmp_path / "examples"
    root.mkdir()
    (root / "index.html").write_text(
        "---\ntemplate: index.html\ntitle: Examples\n---\n<p>All examples</p>\n"
    )
    (root / "draw-line.html").write_text(
        "---\n"
        "template: example.html\n"
        "title: Draw a line\n"
        "shortdesc: Draw a *line* on the map.\n"
        "tags: \"draw, geom\"\n"
        "resources:\n"
        "  - resources/common.js\n"
        "  - resources/layout.css\n"
        "---\n"
        '<div id="map"></div>\n'
    )
    (root / "draw-line.js").write_text(LINE_JS)
    (root / "draw-line.css").write_text("#map { height: 256px; }\n")
    (root / "loader.js").write_text("// loader\n")
    (root / "data").mkdir()
    (root / "data" / "icon.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")
    return root
