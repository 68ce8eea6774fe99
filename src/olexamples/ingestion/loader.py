"""Source tree loading with YAML front-matter.

Each file becomes a FileRecord keyed by its POSIX path relative to the
source directory. Text files starting with a ``---`` block have that block
parsed as YAML into the record metadata; the remainder is the contents.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from olexamples.errors import FrontMatterError
from olexamples.models import FileRecord, FileStore
from olexamples.utils.files import iter_source_paths

LOGGER = logging.getLogger(__name__)

FRONT_MATTER = re.compile(r"\A\ufeff?---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)", re.S | re.M)


def parse_front_matter(text: str, path: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Split ``text`` into front-matter metadata and body."""
    match = FRONT_MATTER.match(text)
    if not match:
        return {}, text

    try:
        metadata = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"{path}: Invalid YAML front-matter: {exc}", path) from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise FrontMatterError(f"{path}: YAML front-matter must be a mapping", path)
    return metadata, text[match.end():]


def load_file(path: Path, name: str) -> FileRecord:
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        LOGGER.debug("Loaded %s as binary", name)
        return FileRecord(contents=raw)

    metadata, body = parse_front_matter(text, name)
    return FileRecord(contents=body.encode("utf-8"), metadata=metadata)


def load_source_tree(root: Path) -> FileStore:
    """Read every file under ``root`` into a new file store."""
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")

    files: FileStore = {}
    for path in iter_source_paths(root):
        name = path.relative_to(root).as_posix()
        files[name] = load_file(path, name)
    LOGGER.info("Loaded %d files from %s", len(files), root)
    return files
