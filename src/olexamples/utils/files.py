"""Utility helpers for working with files."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Iterator

from olexamples.models import FileStore

LOGGER = logging.getLogger(__name__)


def iter_source_paths(root: Path) -> Iterator[Path]:
    """Yield regular files under ``root`` in sorted order, skipping hidden ones."""
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        if path.is_file():
            yield path


def write_tree(files: FileStore, dest: Path, *, clean: bool = True) -> int:
    """Write every record under ``dest`` and return the number of files."""
    if clean and dest.exists():
        shutil.rmtree(dest)
    dest.mkdir(parents=True, exist_ok=True)

    for name, record in files.items():
        target = dest / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(record.contents)
        if record.mode is not None:
            os.chmod(target, record.mode)
    LOGGER.info("Wrote %d files to %s", len(files), dest)
    return len(files)
