"""Example site build pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from olexamples.config import BuildConfig
from olexamples.index.builder import create_index, load_index
from olexamples.ingestion.loader import load_source_tree
from olexamples.models import FileStore
from olexamples.pages.augment import augment_examples
from olexamples.render.templates import render_pages
from olexamples.utils.files import write_tree

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    files: int = 0
    examples: int = 0
    words: int = 0
    rendered: int = 0


def process(files: FileStore, config: BuildConfig) -> BuildStats:
    """Run the in-memory stages over ``files``.

    Nothing is written here, so a failing stage leaves no output behind.
    """
    augment_examples(files, config)
    index_record = create_index(files, config)
    rendered = render_pages(files, config)

    info = load_index(index_record.text())
    return BuildStats(
        files=len(files),
        examples=len(info["examples"]),
        words=len(info["index"]),
        rendered=rendered,
    )


def build(config: BuildConfig) -> BuildStats:
    """Build the example site described by ``config``."""
    LOGGER.info("Building examples from %s", config.src_dir)
    files = load_source_tree(config.src_dir)
    stats = process(files, config)
    write_tree(files, config.dest_dir, clean=config.clean)
    return stats
