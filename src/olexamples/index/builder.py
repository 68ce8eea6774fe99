"""Example listing and word index used by the examples search page."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from olexamples.config import BuildConfig
from olexamples.models import ExampleSummary, FileRecord, FileStore
from olexamples.pages.naming import example_id
from olexamples.utils.text import split_words

LOGGER = logging.getLogger(__name__)

INDEXED_FIELDS = ("shortdesc", "title", "tags")
INDEX_PREFIX = "var info = "
INDEX_MODE = 0o644

WordIndex = Dict[str, Dict[int, int]]


def collect_examples(files: FileStore, config: BuildConfig | None = None) -> List[ExampleSummary]:
    """Summaries of all example pages, in the store's iteration order."""
    config = config or BuildConfig()
    examples: List[ExampleSummary] = []
    for path, record in files.items():
        if example_id(path, config.index_page) is None:
            continue
        metadata = record.metadata
        examples.append(
            ExampleSummary(
                link=path,
                example=path,
                title=metadata.get("title"),
                shortdesc=metadata.get("shortdesc"),
                tags=metadata.get("tags"),
            )
        )
    return examples


def create_word_index(examples: Sequence[ExampleSummary]) -> WordIndex:
    """Map each lowercased word to ``{example position: occurrence count}``."""
    index: WordIndex = {}
    for position, example in enumerate(examples):
        for key in INDEXED_FIELDS:
            for word in split_words(getattr(example, key)):
                counts = index.setdefault(word, {})
                counts[position] = counts.get(position, 0) + 1
    return index


def dump_index(examples: Sequence[ExampleSummary], index: WordIndex) -> bytes:
    info = {
        "examples": [example.to_dict() for example in examples],
        "index": index,
    }
    return (INDEX_PREFIX + json.dumps(info, separators=(",", ":"))).encode("utf-8")


def load_index(text: str) -> Dict[str, Any]:
    """Parse a generated index file back into its ``examples``/``index`` data."""
    text = text.strip()
    if text.startswith(INDEX_PREFIX):
        text = text[len(INDEX_PREFIX):]
    return json.loads(text)


def create_index(files: FileStore, config: BuildConfig | None = None) -> FileRecord:
    """Add the generated index file to ``files`` and return it."""
    config = config or BuildConfig()
    examples = collect_examples(files, config)
    index = create_word_index(examples)
    record = FileRecord(contents=dump_index(examples, index), mode=INDEX_MODE)
    files[config.index_filename] = record
    LOGGER.info(
        "Indexed %d examples (%d words) into %s",
        len(examples),
        len(index),
        config.index_filename,
    )
    return record
