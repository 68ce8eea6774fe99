"""Text helpers for the search index."""

from __future__ import annotations

import re
from typing import Any, Iterator

_NON_WORD = re.compile(r"\W+")


def field_text(value: Any) -> str:
    """Flatten a front-matter value into searchable text."""
    if not value:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value if item)
    return str(value)


def split_words(value: Any) -> Iterator[str]:
    """Yield the lowercased words of a front-matter value.

    Splits on runs of non-word characters and drops empty pieces.
    """
    for word in _NON_WORD.split(field_text(value)):
        if word:
            yield word.lower()
