"""Core olexamples data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class FileRecord:
    """A source file held in memory during a build."""

    contents: bytes
    metadata: Dict[str, Any] = field(default_factory=dict)
    mode: Optional[int] = None

    def text(self) -> str:
        return self.contents.decode("utf-8")


# Relative POSIX path -> record. Stages receive the store by reference.
FileStore = Dict[str, FileRecord]


@dataclass(slots=True)
class ExampleSummary:
    """Listing and search information for one example page."""

    link: str
    example: str
    title: Any = None
    shortdesc: Any = None
    tags: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
