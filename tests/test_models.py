"""Tests for core data models."""

from __future__ import annotations

from olexamples.models import ExampleSummary, FileRecord


class TestFileRecord:
    """Test FileRecord dataclass."""

    def test_defaults(self) -> None:
        """Should start with empty metadata and no mode."""
        record = FileRecord(contents=b"abc")
        assert record.metadata == {}
        assert record.mode is None
        assert record.text() == "abc"

    def test_metadata_not_shared(self) -> None:
        """Should give each record its own metadata dict."""
        first = FileRecord(contents=b"")
        second = FileRecord(contents=b"")
        first.metadata["title"] = "x"
        assert second.metadata == {}


class TestExampleSummary:
    """Test ExampleSummary dataclass."""

    def test_to_dict(self) -> None:
        """Should serialise all fields."""
        summary = ExampleSummary(
            link="a.html", example="a.html", title="A", shortdesc="d", tags=["t"]
        )
        assert summary.to_dict() == {
            "link": "a.html",
            "example": "a.html",
            "title": "A",
            "shortdesc": "d",
            "tags": ["t"],
        }
