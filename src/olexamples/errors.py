"""Errors raised while building the examples."""

from __future__ import annotations


class BuildError(Exception):
    """Base class for fatal build errors."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class MissingTemplate(BuildError):
    def __init__(self, path: str) -> None:
        super().__init__(f"{path}: Missing template in YAML front-matter", path)


class MissingScript(BuildError):
    def __init__(self, path: str) -> None:
        super().__init__(f"No .js file found for {path}", path)


class InvalidResource(BuildError):
    def __init__(self, resource: str, path: str) -> None:
        super().__init__(
            f"Invalid value for resource: {resource} is not .js or .css: {path}", path
        )
        self.resource = resource


class FrontMatterError(BuildError):
    """Front-matter could not be read as a YAML mapping."""
