"""Exception types raised by bellande_format."""

from __future__ import annotations

from pathlib import Path


class DocumentError(Exception):
    """Base class for every parse / write failure."""


class DocumentIOError(DocumentError):
    """The document file could not be read or written."""

    def __init__(self, path: str | Path, error: Exception) -> None:
        self.path = Path(path)
        self.error = error
        super().__init__(f"{self.path}: {error}")


class MalformedLine(DocumentError):
    """A line is neither a key line nor a list-item line."""

    def __init__(self, line_number: int, content: str, reason: str = "expected 'key: value' or '- item'") -> None:
        self.line_number = line_number
        self.content = content
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {content!r}")


class UnresolvedPath(DocumentError):
    """A line addresses a container of the wrong kind (or none at all)."""

    def __init__(self, key: str, line_number: int, reason: str = "no container to receive this line") -> None:
        self.key = key
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} (key {key!r})")


class UnrepresentableValue(DocumentError):
    """A value or key cannot be written so that it reads back the same."""
