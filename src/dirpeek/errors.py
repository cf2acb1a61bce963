"""Exceptions raised for fatal inspection failures."""

from __future__ import annotations

from pathlib import Path


class DirpeekError(Exception):
    """Base class for errors that end an invocation."""


class PathNotFound(DirpeekError):
    """Raised when the target path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Path '{path}' does not exist")
        self.path = path


class TargetUnreadable(DirpeekError):
    """Raised when the target exists but cannot be statted, listed or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason


class CsvPreviewError(DirpeekError):
    """Raised when a CSV file cannot be parsed at all."""
