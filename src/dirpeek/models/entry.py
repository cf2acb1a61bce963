"""Directory entry and scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Kind of a filesystem node under the scanned root."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class Entry:
    """Single immediate child of the scanned directory.

    For directories ``size_bytes`` is the recursive sum of every accessible
    file below it; grandchildren are folded into it, never listed.
    """

    name: str
    kind: EntryKind
    size_bytes: int
    type_label: str
    path: Path

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """Entry that could not be read and was left out of every sum."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class ScanProgress:
    """Progress tick emitted once per visited entry."""

    visited: int
    current: Path


@dataclass(slots=True)
class AggregateResult:
    """Result of sizing one directory."""

    root: Path
    entries: list[Entry] = field(default_factory=list)
    total_bytes: int = 0
    skipped: list[SkippedEntry] = field(default_factory=list)
    visited: int = 0
    recursive: bool = True
