"""dirpeek data models."""

from dirpeek.models.entry import AggregateResult, Entry, EntryKind, ScanProgress, SkippedEntry
from dirpeek.models.preview import CsvPreview

__all__ = [
    "AggregateResult",
    "CsvPreview",
    "Entry",
    "EntryKind",
    "ScanProgress",
    "SkippedEntry",
]
