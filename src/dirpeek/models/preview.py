"""CSV preview dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CsvPreview:
    """Header plus the first rows of a delimited text file."""

    header: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    skipped_rows: int = 0
    truncated: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.header
