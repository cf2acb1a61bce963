"""Per-invocation options.

dirpeek reads no configuration file and no environment variables; every
option comes from the command line and the defaults reproduce the plain
``dirpeek PATH`` behavior.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dirpeek.core.aggregator import SMART_IGNORE

DEFAULT_PREVIEW_ROWS = 10
DEFAULT_EXT_SUMMARY_LIMIT = 20


class SortKey(str, Enum):
    """Row ordering for directory mode."""

    NONE = "none"
    SIZE = "size"
    NAME = "name"
    TYPE = "type"


@dataclass(frozen=True, slots=True)
class ScanOptions:
    """Options that shape a directory-mode run."""

    sort: SortKey = SortKey.NONE
    top: int | None = None
    min_size: int | None = None
    follow_symlinks: bool = False
    smart_ignore: bool = False
    depth: int = 1
    show_progress: bool = True
    ext_summary: bool = False
    preview_rows: int = DEFAULT_PREVIEW_ROWS

    @property
    def ignore(self) -> frozenset[str]:
        """Names pruned from the walk."""
        return SMART_IGNORE if self.smart_ignore else frozenset()

    @property
    def recursive(self) -> bool:
        """Depth 0 lists the first layer only, leaving directories unsized."""
        return self.depth > 0
