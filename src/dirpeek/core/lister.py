"""Directory-mode rows built from an aggregated scan."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path

from dirpeek.core.aggregator import ProgressCallback, SizeAggregator
from dirpeek.models.entry import AggregateResult, Entry
from dirpeek.settings import DEFAULT_EXT_SUMMARY_LIMIT, ScanOptions, SortKey
from dirpeek.utils import bytes_to_human, file_extension

log = logging.getLogger(__name__)

COLUMNS = ("Name", "Type", "Size")
TOTAL_LABEL = "Total"
NO_EXTENSION = "(none)"
UNSIZED = "-"


@dataclass(slots=True)
class Listing:
    """Aggregated scan plus the table columns rendered from it."""

    result: AggregateResult
    columns: dict[str, list[str]]


def list_entries(
    root: Path,
    options: ScanOptions | None = None,
    on_progress: ProgressCallback | None = None,
) -> Listing:
    """Scan ``root`` and build its directory-mode table."""
    options = options or ScanOptions()
    aggregator = SizeAggregator(
        on_progress=on_progress,
        follow_symlinks=options.follow_symlinks,
        ignore=options.ignore,
        recursive=options.recursive,
    )
    result = aggregator.aggregate(root)
    if result.skipped:
        log.info("Skipped %d unreadable entries under %s", len(result.skipped), root)
    columns = build_rows(result, sort=options.sort, top=options.top, min_size=options.min_size)
    return Listing(result=result, columns=columns)


def sort_entries(entries: list[Entry], sort: SortKey = SortKey.NONE) -> list[Entry]:
    """Order entries; ``SortKey.NONE`` keeps the filesystem listing order."""
    match sort:
        case SortKey.SIZE:
            return sorted(entries, key=lambda e: e.size_bytes, reverse=True)
        case SortKey.NAME:
            return sorted(entries, key=lambda e: e.name.lower())
        case SortKey.TYPE:
            return sorted(entries, key=lambda e: (e.type_label.lower(), e.name.lower()))
        case _:
            return list(entries)


def build_rows(
    result: AggregateResult,
    *,
    sort: SortKey = SortKey.NONE,
    top: int | None = None,
    min_size: int | None = None,
) -> dict[str, list[str]]:
    """Return ``{"Name", "Type", "Size"}`` columns ending with a total row.

    Filters only hide rows; the total always covers the whole scan.
    """
    entries = sort_entries(result.entries, sort)
    if min_size is not None:
        entries = [e for e in entries if e.size_bytes >= min_size]
    if top is not None:
        entries = entries[:top]

    columns: dict[str, list[str]] = {name: [] for name in COLUMNS}
    for entry in entries:
        columns["Name"].append(entry.name)
        columns["Type"].append(entry.type_label)
        if entry.is_dir and not result.recursive:
            columns["Size"].append(UNSIZED)
        else:
            columns["Size"].append(bytes_to_human(entry.size_bytes))

    columns["Name"].append(TOTAL_LABEL)
    columns["Type"].append("")
    columns["Size"].append(bytes_to_human(result.total_bytes))
    return columns


def extension_summary(
    result: AggregateResult,
    limit: int = DEFAULT_EXT_SUMMARY_LIMIT,
) -> list[tuple[str, int, int]]:
    """Per-extension ``(extension, file_count, total_bytes)`` of top-level files, largest first."""
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for entry in result.entries:
        if entry.is_dir:
            continue
        bucket = totals[file_extension(entry.name) or NO_EXTENSION]
        bucket[0] += 1
        bucket[1] += entry.size_bytes

    ranked = sorted(totals.items(), key=lambda item: (-item[1][1], item[0]))
    return [(ext, count, size) for ext, (count, size) in ranked[:limit]]
