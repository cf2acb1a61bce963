"""File-mode content: raw bytes or a CSV preview."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from dirpeek.errors import CsvPreviewError, PathNotFound, TargetUnreadable
from dirpeek.models.preview import CsvPreview
from dirpeek.settings import DEFAULT_PREVIEW_ROWS
from dirpeek.utils import file_extension, os_error_reason

log = logging.getLogger(__name__)

_DELIMITERS = {"csv": ",", "tsv": "\t"}


def is_csv(path: Path) -> bool:
    """Whether ``path`` is previewed as a table (.csv or .tsv)."""
    return file_extension(path) in _DELIMITERS


def read_raw(path: Path) -> bytes:
    """Return the whole file content exactly as stored."""
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise PathNotFound(path) from e
    except OSError as e:
        raise TargetUnreadable(path, os_error_reason(e)) from e


def preview_csv(path: Path, limit: int = DEFAULT_PREVIEW_ROWS) -> CsvPreview:
    """Read the header and up to ``limit`` data rows of a delimited file.

    Rows whose column count differs from the header are skipped and counted.
    Blank lines are ignored.

    Raises:
        CsvPreviewError: if the file is not decodable text or not parsable.
        TargetUnreadable: if the file cannot be opened.
    """
    delimiter = _DELIMITERS.get(file_extension(path), ",")
    preview = CsvPreview()

    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f, delimiter=delimiter, strict=True)
            for row in reader:
                if not row:
                    continue
                if not preview.header:
                    preview.header = row
                    continue
                if len(row) != len(preview.header):
                    preview.skipped_rows += 1
                    log.debug("Skipping malformed row %d in %s", reader.line_num, path)
                    continue
                if len(preview.rows) >= limit:
                    preview.truncated = True
                    break
                preview.rows.append(row)
    except FileNotFoundError as e:
        raise PathNotFound(path) from e
    except UnicodeDecodeError as e:
        raise CsvPreviewError(f"{path} is not UTF-8 text: {e.reason}") from e
    except csv.Error as e:
        raise CsvPreviewError(f"{path} is not valid CSV: {e}") from e
    except OSError as e:
        raise TargetUnreadable(path, os_error_reason(e)) from e

    return preview


def preview_columns(preview: CsvPreview) -> dict[str, list[str]]:
    """Turn a preview into a column-name to values mapping.

    Repeated or blank header names get a positional suffix so no column is lost.
    """
    names: list[str] = []
    seen: set[str] = set()
    for index, raw in enumerate(preview.header, 1):
        name = raw.strip() or f"column {index}"
        if name in seen:
            name = f"{name} ({index})"
        seen.add(name)
        names.append(name)

    columns: dict[str, list[str]] = {name: [] for name in names}
    for row in preview.rows:
        for name, value in zip(names, row):
            columns[name].append(value)
    return columns
