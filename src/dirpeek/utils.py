"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string (binary units)."""
    if size_bytes < 0:
        return f"-{bytes_to_human(-size_bytes)}"
    if size_bytes == 0:
        return "0 B"

    units = ("B", "KB", "MB", "GB", "TB")
    value = float(size_bytes)
    for unit in units[:-1]:
        if unit == "B" and value < 1024:
            return f"{int(value)} B"
        # Compare the rounded value so 1023.96 KB shows as 1.0 MB.
        if unit != "B" and round(value, 1) < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {units[-1]}"


def file_extension(path: Path | str) -> str:
    """Return the lowercased extension without its leading dot.

    Dotfiles such as ``.env`` have no extension.
    """
    return Path(path).suffix.lower().lstrip(".")


def format_root_name(path: Path) -> str:
    """Display name for a scanned root: its base name, or the path itself for '/'."""
    try:
        resolved = path.resolve()
    except OSError:
        resolved = path
    return resolved.name or str(resolved)


def os_error_reason(exc: OSError) -> str:
    """Short description of an OSError without the path repeated."""
    if exc.strerror:
        return exc.strerror
    if exc.errno:
        return os.strerror(exc.errno)
    return str(exc) or type(exc).__name__
