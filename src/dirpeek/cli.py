"""CLI interface for dirpeek."""

from __future__ import annotations

import logging
import stat
import sys
from pathlib import Path

import click

from dirpeek.core.lister import extension_summary, list_entries
from dirpeek.core.viewer import is_csv, preview_columns, preview_csv, read_raw
from dirpeek.errors import CsvPreviewError, DirpeekError, PathNotFound, TargetUnreadable
from dirpeek.presenter import ScanSpinner, make_console, render_extension_summary, render_table
from dirpeek.settings import DEFAULT_PREVIEW_ROWS, ScanOptions, SortKey
from dirpeek.utils import format_root_name, os_error_reason

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _stat_target(path: Path) -> bool:
    """Return True if ``path`` is a directory, raising if it cannot be statted."""
    try:
        st = path.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise PathNotFound(path) from e
    except OSError as e:
        raise TargetUnreadable(path, os_error_reason(e)) from e
    return stat.S_ISDIR(st.st_mode)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, default=".", type=click.Path(path_type=Path))
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option(
    "-s",
    "--sort",
    type=click.Choice([key.value for key in SortKey]),
    default=SortKey.NONE.value,
    show_default=True,
    help="Row order; 'none' keeps the directory listing order",
)
@click.option("-n", "--top", type=click.IntRange(min=1), default=None, help="Show only the first N rows")
@click.option("--min-size", type=click.IntRange(min=0), default=None, help="Hide rows smaller than BYTES")
@click.option("-L", "--follow-symlinks", is_flag=True, help="Follow symbolic links while scanning")
@click.option("-i", "--smart-ignore", is_flag=True, help="Skip .git, node_modules, target, dist, build, .idea, .vscode")
@click.option(
    "-d",
    "--depth",
    type=click.IntRange(0, 1),
    default=1,
    show_default=True,
    help="0 lists the first layer only without sizing directories; 1 sizes full subtrees",
)
@click.option("-e", "--ext", "ext_summary", is_flag=True, help="Also print a per-extension summary")
@click.option("--progress/--no-progress", default=True, help="Show a spinner on stderr while scanning")
@click.option(
    "-r",
    "--rows",
    "preview_rows",
    type=click.IntRange(min=1),
    default=DEFAULT_PREVIEW_ROWS,
    show_default=True,
    help="Data rows shown in a CSV preview",
)
def main(
    path: Path,
    verbose: int,
    sort: str,
    top: int | None,
    min_size: int | None,
    follow_symlinks: bool,
    smart_ignore: bool,
    depth: int,
    ext_summary: bool,
    progress: bool,
    preview_rows: int,
) -> None:
    """Inspect PATH (default: current directory).

    A directory is listed with the recursive size and type of each entry.
    A CSV file is previewed as a table; any other file is printed as is.
    """
    _setup_logging(verbose)
    options = ScanOptions(
        sort=SortKey(sort),
        top=top,
        min_size=min_size,
        follow_symlinks=follow_symlinks,
        smart_ignore=smart_ignore,
        depth=depth,
        show_progress=progress,
        ext_summary=ext_summary,
        preview_rows=preview_rows,
    )

    try:
        if _stat_target(path):
            _directory_mode(path, options)
        elif is_csv(path):
            _csv_mode(path, options)
        else:
            _file_mode(path)
    except DirpeekError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ── modes ────────────────────────────────────────────────────────────────

def _directory_mode(path: Path, options: ScanOptions) -> None:
    root_name = format_root_name(path)
    spinner_enabled = options.show_progress and sys.stderr.isatty()

    with ScanSpinner(f"Scanning {root_name}…", enabled=spinner_enabled) as spinner:
        listing = list_entries(path, options, on_progress=spinner)

    console = make_console()
    render_table(listing.columns, title=f"📂 {root_name}", total_row=True, console=console)
    if options.ext_summary:
        render_extension_summary(extension_summary(listing.result), console=console)


def _csv_mode(path: Path, options: ScanOptions) -> None:
    try:
        preview = preview_csv(path, options.preview_rows)
    except CsvPreviewError as exc:
        log.warning("%s; showing raw content instead", exc)
        _file_mode(path)
        return

    if preview.is_empty:
        click.echo(f"{path.name}: empty CSV file, nothing to preview")
        return

    notes = []
    if not preview.rows:
        notes.append("no data rows")
    elif preview.truncated:
        notes.append(f"first {len(preview.rows)} rows")
    if preview.skipped_rows:
        notes.append(f"{preview.skipped_rows} malformed row(s) skipped")

    render_table(
        preview_columns(preview),
        title=path.name,
        caption=", ".join(notes) or None,
        console=make_console(),
    )


def _file_mode(path: Path) -> None:
    data = read_raw(path)
    stream = sys.stdout.buffer
    stream.write(data)
    stream.flush()
