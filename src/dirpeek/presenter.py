"""Terminal rendering: tables on stdout, scan spinner on stderr."""

from __future__ import annotations

import sys
from types import TracebackType

from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn
from rich.table import Table

from dirpeek.models.entry import ScanProgress
from dirpeek.utils import bytes_to_human

_RIGHT_ALIGNED = {"Size", "Bytes", "Files"}


def make_console(stderr: bool = False) -> Console:
    """Console for stdout (or stderr); wide and uncoloured when redirected."""
    stream = sys.stderr if stderr else sys.stdout
    if stream.isatty():
        return Console(stderr=stderr)
    return Console(stderr=stderr, width=200, no_color=True, highlight=False, soft_wrap=False)


def render_table(
    columns: dict[str, list[str]],
    *,
    title: str | None = None,
    caption: str | None = None,
    console: Console | None = None,
    total_row: bool = False,
) -> None:
    """Print a column-name to values mapping as a bordered table.

    With ``total_row`` the last row is set apart by a rule and bold text.
    """
    console = console or make_console()
    # Wide enough that rich never wraps the title or caption.
    min_width = max((cell_len(text) for text in (title, caption) if text), default=0) or None
    table = Table(box=box.SQUARE, title=title, caption=caption, header_style="bold cyan", min_width=min_width)
    for name in columns:
        table.add_column(name, justify="right" if name in _RIGHT_ALIGNED else "left", overflow="fold")

    values = list(columns.values())
    row_count = max((len(v) for v in values), default=0)
    for i in range(row_count):
        row = [v[i] if i < len(v) else "" for v in values]
        last = i == row_count - 1
        table.add_row(*row, end_section=total_row and i == row_count - 2, style="bold" if total_row and last else None)

    console.print(table)


def render_extension_summary(rows: list[tuple[str, int, int]], console: Console | None = None) -> None:
    """Print the per-extension summary produced by the lister."""
    columns: dict[str, list[str]] = {"Extension": [], "Files": [], "Size": []}
    for ext, count, size in rows:
        columns["Extension"].append(ext)
        columns["Files"].append(f"{count:,}")
        columns["Size"].append(bytes_to_human(size))
    render_table(columns, title=f"By extension (top {len(rows)})", console=console)


class ScanSpinner:
    """Indeterminate progress display fed by aggregator ticks.

    Usable as the aggregator's ``on_progress`` callback inside a ``with`` block.
    When disabled, ticks are ignored and nothing is drawn.
    """

    def __init__(self, description: str = "Scanning…", enabled: bool = True, console: Console | None = None) -> None:
        self._description = description
        self._enabled = enabled
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self._console = console

    def __enter__(self) -> ScanSpinner:
        if self._enabled:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                TextColumn("{task.completed:,.0f} entries"),
                TimeElapsedColumn(),
                transient=True,
                console=self._console or Console(stderr=True),
            )
            self._progress.start()
            self._task = self._progress.add_task(self._description, total=None)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task = None

    def __call__(self, progress: ScanProgress) -> None:
        if self._progress is not None and self._task is not None:
            self._progress.update(self._task, completed=progress.visited)
