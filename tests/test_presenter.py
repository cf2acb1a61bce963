"""Tests for table rendering and the scan spinner."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from dirpeek.models.entry import ScanProgress
from dirpeek.presenter import ScanSpinner, render_extension_summary, render_table


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, no_color=True, highlight=False)


def _output(console: Console) -> str:
    return console.file.getvalue()


class TestRenderTable:
    def test_bordered_columns_and_rows(self, console):
        render_table({"Name": ["a.txt", "sub"], "Size": ["100 B", "50 B"]}, console=console)
        out = _output(console)

        assert "┌" in out and "┘" in out
        for text in ("Name", "Size", "a.txt", "sub", "100 B", "50 B"):
            assert text in out
        assert out.index("a.txt") < out.index("sub")

    def test_title_and_caption(self, console):
        render_table({"id": ["1"]}, title="data.csv", caption="first 1 rows", console=console)
        out = _output(console)
        assert "data.csv" in out
        assert "first 1 rows" in out

    def test_long_title_and_caption_not_wrapped_on_narrow_table(self):
        console = Console(file=io.StringIO(), width=200, no_color=True, highlight=False)
        title = "a_rather_long_file_name_for_one_column.csv"
        caption = "3 malformed row(s) skipped; no data rows"

        render_table({"x": []}, title=title, caption=caption, console=console)

        lines = _output(console).splitlines()
        assert any(title in line for line in lines)
        assert any(caption in line for line in lines)

    def test_total_row_is_last(self, console):
        render_table(
            {"Name": ["a", "Total"], "Type": ["Text", ""], "Size": ["1 B", "1 B"]},
            console=console,
            total_row=True,
        )
        lines = [line for line in _output(console).splitlines() if "│" in line]
        assert "Total" in lines[-1]

    def test_header_only_table(self, console):
        render_table({"a": [], "b": []}, console=console)
        out = _output(console)
        assert "a" in out and "b" in out

    def test_ragged_columns_padded(self, console):
        render_table({"x": ["1", "2"], "y": ["3"]}, console=console)
        assert "2" in _output(console)


class TestExtensionSummary:
    def test_renders_rows(self, console):
        render_extension_summary([("txt", 2, 2048), ("(none)", 1, 5)], console=console)
        out = _output(console)
        assert "By extension (top 2)" in out
        assert "txt" in out and "2.0 KB" in out
        assert "(none)" in out and "5 B" in out


class TestScanSpinner:
    def test_disabled_ignores_ticks(self):
        with ScanSpinner(enabled=False) as spinner:
            spinner(ScanProgress(visited=1, current=Path("x")))
        assert spinner._progress is None

    def test_enabled_tracks_visited(self):
        console = Console(file=io.StringIO(), force_terminal=False)
        with ScanSpinner(enabled=True, console=console) as spinner:
            for i in range(1, 4):
                spinner(ScanProgress(visited=i, current=Path(f"f{i}")))
            task = spinner._progress.tasks[0]
            assert task.completed == 3
            assert task.total is None
        assert spinner._progress is None

    def test_stops_on_error(self):
        console = Console(file=io.StringIO(), force_terminal=False)
        spinner = ScanSpinner(enabled=True, console=console)
        with pytest.raises(RuntimeError):
            with spinner:
                raise RuntimeError("scan failed")
        assert spinner._progress is None
