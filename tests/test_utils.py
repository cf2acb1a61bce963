"""Tests for shared helpers."""

from __future__ import annotations

import errno
from pathlib import Path

from dirpeek.utils import bytes_to_human, file_extension, format_root_name, os_error_reason


class TestBytesToHuman:
    def test_zero(self):
        assert bytes_to_human(0) == "0 B"

    def test_bytes(self):
        assert bytes_to_human(100) == "100 B"
        assert bytes_to_human(1023) == "1023 B"

    def test_binary_units(self):
        assert bytes_to_human(1024) == "1.0 KB"
        assert bytes_to_human(5000) == "4.9 KB"
        assert bytes_to_human(5 * 1024**2) == "5.0 MB"
        assert bytes_to_human(3 * 1024**3) == "3.0 GB"
        assert bytes_to_human(2 * 1024**4) == "2.0 TB"

    def test_rounding_carries_into_next_unit(self):
        assert bytes_to_human(1024**2 - 1) == "1.0 MB"
        assert bytes_to_human(1024**3 - 1) == "1.0 GB"
        assert bytes_to_human(1023 * 1024) == "1023.0 KB"

    def test_negative(self):
        assert bytes_to_human(-2048) == "-2.0 KB"


class TestFileExtension:
    def test_lowercased_without_dot(self):
        assert file_extension("DATA.CSV") == "csv"

    def test_none(self):
        assert file_extension("Makefile") == ""
        assert file_extension(".bashrc") == ""


class TestFormatRootName:
    def test_base_name(self, tmp_path):
        assert format_root_name(tmp_path / "project") == "project"

    def test_current_directory_resolves(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert format_root_name(Path(".")) == tmp_path.name

    def test_filesystem_root(self):
        assert format_root_name(Path("/")) == "/"


class TestOsErrorReason:
    def test_strerror(self):
        exc = PermissionError(errno.EACCES, "Permission denied", "/x")
        assert os_error_reason(exc) == "Permission denied"

    def test_bare_error(self):
        assert os_error_reason(OSError("boom")) == "boom"
