"""Tests for extension classification."""

from __future__ import annotations

from pathlib import Path

import pytest

from dirpeek.core.classifier import DEFAULT_LABEL, DIRECTORY_LABEL, classify, classify_path


class TestClassify:
    @pytest.mark.parametrize(
        ("extension", "label"),
        [
            ("txt", "Text"),
            ("csv", "CSV"),
            ("py", "Python"),
            ("jpg", "JPEG Image"),
            ("jpeg", "JPEG Image"),
            ("mp4", "MP4 Video"),
        ],
    )
    def test_known_extensions(self, extension, label):
        assert classify(extension) == label

    def test_case_and_leading_dot_ignored(self):
        assert classify(".TXT") == "Text"
        assert classify("Md") == "Markdown"

    def test_unknown_extension(self):
        assert classify("qwerty") == DEFAULT_LABEL

    def test_missing_extension(self):
        assert classify("") == DEFAULT_LABEL


class TestClassifyPath:
    def test_directory_label_wins(self):
        assert classify_path(Path("photos.jpg"), is_dir=True) == DIRECTORY_LABEL

    def test_file_by_suffix(self):
        assert classify_path(Path("notes/README.md")) == "Markdown"

    def test_dotfile_has_no_extension(self):
        assert classify_path(".env") == DEFAULT_LABEL

    def test_only_last_suffix_counts(self):
        assert classify_path("backup.tar.gz") == "Gzip Archive"
