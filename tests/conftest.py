"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """a.txt (100 B), b.csv (5000 B) and sub/c.log (50 B)."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"a" * 100)
    (root / "b.csv").write_bytes(b"b" * 5000)
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.log").write_bytes(b"c" * 50)
    return root


@pytest.fixture
def locked_dir(tmp_path):
    """Factory that revokes all permissions on a directory and restores them afterwards."""
    locked: list = []

    def _lock(path):
        path.chmod(0)
        locked.append(path)
        return path

    yield _lock

    for path in locked:
        path.chmod(0o755)


@pytest.fixture
def csv_file(tmp_path):
    """CSV with a header and 15 data rows."""
    path = tmp_path / "data.csv"
    lines = ["id,name,score"] + [f"{i},name{i},{i * 10}" for i in range(1, 16)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
