"""Recursive directory size aggregation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from dirpeek.core.classifier import classify_path
from dirpeek.errors import TargetUnreadable
from dirpeek.models.entry import AggregateResult, Entry, EntryKind, ScanProgress, SkippedEntry
from dirpeek.utils import os_error_reason

log = logging.getLogger(__name__)

ProgressCallback = Callable[[ScanProgress], None]

# Heavy folders pruned by --smart-ignore.
SMART_IGNORE = frozenset({".git", "node_modules", "target", "dist", "build", ".idea", ".vscode"})

LOOP_REASON = "filesystem loop"

DirKey = tuple[int, int]


def _dir_key(path: Path | str) -> DirKey:
    """Identity of a directory, with symlinks resolved."""
    st = os.stat(path)
    return st.st_dev, st.st_ino


class SizeAggregator:
    """Sizes the immediate children of a directory.

    Files are sized directly, directories by walking their whole subtree
    depth-first. Entries that cannot be read become ``SkippedEntry`` values:
    they are left out of every sum and never abort the scan.

    Every visited entry, at any depth, emits one ``ScanProgress`` tick to
    ``on_progress``. The number of entries is not known up front.

    When following symlinks, a directory that is one of its own ancestors is
    a loop: it is skipped instead of descended into again.

    With ``recursive=False`` only the first layer is read and directories are
    left unmeasured (size 0).
    """

    def __init__(
        self,
        *,
        on_progress: ProgressCallback | None = None,
        follow_symlinks: bool = False,
        ignore: Iterable[str] = (),
        recursive: bool = True,
    ) -> None:
        self._on_progress = on_progress
        self._follow = follow_symlinks
        self._ignore = frozenset(name.lower() for name in ignore)
        self._recursive = recursive
        self._visited = 0
        self._skipped: list[SkippedEntry] = []

    def aggregate(self, root: Path) -> AggregateResult:
        """Scan ``root`` and return its children in listing order plus the total.

        Raises:
            TargetUnreadable: if ``root`` itself cannot be listed.
        """
        self._visited = 0
        self._skipped = []

        try:
            with os.scandir(root) as it:
                children = list(it)
            ancestry = frozenset({_dir_key(root)}) if self._follow else frozenset()
        except OSError as e:
            raise TargetUnreadable(root, os_error_reason(e)) from e

        result = AggregateResult(root=root, recursive=self._recursive)
        for child in children:
            if self._is_ignored(child):
                continue
            self._tick(Path(child.path))
            outcome = self._measure(child, ancestry)
            if isinstance(outcome, SkippedEntry):
                self._skip(outcome)
                continue
            result.entries.append(outcome)
            result.total_bytes += outcome.size_bytes

        result.skipped = list(self._skipped)
        result.visited = self._visited
        log.info(
            "Scanned %s: %d entries visited, %d bytes, %d skipped",
            root,
            result.visited,
            result.total_bytes,
            len(result.skipped),
        )
        return result

    def subtree_size(self, top: Path, ancestry: frozenset[DirKey] = frozenset()) -> int:
        """Return the byte sum of every accessible file below ``top``.

        ``ancestry`` holds the identities of the directories above ``top``
        and is only consulted when following symlinks.

        Unreadable descendants are recorded as skipped. Only a failure to
        list ``top`` itself is raised, as ``OSError``.
        """
        total = 0
        stack: list[tuple[Path, frozenset[DirKey]]] = [(top, ancestry)]
        while stack:
            current, parents = stack.pop()
            try:
                with os.scandir(current) as it:
                    children = list(it)
                if self._follow:
                    parents = parents | {_dir_key(current)}
            except OSError as e:
                if current == top:
                    raise
                self._skip(SkippedEntry(current, os_error_reason(e)))
                continue

            for child in children:
                if self._is_ignored(child):
                    continue
                child_path = Path(child.path)
                self._tick(child_path)
                try:
                    if not child.is_dir(follow_symlinks=self._follow):
                        total += self._file_size(child)
                    elif self._follow and _dir_key(child_path) in parents:
                        self._skip(SkippedEntry(child_path, LOOP_REASON))
                    else:
                        stack.append((child_path, parents))
                except OSError as e:
                    self._skip(SkippedEntry(child_path, os_error_reason(e)))
        return total

    def _measure(self, child: os.DirEntry, ancestry: frozenset[DirKey]) -> Entry | SkippedEntry:
        """Size one immediate child, turning read failures into a skip."""
        path = Path(child.path)
        try:
            is_dir = child.is_dir(follow_symlinks=self._follow)
            if not is_dir:
                size = self._file_size(child)
            elif not self._recursive:
                size = 0
            elif self._follow and _dir_key(path) in ancestry:
                return SkippedEntry(path, LOOP_REASON)
            else:
                size = self.subtree_size(path, ancestry)
        except OSError as e:
            return SkippedEntry(path, os_error_reason(e))

        return Entry(
            name=child.name,
            kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
            size_bytes=size,
            type_label=classify_path(path, is_dir=is_dir),
            path=path,
        )

    def _file_size(self, entry: os.DirEntry) -> int:
        if entry.is_symlink() and not self._follow:
            # Sized as the link itself; a dangling link is unreadable.
            os.stat(entry.path)
            return entry.stat(follow_symlinks=False).st_size
        return entry.stat(follow_symlinks=self._follow).st_size

    def _is_ignored(self, entry: os.DirEntry) -> bool:
        return bool(self._ignore) and entry.name.lower() in self._ignore

    def _tick(self, path: Path) -> None:
        self._visited += 1
        if self._on_progress is not None:
            self._on_progress(ScanProgress(visited=self._visited, current=path))

    def _skip(self, skipped: SkippedEntry) -> None:
        log.debug("Cannot access %s: %s", skipped.path, skipped.reason)
        self._skipped.append(skipped)


def aggregate(
    root: Path,
    *,
    on_progress: ProgressCallback | None = None,
    follow_symlinks: bool = False,
    ignore: Iterable[str] = (),
    recursive: bool = True,
) -> AggregateResult:
    """Convenience wrapper around ``SizeAggregator.aggregate``."""
    aggregator = SizeAggregator(
        on_progress=on_progress,
        follow_symlinks=follow_symlinks,
        ignore=ignore,
        recursive=recursive,
    )
    return aggregator.aggregate(root)
