"""Filesystem walking and ordering for tree diagrams.

``iter_walk`` lazily yields entries (or the ``OSError`` hit while reading
one); ``collect_entries`` drains it, drops failures, and sorts the result in
the order the renderer's backward pass expects.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from ..gitignore import GitIgnoreMatcher, load_gitignore_matcher
from .types import Entry, WalkItem

logger = logging.getLogger(__name__)

VCS_DIR_NAME = ".git"
KEEP_MARKER_NAME = ".gitkeep"

SortKey = tuple[tuple[str, ...], bool, str]


def sort_key(entry: Entry) -> SortKey:
    """Return ``(parent parts, is file, name)`` ordering key for ``entry``.

    Directories use their own path as the parent component so each directory
    sorts directly ahead of its files, which in turn precede its
    subdirectories. Parents compare component-wise, keeping every subtree
    contiguous.
    """
    parent = entry.path if entry.is_directory else entry.path.parent
    return (parent.parts, not entry.is_directory, entry.name)


def maybe_gitignore_matcher(root: Path, respect_gitignore: bool) -> GitIgnoreMatcher | None:
    """Return a gitignore matcher rooted at ``root`` when enabled."""
    if not respect_gitignore:
        return None
    return load_gitignore_matcher(root)


def iter_walk(
    root: Path,
    max_depth: int,
    exclude: Callable[[Path, str, int], bool] | None = None,
) -> Iterator[WalkItem]:
    """Yield ``root`` and its descendants down to ``max_depth``.

    Unreadable directories and entries whose type cannot be determined are
    yielded as the ``OSError`` raised for them. Symlinks are never followed.
    ``exclude(path, name, depth)`` prunes an entry and its whole subtree.
    Failing to stat or list ``root`` itself raises.
    """
    root_is_dir = stat.S_ISDIR(os.stat(root).st_mode)
    yield Entry(path=root, name=root.name or str(root), is_directory=root_is_dir, depth=0)
    if not root_is_dir or max_depth < 1:
        return

    pending: list[tuple[Path, int]] = [(root, 1)]
    while pending:
        directory, depth = pending.pop()
        try:
            with os.scandir(directory) as scanned:
                children = list(scanned)
        except OSError as exc:
            if depth == 1:
                raise
            yield exc
            continue

        for child in children:
            child_path = directory / child.name
            if exclude is not None and exclude(child_path, child.name, depth):
                continue
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as exc:
                yield exc
                continue
            yield Entry(path=child_path, name=child.name, is_directory=is_dir, depth=depth)
            if is_dir and depth < max_depth:
                pending.append((child_path, depth + 1))


def collect_entries(
    root: Path | str,
    max_depth: int,
    *,
    skip_gitkeep: bool = True,
    respect_gitignore: bool = True,
) -> tuple[Entry, ...]:
    """Collect and order every visible entry under ``root`` within ``max_depth``.

    Hidden entries are kept. The top-level ``.git`` directory is always pruned,
    ``.gitkeep`` markers are dropped when ``skip_gitkeep`` is set, and paths git
    reports as ignored are pruned when ``respect_gitignore`` is set.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    root = Path(root)
    ignore_matcher = maybe_gitignore_matcher(root, respect_gitignore)

    def exclude(path: Path, name: str, depth: int) -> bool:
        if depth == 1 and name == VCS_DIR_NAME:
            return True
        if skip_gitkeep and name == KEEP_MARKER_NAME:
            return True
        return ignore_matcher is not None and ignore_matcher.is_ignored(path)

    entries: list[Entry] = []
    skipped = 0
    for item in iter_walk(root, max_depth, exclude=exclude):
        if isinstance(item, OSError):
            skipped += 1
            logger.debug("skipping unreadable entry: %s", item)
            continue
        entries.append(item)

    entries.sort(key=sort_key)
    logger.debug("collected %d entries under %s (%d skipped)", len(entries), root, skipped)
    return tuple(entries)


__all__ = [
    "VCS_DIR_NAME",
    "KEEP_MARKER_NAME",
    "sort_key",
    "maybe_gitignore_matcher",
    "iter_walk",
    "collect_entries",
]
