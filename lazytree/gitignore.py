"""Gitignore-aware path filtering for the entry collector.

Asks git which untracked paths under a work tree are ignored; outside a
repository, or without a git executable, nothing is filtered.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitIgnoreMatcher:
    """Ignored paths (files, or directories covering their subtree) under ``root``."""

    root: Path
    ignored: frozenset[Path]

    def is_ignored(self, path: Path) -> bool:
        # Only the parent is resolved so a symlink is matched by its own name.
        candidate = path.parent.resolve() / path.name
        if not candidate.is_relative_to(self.root):
            return False
        for current in (candidate, *candidate.parents):
            if current in self.ignored:
                return True
            if current == self.root:
                break
        return False


def _git(*args: str) -> bytes | None:
    """Run git and return stdout, or ``None`` when the command fails."""
    try:
        proc = subprocess.run(
            ["git", *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("git %s failed: %s", " ".join(args), exc)
        return None
    return proc.stdout


def load_gitignore_matcher(root: Path) -> GitIgnoreMatcher | None:
    """Return a matcher for ``root``, or ``None`` when git cannot answer."""
    if shutil.which("git") is None:
        logger.debug("git executable not found; gitignore rules not applied")
        return None

    root = root.resolve()
    top_level = _git("-C", str(root), "rev-parse", "--show-toplevel")
    if not top_level or not top_level.strip():
        return None
    repo_root = Path(top_level.decode("utf-8", errors="surrogateescape").strip()).resolve()

    listing = _git(
        "-C", str(repo_root), "ls-files", "-z", "--others", "-i", "--exclude-standard", "--directory"
    )
    if listing is None:
        return None

    ignored: set[Path] = set()
    for raw in listing.split(b"\x00"):
        rel = raw.decode("utf-8", errors="surrogateescape").rstrip("/")
        if not rel:
            continue
        path = repo_root / rel
        if path.is_relative_to(root):
            ignored.add(path)

    logger.debug("gitignore matcher for %s: %d ignored paths", root, len(ignored))
    return GitIgnoreMatcher(root=root, ignored=frozenset(ignored))


__all__ = [
    "GitIgnoreMatcher",
    "load_gitignore_matcher",
]
