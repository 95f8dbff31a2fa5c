"""Domain datatypes for filesystem entries collected for a tree diagram."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One file or directory observed during a bounded walk.

    ``depth`` counts path components below the traversal root, which is
    itself recorded at depth 0.
    """

    path: Path
    name: str
    is_directory: bool
    depth: int


WalkItem = Entry | OSError


__all__ = [
    "Entry",
    "WalkItem",
]
