"""Domain model for filesystem entries feeding the tree renderer.

This package contains non-UI primitives:
- the ``Entry`` datatype and the entry-or-error walk item
- a lazy bounded filesystem walk
- filtering and the ordering contract used by the backward render pass
"""

from __future__ import annotations

from .types import Entry, WalkItem
from .fs import (
    KEEP_MARKER_NAME,
    VCS_DIR_NAME,
    collect_entries,
    iter_walk,
    maybe_gitignore_matcher,
    sort_key,
)

__all__ = [
    "Entry",
    "WalkItem",
    "KEEP_MARKER_NAME",
    "VCS_DIR_NAME",
    "collect_entries",
    "iter_walk",
    "maybe_gitignore_matcher",
    "sort_key",
]
