"""Tree-diagram rendering: connector glyphs and the backward-pass renderer."""

from __future__ import annotations

from .glyphs import BAR, BLANK, ELBOW, TEE
from .rendering import (
    CURRENT_DIR_TOKEN,
    OpenLevels,
    RootResolutionError,
    TreeInvariantError,
    display_text,
    render_step,
    render_tree,
    resolve_root_name,
)

__all__ = [
    "BAR",
    "BLANK",
    "ELBOW",
    "TEE",
    "CURRENT_DIR_TOKEN",
    "OpenLevels",
    "RootResolutionError",
    "TreeInvariantError",
    "display_text",
    "render_step",
    "render_tree",
    "resolve_root_name",
]
