"""Collect-then-render convenience used by the command line."""

from __future__ import annotations

from .file_tree_model import collect_entries
from .tree_model import render_tree
from .ui_theme import PLAIN_THEME, UITheme

DEFAULT_MAX_DEPTH = 5


def grow(
    root: str = ".",
    max_depth: int = DEFAULT_MAX_DEPTH,
    *,
    theme: UITheme = PLAIN_THEME,
    skip_gitkeep: bool = True,
    respect_gitignore: bool = True,
) -> str:
    """Return the tree diagram for ``root`` walked down to ``max_depth``."""
    entries = collect_entries(
        root,
        max_depth,
        skip_gitkeep=skip_gitkeep,
        respect_gitignore=respect_gitignore,
    )
    return render_tree(entries, root, theme=theme)


__all__ = ["DEFAULT_MAX_DEPTH", "grow"]
