"""Backward-pass renderer turning ordered entries into tree diagram text.

Entries arrive in ``sort_key`` order. Walking them from last to first, the
first child met for any directory is that directory's last child in forward
order, so it gets the elbow connector and opens the directory's level: every
row above it, down to the directory itself, draws a continuation bar in that
column.
"""

from __future__ import annotations

import os
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..file_tree_model.types import Entry
from ..ui_theme import PLAIN_THEME, UITheme
from .glyphs import BAR, BLANK, ELBOW, TEE

CURRENT_DIR_TOKEN = "."


class RootResolutionError(RuntimeError):
    """Raised when the display name for ``.`` cannot be determined."""


class TreeInvariantError(RuntimeError):
    """Raised when an entry's parent directory is missing from the entry list."""


@dataclass(frozen=True)
class OpenLevels:
    """Depths of directories that still have children above the current row.

    At most one directory per depth can be open at any point of the backward
    pass, so the depth alone identifies it.
    """

    levels: frozenset[int] = frozenset()

    def __contains__(self, level: object) -> bool:
        return level in self.levels

    def opened(self, level: int) -> OpenLevels:
        return OpenLevels(self.levels | {level})

    def closed(self, level: int) -> OpenLevels:
        return OpenLevels(self.levels - {level})

    def indent(self, depth: int) -> str:
        """Return the ``depth - 1`` four-column segments preceding a connector."""
        return "".join(BAR if level in self.levels else BLANK for level in range(depth - 1))


def display_text(text: str) -> str:
    """Return ``text`` with undecodable filename bytes replaced by U+FFFD."""
    return os.fsencode(text).decode("utf-8", errors="replace")


def resolve_root_name(root: str) -> str:
    """Return the label shown on the root row.

    ``.`` resolves to the final component of the current working directory;
    any other root is shown verbatim.
    """
    if root != CURRENT_DIR_TOKEN:
        return display_text(root)
    try:
        resolved = Path.cwd()
    except OSError as exc:
        raise RootResolutionError(f"can't canonicalize '.': {exc}") from exc
    if not resolved.name:
        raise RootResolutionError(f"can't get file name of '.' ({resolved})")
    return display_text(resolved.name)


def render_step(
    state: OpenLevels,
    entry: Entry,
    directories: Collection[Path],
    root_label: str,
    theme: UITheme = PLAIN_THEME,
) -> tuple[OpenLevels, str]:
    """Render one row of the backward pass and return the next state."""
    if entry.is_directory:
        state = state.closed(entry.depth)

    if entry.depth == 0:
        label = theme.style_dir(root_label) if entry.is_directory else root_label
        return state, f"{label}\n"

    if entry.path.parent not in directories:
        raise TreeInvariantError(f"can't find parent dir of {entry.path}")

    indent = state.indent(entry.depth)
    parent_level = entry.depth - 1
    if parent_level in state:
        connector = TEE
    else:
        connector = ELBOW
        state = state.opened(parent_level)

    name = display_text(entry.name)
    if entry.is_directory:
        name = theme.style_dir(name)
    return state, f"{indent}{connector}{name}\n"


def render_tree(entries: Sequence[Entry], root: str | Path, *, theme: UITheme = PLAIN_THEME) -> str:
    """Render ordered ``entries`` as newline-terminated tree rows.

    ``root`` is the path token the walk started from; it labels the depth-0 row.
    """
    if not entries:
        return ""
    root_label = resolve_root_name(str(root))
    directories = frozenset(entry.path for entry in entries if entry.is_directory)

    state = OpenLevels()
    lines: list[str] = []
    for entry in reversed(entries):
        state, line = render_step(state, entry, directories, root_label, theme)
        lines.append(line)

    lines.reverse()
    return "".join(lines)


__all__ = [
    "CURRENT_DIR_TOKEN",
    "RootResolutionError",
    "TreeInvariantError",
    "OpenLevels",
    "display_text",
    "resolve_root_name",
    "render_step",
    "render_tree",
]
