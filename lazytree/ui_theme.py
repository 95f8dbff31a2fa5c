"""UI theme definitions and selection helpers.

Themes only decide how directory names are highlighted; layout and ordering
never depend on them. Styles are Pygments console attributes (``"blue"``,
``"*blue*"`` for bold) rendered through ``pygments.console.ansiformat``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Named directory highlight style; an empty style means plain text."""

    name: str
    tree_dir: str

    def style_dir(self, text: str) -> str:
        """Return ``text`` wrapped in this theme's directory style."""
        if not self.tree_dir:
            return text
        return ansiformat(self.tree_dir, text)


DEFAULT_THEME = UITheme(name="default", tree_dir="blue")
BOLD_THEME = UITheme(name="bold", tree_dir="*blue*")
OCEAN_THEME = UITheme(name="ocean", tree_dir="brightcyan")
PLAIN_THEME = UITheme(name="plain", tree_dir="")

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    BOLD_THEME.name: BOLD_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "BOLD_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
