"""Command-line front door for lazytree.

Parses CLI options, merges them with persisted defaults, and prints the
tree diagram for the requested directory in one write.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from . import __version__
from .config import (
    load_default_depth,
    load_no_color,
    load_respect_gitignore,
    load_show_gitkeep,
    load_theme_name,
    save_defaults,
)
from .tree import DEFAULT_MAX_DEPTH, grow
from .tree_model import CURRENT_DIR_TOKEN, RootResolutionError, TreeInvariantError
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _is_plain_int(value: str) -> bool:
    return value.isascii() and value.isdigit()


def resolve_path_and_depth(path: str, depth: int | None) -> tuple[str, int | None]:
    """Apply the ``lazytree 4`` shorthand.

    When no explicit depth was given and ``path`` is a plain non-negative
    integer, it is taken as the depth and the current directory is rendered.
    """
    if depth is None and _is_plain_int(path):
        return CURRENT_DIR_TOKEN, int(path)
    return path, depth


def _pick(flag: bool | None, configured: bool) -> bool:
    return configured if flag is None else flag


def should_colorize(color: bool | None, stream: TextIO | None = None) -> bool:
    """Return whether directory names should carry ANSI styling.

    An explicit ``color`` choice always wins. Otherwise ``CLICOLOR_FORCE``
    forces color, and ``NO_COLOR`` or a non-terminal ``stream`` disables it.
    """
    if color is not None:
        return color
    force = os.environ.get("CLICOLOR_FORCE", "")
    if force and force != "0":
        return True
    if os.environ.get("NO_COLOR"):
        return False
    target = stream if stream is not None else sys.stdout
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


def setup_logging(verbose: bool = False) -> None:
    """Send diagnostics to stderr; DEBUG when ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazytree", description="A basic tree cli tool.")
    parser.add_argument(
        "path",
        nargs="?",
        default=CURRENT_DIR_TOKEN,
        help="File path for tree to run from, defaults to the current directory.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        dest="depth",
        type=_non_negative_int,
        default=None,
        help=f"Maximum depth to descend (default: config value or {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Directory highlight theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force (--color) or disable (--no-color) directory highlighting.",
    )
    parser.add_argument(
        "--show-gitkeep",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="List .gitkeep placeholder files.",
    )
    parser.add_argument(
        "--ignore",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Hide (--ignore) or show (--no-ignore) paths ignored by git.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the effective depth, theme, and filter options as defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested path.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is parsed.
    Fatal errors exit through ``SystemExit`` with a diagnostic message.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    path, max_depth = resolve_path_and_depth(args.path, args.depth)
    if max_depth is None:
        configured_depth = load_default_depth()
        max_depth = configured_depth if configured_depth is not None else DEFAULT_MAX_DEPTH

    no_color = not _pick(args.color, not load_no_color())
    theme_name = args.theme or load_theme_name()
    show_gitkeep = _pick(args.show_gitkeep, load_show_gitkeep())
    respect_gitignore = _pick(args.ignore, load_respect_gitignore())

    if args.save_defaults:
        save_defaults(
            max_depth=max_depth,
            theme_name=theme_name,
            no_color=no_color,
            show_gitkeep=show_gitkeep,
            respect_gitignore=respect_gitignore,
        )

    if not Path(path).exists():
        raise SystemExit(f"Path not found: {path}")

    color_choice = False if no_color else args.color
    theme = resolve_theme(theme_name, no_color=not should_colorize(color_choice))
    logger.debug("rendering %s to depth %d with theme %s", path, max_depth, theme.name)
    try:
        output = grow(
            path,
            max_depth,
            theme=theme,
            skip_gitkeep=not show_gitkeep,
            respect_gitignore=respect_gitignore,
        )
    except (RootResolutionError, TreeInvariantError) as exc:
        raise SystemExit(f"lazytree: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"lazytree: cannot read {path}: {exc}") from exc

    sys.stdout.write(output)


if __name__ == "__main__":
    main()
