"""Command-line front door for outlinebar.

Parses CLI options, loads the source text, and picks an item matcher.
Then prints the navbar (or the plain tree) for the file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from . import config
from .lang import UnsupportedLanguageError, language_for_path, matcher_for_language
from .lang.types import ItemKind
from .outline import build_outline, kind_marker_label, render_navbar, row_index_for_line
from .source import STDIN_PATH, read_source
from .tree import DEFAULT_STYLE_NAME, OutlineRow, TreeNode, UnknownStyleError, available_style_names, get_style, render_tree
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

STDIN_LANGUAGE = "python"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _stdout_is_tty() -> bool:
    return sys.stdout.isatty()


def _themed_label(theme: UITheme, base: Callable[[TreeNode], str]) -> Callable[[TreeNode], str]:
    """Wrap ``base`` so labels are colored by declaration kind."""

    def label(node: TreeNode) -> str:
        text = base(node)
        color = theme.color_for_kind(getattr(node, "kind", ItemKind.NONE))
        if not color:
            return text
        return f"{color}{text}{theme.reset}"

    return label


def format_rows(rows: list[OutlineRow], theme: UITheme, selected_idx: int | None = None) -> str:
    """Join row texts, highlighting ``selected_idx`` when the theme supports it."""
    out: list[str] = []
    for idx, row in enumerate(rows):
        text = row.text
        if idx == selected_idx and theme.reverse:
            text = f"{theme.reverse}{text}{theme.reset}"
        out.append(text + "\n")
    return "".join(out)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outlinebar",
        description="Print a class/function/variable outline of a source file as a tree.",
    )
    parser.add_argument("path", help=f"Path to source file ({STDIN_PATH!r} reads standard input).")
    parser.add_argument(
        "--style",
        default=None,
        help=f"Tree glyph style ({', '.join(available_style_names())}).",
    )
    parser.add_argument(
        "--spacing",
        type=_nonnegative_int,
        default=None,
        help="Extra fill characters added after each glyph.",
    )
    parser.add_argument("--flat", action="store_true", help="Print the nested tree instead of Classes/Functions/Variables buckets.")
    parser.add_argument("--hide-root", action="store_true", help="Omit the root row in --flat mode.")
    parser.add_argument("--depth", type=_nonnegative_int, default=None, help="Collapse declarations nested at this depth or deeper.")
    parser.add_argument("--line", type=_positive_int, default=None, help="Highlight the declaration enclosing this source line.")
    parser.add_argument("--markers", action="store_true", help="Prefix labels with a kind marker (C, f, v).")
    parser.add_argument("--language", default=None, help="Language key, overriding detection from the file name.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--save", action="store_true", help="Persist the chosen style, spacing, and theme as defaults.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose (debug) output.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the outline of one file.

    Style and spacing default to persisted config values. Missing paths,
    unknown styles, and unsupported languages exit with a message.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("outlinebar").setLevel(logging.DEBUG)

    if args.path != STDIN_PATH:
        path = Path(args.path)
        if not path.exists():
            raise SystemExit(f"Path not found: {path}")
        if path.is_dir():
            raise SystemExit("Outline is available for files only.")
    else:
        path = None

    source = read_source(args.path)

    language = args.language
    if language is None:
        language = STDIN_LANGUAGE if path is None else language_for_path(path, source)
    if language is None:
        raise SystemExit(f"No outline matcher configured for {path.suffix or path.name}.")
    try:
        matcher = matcher_for_language(language)
    except UnsupportedLanguageError as exc:
        raise SystemExit(str(exc)) from exc

    style_name = args.style or config.load_style_name() or DEFAULT_STYLE_NAME
    spacing = args.spacing if args.spacing is not None else (config.load_spacing() or 0)
    try:
        get_style(style_name, spacing)
    except UnknownStyleError as exc:
        raise SystemExit(str(exc)) from exc
    if args.save:
        config.save_style_name(style_name)
        config.save_spacing(spacing)
        if args.theme:
            config.save_theme_name(args.theme)

    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color or not _stdout_is_tty())
    base_label = kind_marker_label if args.markers else TreeNode.get_label
    label = _themed_label(theme, base_label)

    tree = build_outline(source, matcher)
    logger.debug("outlined %d declarations as %s", sum(1 for _ in tree.walk()) - 1, language)
    if args.depth is not None:
        tree.close_below(args.depth)

    if args.flat:
        rows = render_tree(tree, style_name, spacing, hide_root=args.hide_root, label=label)
    else:
        rows = render_navbar(tree, style_name, spacing, label=label)

    selected_idx = row_index_for_line(rows, args.line) if args.line is not None else None
    sys.stdout.write(format_rows(rows, theme, selected_idx))


if __name__ == "__main__":
    main()
