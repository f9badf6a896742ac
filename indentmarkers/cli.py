"""Command-line front door for indentmarkers.

Loads a source file, builds its indentation map, and prints every line with
guides drawn into its leading whitespace.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .ansi import clip_ansi_line
from .config import MARKER_TYPES, IndentMarkerConfig
from .document import TextDocument
from .render import TerminalGuideRenderer
from .runtime import IndentMarkerView
from .runtime.config import load_marker_config, load_theme_name, save_marker_config, save_theme_name
from .syntax import colorized_lines, read_text, sanitize_terminal_text
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print a source file with indentation guides drawn into its leading whitespace."
    )
    parser.add_argument("path", help="Path to a text file.")
    parser.add_argument("--indent-unit", type=_positive_int, default=None, help="Columns per indent level.")
    parser.add_argument("--cursor-line", type=_positive_int, default=None, help="Line whose block is highlighted.")
    parser.add_argument("--from-line", type=_positive_int, default=1, help="First line to print.")
    parser.add_argument("--to-line", type=_positive_int, default=None, help="Last line to print.")
    parser.add_argument("--marker-type", choices=MARKER_TYPES, default=None, help="Draw guides on empty lines too.")
    parser.add_argument(
        "--hide-first-indent",
        action="store_true",
        default=None,
        help="Do not draw the outermost guide column.",
    )
    parser.add_argument(
        "--no-active",
        dest="highlight_active_block",
        action="store_false",
        default=None,
        help="Do not highlight the block containing the cursor line.",
    )
    parser.add_argument("--style", default="monokai", help="Pygments style name.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Guide theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for output (default: terminal width).",
    )
    parser.add_argument("--save-config", action="store_true", help="Persist marker options and theme.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def render_document(
    source: str,
    path: Path,
    config: IndentMarkerConfig,
    *,
    first_line: int = 1,
    last_line: int | None = None,
    cursor_line: int | None = None,
    style: str = "monokai",
    theme_name: str | None = None,
    no_color: bool = False,
    max_cols: int = 80,
) -> str:
    """Render lines ``first_line..last_line`` of ``source`` with indent guides."""
    document = TextDocument(sanitize_terminal_text(source))
    if first_line > document.line_count:
        raise ValueError(f"from line {first_line} is past the end of the file ({document.line_count} lines)")
    if last_line is not None and first_line > last_line:
        raise ValueError(f"from line {first_line} is after to line {last_line}")
    last = document.line_count if last_line is None else min(last_line, document.line_count)
    first = first_line
    if cursor_line is not None and cursor_line > document.line_count:
        raise ValueError(f"cursor line {cursor_line} is past the end of the file ({document.line_count} lines)")

    view = IndentMarkerView(config)
    view.update(document, [document.line_span(first, last)], cursor_line=cursor_line)

    colored = None if no_color else colorized_lines(document_text(document), path, style)
    renderer = TerminalGuideRenderer(resolve_theme(theme_name, no_color=no_color))

    out: list[str] = []
    for number in range(first, last + 1):
        line = document.line(number)
        row = renderer.render_line(
            view.entries[number],
            config.indent_unit,
            config,
            line.text,
            colored[number - 1] if colored is not None else None,
        )
        row = clip_ansi_line(row, max_cols)
        out.append(row)
        if "\033" in row:
            out.append("\033[0m")
        out.append("\n")
    return "".join(out)


def document_text(document: TextDocument) -> str:
    """Join document lines back into one string without carriage returns."""
    return "\n".join(line.text for line in document)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the file with indentation guides."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    path = Path(args.path)
    if not path.is_file():
        raise SystemExit(f"Path not found: {path}")

    config = load_marker_config(
        indent_unit=args.indent_unit,
        marker_type=args.marker_type,
        hide_first_indent=args.hide_first_indent,
        highlight_active_block=args.highlight_active_block,
    )
    theme_name = args.theme if args.theme is not None else load_theme_name()
    if args.save_config:
        save_marker_config(config)
        if theme_name:
            save_theme_name(theme_name)

    try:
        rendered = render_document(
            read_text(path),
            path,
            config,
            first_line=args.from_line,
            last_line=args.to_line,
            cursor_line=args.cursor_line,
            style=args.style,
            theme_name=theme_name,
            no_color=args.no_color,
            max_cols=args.max_cols if args.max_cols is not None else _default_render_width(),
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    sys.stdout.write(rendered)


if __name__ == "__main__":
    main()
