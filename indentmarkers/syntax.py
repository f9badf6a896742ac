"""Source loading, sanitization, and syntax highlighting.

Colorizing keeps line structure intact: lexers are told not to strip or add
newlines, so colored output splits into the same lines as the source.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}
DEFAULT_STYLE = "monokai"


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        logger.debug("unknown pygments style %r, using %s", style, DEFAULT_STYLE)
        return DEFAULT_STYLE
    return style


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI colors for the lexer matching ``path``."""
    try:
        lexer = get_lexer_for_filename(path.name, source, **_LEXER_OPTIONS)
    except ClassNotFound:
        lexer = TextLexer(**_LEXER_OPTIONS)
    formatter = TerminalFormatter(style=normalize_style(style))
    return highlight(source, lexer, formatter)


def colorized_lines(source: str, path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Colorize ``source`` and split it into exactly as many lines as the source.

    Falls back to the plain lines when the highlighter output does not line up.
    """
    plain = source.split("\n")
    colored = colorize_source(source, path, style).split("\n")
    if len(colored) != len(plain):
        logger.debug("colorized %s has %d lines, expected %d", path, len(colored), len(plain))
        return plain
    return colored
