"""ANSI-aware helpers for drawing guides into colorized lines.

Escape sequences never count toward widths, and stripping the indentation
from a colorized line keeps every escape sequence it passes over.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove all escape sequences."""
    return ANSI_ESCAPE_RE.sub("", text)


def drop_leading_chars(text: str, count: int) -> str:
    """Remove the first ``count`` visible characters of a styled line.

    Escape sequences found before the cut are kept, so the remaining text
    renders with the style that was active at that point.
    """
    if count <= 0:
        return text

    kept: list[str] = []
    dropped = 0
    i = 0
    n = len(text)
    while i < n and dropped < count:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                kept.append(match.group(0))
                i = match.end()
                continue
        dropped += 1
        i += 1
    kept.append(text[i:])
    return "".join(kept)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    Tabs are expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)
