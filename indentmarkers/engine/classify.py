"""Leading-whitespace classification for non-empty lines.

One indent level is counted for every ``indent_unit`` consecutive spaces and
for every tab, whatever the configured width.
"""

from __future__ import annotations

from .types import LineIndent


def is_empty_line(text: str) -> bool:
    """Return whether ``text`` is blank or whitespace-only."""
    return len(text.strip()) == 0


def classify(text: str, indent_unit: int) -> LineIndent:
    """Count indent guides in the leading whitespace of ``text``.

    Scans left to right, keeping the length of the current run of spaces. A
    boundary falls right after a tab, or wherever the space run reaches a
    positive multiple of ``indent_unit``. A tab resets the space run.
    """
    boundaries: list[int] = []
    consecutive_spaces = 0

    for index, ch in enumerate(text):
        if ch == "\t":
            consecutive_spaces = 0
            boundaries.append(index + 1)
        elif ch == " ":
            consecutive_spaces += 1
            if consecutive_spaces % indent_unit == 0:
                boundaries.append(index + 1)
        else:
            break

    return LineIndent(level=len(boundaries), boundaries=tuple(boundaries))


def indent_level(text: str, indent_unit: int) -> int:
    """Return only the guide count for a non-empty line."""
    return classify(text, indent_unit).level


__all__ = ["classify", "indent_level", "is_empty_line"]
