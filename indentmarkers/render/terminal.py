"""ANSI terminal renderer drawing guide glyphs into leading whitespace.

A leading tab occupies one indent unit of cells, so guides on tab-indented
code line up with the guides drawn on empty lines.
"""

from __future__ import annotations

from ..ansi import char_display_width, drop_leading_chars
from ..config import IndentMarkerConfig
from ..engine.types import IndentEntry
from ..ui_theme import DEFAULT_THEME, GuideTheme
from .base import GuideRenderer, visible_guides


def leading_whitespace(text: str) -> str:
    """Return the run of spaces and tabs that starts ``text``."""
    return text[: len(text) - len(text.lstrip(" \t"))]


def indent_columns(whitespace: str, unit_width: int) -> list[int]:
    """Map each character offset of ``whitespace`` (and its end) to a cell column."""
    columns = [0]
    col = 0
    for ch in whitespace:
        col += unit_width if ch == "\t" else char_display_width(ch, col)
        columns.append(col)
    return columns


class TerminalGuideRenderer(GuideRenderer):
    """Render indentation prefixes with colored box-drawing guides."""

    def __init__(self, theme: GuideTheme = DEFAULT_THEME) -> None:
        self.theme = theme

    def _glyph(self, active: bool, thickness: int) -> str:
        if thickness > 1:
            return self.theme.bold_active_char
        return self.theme.active_guide_char if active else self.theme.guide_char

    def render(self, entry: IndentEntry, unit_width: int, config: IndentMarkerConfig, line_text: str = "") -> str:
        """Return the indentation prefix for one line with guides drawn in."""
        whitespace = leading_whitespace(line_text)
        empty = len(whitespace) == len(line_text)
        guides = visible_guides(entry, unit_width, config)

        if empty:
            columns = [guide.offset for guide in guides]
            width = columns[-1] + 1 if columns else 0
        else:
            cell_of = indent_columns(whitespace, unit_width)
            columns = [cell_of[guide.offset] for guide in guides]
            width = cell_of[-1]

        cells = [" "] * width
        for guide, column in zip(guides, columns):
            color = self.theme.active_guide if guide.active else self.theme.guide
            glyph = self._glyph(guide.active, guide.thickness)
            cells[column] = f"{color}{glyph}{self.theme.reset}" if color else glyph
        return "".join(cells)

    def render_line(
        self,
        entry: IndentEntry,
        unit_width: int,
        config: IndentMarkerConfig,
        line_text: str,
        colored_text: str | None = None,
    ) -> str:
        """Return the full display line: guide prefix plus the code after it.

        ``colored_text`` is the same line with ANSI styling; its leading
        whitespace is replaced by the prefix.
        """
        prefix = self.render(entry, unit_width, config, line_text)
        whitespace = leading_whitespace(line_text)
        if len(whitespace) == len(line_text):
            return prefix
        body = colored_text if colored_text is not None else line_text
        return prefix + drop_leading_chars(body, len(whitespace))
