"""Tests for the ANSI terminal guide renderer.

Uses the plain theme so expected rows stay readable, plus one colored case
to check the theme escape sequences wrap each glyph.
"""

from __future__ import annotations

import unittest

from indentmarkers.config import IndentMarkerConfig
from indentmarkers.engine import IndentEntry
from indentmarkers.render import TerminalGuideRenderer, indent_columns, leading_whitespace
from indentmarkers.ui_theme import DEFAULT_THEME, PLAIN_THEME


class TerminalRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = TerminalGuideRenderer(PLAIN_THEME)
        self.config = IndentMarkerConfig()

    def test_guides_sit_at_start_of_each_level(self) -> None:
        entry = IndentEntry(level=2, markers=(0, 2))
        self.assertEqual(self.renderer.render_line(entry, 2, self.config, "    c = 1"), "| | c = 1")

    def test_empty_line_guides_use_unit_columns(self) -> None:
        entry = IndentEntry(level=2)
        self.assertEqual(self.renderer.render_line(entry, 4, self.config, "   "), "|   |")

    def test_code_only_leaves_empty_lines_blank(self) -> None:
        config = IndentMarkerConfig(marker_type="codeOnly")
        self.assertEqual(self.renderer.render_line(IndentEntry(level=2), 4, config, ""), "")
        entry = IndentEntry(level=1, markers=(0,))
        self.assertEqual(self.renderer.render_line(entry, 2, config, "  x"), "| x")

    def test_hidden_first_indent_keeps_alignment(self) -> None:
        config = IndentMarkerConfig(hide_first_indent=True)
        entry = IndentEntry(level=2, markers=(0, 2))
        self.assertEqual(self.renderer.render_line(entry, 2, config, "    c"), "  | c")

    def test_tab_occupies_one_unit_of_cells(self) -> None:
        entry = IndentEntry(level=2, markers=(0, 1))
        self.assertEqual(self.renderer.render_line(entry, 4, self.config, "\t\tx"), "|   |   x")

    def test_thick_active_guide_uses_bold_glyph(self) -> None:
        config = IndentMarkerConfig(active_thickness=2)
        entry = IndentEntry(level=2, active=2, markers=(0, 2))
        self.assertEqual(self.renderer.render_line(entry, 2, config, "    c"), "| ! c")

    def test_colored_body_keeps_styles_after_prefix(self) -> None:
        entry = IndentEntry(level=1, markers=(0,))
        row = self.renderer.render_line(entry, 2, self.config, "  x", "\033[33m  x\033[0m")
        self.assertEqual(row, "| \033[33mx\033[0m")

    def test_theme_colors_wrap_each_glyph(self) -> None:
        renderer = TerminalGuideRenderer(DEFAULT_THEME)
        entry = IndentEntry(level=2, active=1, markers=(0, 2))
        prefix = renderer.render(entry, 2, self.config, "    x")
        expected = (
            f"{DEFAULT_THEME.active_guide}│{DEFAULT_THEME.reset} "
            f"{DEFAULT_THEME.guide}│{DEFAULT_THEME.reset} "
        )
        self.assertEqual(prefix, expected)

    def test_unindented_line_is_unchanged(self) -> None:
        self.assertEqual(self.renderer.render_line(IndentEntry(level=0), 4, self.config, "x = 1"), "x = 1")


class IndentColumnTests(unittest.TestCase):
    def test_leading_whitespace_stops_at_code(self) -> None:
        self.assertEqual(leading_whitespace(" \t x y"), " \t ")
        self.assertEqual(leading_whitespace("x"), "")

    def test_columns_expand_tabs_to_unit(self) -> None:
        self.assertEqual(indent_columns(" \t ", 4), [0, 1, 5, 6])


if __name__ == "__main__":
    unittest.main()
