"""Tests for config validation and first-wins combining."""

from __future__ import annotations

import unittest

from indentmarkers.config import IndentMarkerConfig, MarkerColors, combine_config


class CombineConfigTests(unittest.TestCase):
    def test_defaults_when_nothing_provided(self) -> None:
        config = combine_config()
        self.assertEqual(config, IndentMarkerConfig())
        self.assertTrue(config.highlight_active_block)
        self.assertFalse(config.hide_first_indent)
        self.assertEqual(config.marker_type, "fullScope")
        self.assertEqual(config.thickness, 1)

    def test_first_source_wins_and_none_is_skipped(self) -> None:
        config = combine_config(
            {"thickness": None, "marker_type": "codeOnly"},
            {"thickness": 2, "marker_type": "fullScope"},
        )
        self.assertEqual(config.thickness, 2)
        self.assertEqual(config.marker_type, "codeOnly")

    def test_colors_merge_per_key(self) -> None:
        config = combine_config({"colors": {"dark": "#000"}}, {"colors": {"dark": "#111", "light": "#eee"}})
        self.assertEqual(config.colors, MarkerColors(dark="#000", light="#eee"))

    def test_active_thickness_falls_back_to_thickness(self) -> None:
        self.assertEqual(IndentMarkerConfig(thickness=2).effective_active_thickness, 2)
        self.assertEqual(IndentMarkerConfig(thickness=2, active_thickness=4).effective_active_thickness, 4)

    def test_first_visible_guide_follows_hide_flag(self) -> None:
        self.assertEqual(IndentMarkerConfig().first_visible_guide(), 1)
        hidden = IndentMarkerConfig(hide_first_indent=True)
        self.assertEqual(hidden.first_visible_guide(), 2)
        self.assertFalse(hidden.show_first_indent)

    def test_invalid_values_raise(self) -> None:
        with self.assertRaises(ValueError):
            IndentMarkerConfig(indent_unit=0)
        with self.assertRaises(ValueError):
            IndentMarkerConfig(marker_type="dotted")
        with self.assertRaises(ValueError):
            IndentMarkerConfig(thickness=0)
        with self.assertRaises(ValueError):
            IndentMarkerConfig(active_thickness=-1)


if __name__ == "__main__":
    unittest.main()
