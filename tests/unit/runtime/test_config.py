"""Tests for marker config persistence and input sanitization.

Ensures malformed config data is safely normalized on load and that CLI
overrides take precedence over persisted values.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from indentmarkers.config import IndentMarkerConfig, MarkerColors
from indentmarkers.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_marker_config_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "native" / "config.json"
            expected = IndentMarkerConfig(
                highlight_active_block=False,
                hide_first_indent=True,
                marker_type="codeOnly",
                thickness=2,
                active_thickness=3,
                colors=MarkerColors(light="#010101"),
                indent_unit=2,
            )
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                config.save_marker_config(expected)
                self.assertEqual(config.load_marker_config(), expected)

    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing.json"
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_marker_config(), IndentMarkerConfig())

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_invalid_marker_values_are_dropped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                config.save_config(
                    {
                        "markers": {
                            "highlight_active_block": "yes",
                            "hide_first_indent": True,
                            "marker_type": "sideways",
                            "thickness": 0,
                            "active_thickness": True,
                            "indent_unit": 8,
                            "colors": {"dark": "#000", "light": 5, "unknown": "#fff"},
                        }
                    }
                )
                loaded = config.load_marker_config()

            self.assertEqual(
                loaded,
                IndentMarkerConfig(hide_first_indent=True, indent_unit=8, colors=MarkerColors(dark="#000")),
            )

    def test_overrides_win_over_persisted_values(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"markers": {"indent_unit": 8, "hide_first_indent": True}})
                loaded = config.load_marker_config(indent_unit=2, hide_first_indent=None)
            self.assertEqual(loaded.indent_unit, 2)
            self.assertTrue(loaded.hide_first_indent)

    def test_saving_markers_keeps_theme(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name(" ocean ")
                config.save_marker_config(IndentMarkerConfig(indent_unit=3))
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertEqual(config.load_marker_config().indent_unit, 3)

    def test_blank_theme_name_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("indentmarkers.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("   ")
                self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
