"""Tests for config persistence and input sanitization.

Ensures malformed config data falls back to built-in defaults and that
saving defaults keeps unrelated keys.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_builtin_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "lazytree.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_default_depth())
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_no_color())
                self.assertFalse(config.load_show_gitkeep())
                self.assertTrue(config.load_respect_gitignore())

    def test_malformed_json_is_treated_as_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "lazytree.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_typed_loaders_reject_wrong_types(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "lazytree.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                for raw in (True, -2, "3", 2.5):
                    with self.subTest(max_depth=raw):
                        config.save_config({"max_depth": raw})
                        self.assertIsNone(config.load_default_depth())

                config.save_config({"theme": "   ", "no_color": "yes", "respect_gitignore": 0})
                self.assertIsNone(config.load_theme_name())
                self.assertFalse(config.load_no_color())
                self.assertTrue(config.load_respect_gitignore())

    def test_save_defaults_round_trips_and_keeps_other_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "lazytree.json"
            with mock.patch("lazytree.config.CONFIG_PATH", config_path):
                config.save_config({"custom": "kept"})
                config.save_defaults(
                    max_depth=3,
                    theme_name=" Ocean ",
                    no_color=True,
                    show_gitkeep=True,
                    respect_gitignore=False,
                )

                self.assertEqual(config.load_config().get("custom"), "kept")
                self.assertEqual(config.load_default_depth(), 3)
                self.assertEqual(config.load_theme_name(), "Ocean")
                self.assertTrue(config.load_no_color())
                self.assertTrue(config.load_show_gitkeep())
                self.assertFalse(config.load_respect_gitignore())

    def test_load_config_falls_back_to_legacy_path_when_default_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = Path(tmp) / "native" / "config.json"
            legacy_path = Path(tmp) / "lazytree.json"
            legacy_path.write_text('{"max_depth": 7}\n', encoding="utf-8")
            with mock.patch("lazytree.config.CONFIG_PATH", default_path), mock.patch(
                "lazytree.config.DEFAULT_CONFIG_PATH", default_path
            ), mock.patch("lazytree.config.LEGACY_CONFIG_PATH", legacy_path):
                self.assertEqual(config.load_default_depth(), 7)


if __name__ == "__main__":
    unittest.main()
