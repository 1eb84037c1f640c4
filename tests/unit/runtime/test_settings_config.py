"""Tests for settings persistence and input sanitization.

Validates defaults, clamping of out-of-range values, and that malformed
settings files are safely normalized on load.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cursorhistory.runtime import config


class SettingsConfigTests(unittest.TestCase):
    def test_missing_file_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", Path(tmp) / "settings.json"):
                self.assertEqual(config.load_settings(), config.DEFAULT_SETTINGS)

    def test_malformed_json_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "settings.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_settings(), config.DEFAULT_SETTINGS)

    def test_values_are_clamped_and_invalid_types_dropped(self) -> None:
        settings = config.normalize_settings(
            {
                "database_file_name": "  /tmp/db.json ",
                "delay_after_file_opening_ms": 900,
                "save_timeout_ms": 10,
                "max_history_length": True,
            }
        )

        self.assertEqual(settings.database_file_name, "/tmp/db.json")
        self.assertEqual(settings.delay_after_file_opening_ms, 300)
        self.assertEqual(settings.save_timeout_ms, config.MIN_SAVE_TIMEOUT_MS)
        self.assertEqual(settings.max_history_length, 500)

    def test_history_length_limits(self) -> None:
        self.assertEqual(config.normalize_settings({"max_history_length": 5}).max_history_length, 100)
        self.assertEqual(config.normalize_settings({"max_history_length": 9000}).max_history_length, 2000)
        self.assertEqual(config.normalize_settings({"max_history_length": 750.0}).max_history_length, 750)

    def test_non_finite_numbers_in_settings_file_fall_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "settings.json"
            config_path.write_text(
                '{"max_history_length": NaN, "save_timeout_ms": 1e400, "delay_after_file_opening_ms": -Infinity}',
                encoding="utf-8",
            )
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", config_path):
                store = config.SettingsStore()

        self.assertEqual(store.settings.max_history_length, config.DEFAULT_SETTINGS.max_history_length)
        self.assertEqual(store.settings.save_timeout_ms, config.DEFAULT_SETTINGS.save_timeout_ms)
        self.assertEqual(
            store.settings.delay_after_file_opening_ms,
            config.DEFAULT_SETTINGS.delay_after_file_opening_ms,
        )

    def test_store_saves_and_reloads_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "settings.json"
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", config_path):
                store = config.SettingsStore()
                updated = store.update(max_history_length=1200, delay_after_file_opening_ms=0)

                self.assertEqual(updated.max_history_length, 1200)
                self.assertEqual(store.settings.max_history_length, 1200)
                self.assertEqual(config.load_settings().max_history_length, 1200)
                self.assertEqual(config.load_settings().delay_after_file_opening_ms, 0)

    def test_save_keeps_unrelated_keys(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "settings.json"
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", config_path):
                config.save_config({"other": 1})
                config.save_settings(config.DEFAULT_SETTINGS)
                self.assertEqual(config.load_config().get("other"), 1)

    def test_save_failure_is_logged_not_raised(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("cursorhistory.runtime.config.CONFIG_PATH", blocker / "settings.json"):
                with self.assertLogs("cursorhistory.runtime.config", level="WARNING"):
                    config.save_config({"max_history_length": 100})


if __name__ == "__main__":
    unittest.main()
