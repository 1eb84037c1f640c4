"""Persistent JSON settings helpers.

Stores the resume-database location, restore delay, save interval and the
navigation-history length. All access is defensive: malformed or missing
settings fall back to defaults and out-of-range values are clamped.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
import json
import logging
import math
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "cursorhistory"
CONFIG_FILENAME = "settings.json"
DATABASE_FILENAME = "cursor-position-history.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_DATABASE_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / DATABASE_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

MIN_SAVE_TIMEOUT_MS = 5000
MAX_SAVE_TIMEOUT_MS = MIN_SAVE_TIMEOUT_MS * 10
CURSOR_POSITION_UPDATE_INTERVAL_MS = 200
MIN_DELAY_AFTER_FILE_OPENING_MS = 0
MAX_DELAY_AFTER_FILE_OPENING_MS = 300
MIN_HISTORY_LENGTH = 100
MAX_HISTORY_LENGTH = 2000


@dataclass(frozen=True)
class HistorySettings:
    database_file_name: str = str(DEFAULT_DATABASE_PATH)
    delay_after_file_opening_ms: int = 100
    save_timeout_ms: int = MIN_SAVE_TIMEOUT_MS
    max_history_length: int = 500


DEFAULT_SETTINGS = HistorySettings()


def load_config() -> dict[str, object]:
    """Load the persisted JSON settings object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist settings data as pretty-printed JSON.

    Filesystem and serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks the host.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("Cannot write settings to %s: %s", CONFIG_PATH, exc)


def _coerce_int(value: object, default: int, lower: int, upper: int | None = None) -> int:
    """Clamp an integer-like JSON scalar into ``[lower, upper]``.

    Booleans, non-numbers and non-finite floats such as ``NaN`` are treated
    as invalid and yield ``default``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    result = max(lower, int(value))
    if upper is not None:
        result = min(upper, result)
    return result


def normalize_settings(raw: dict[str, object]) -> HistorySettings:
    """Build settings from raw JSON, applying defaults and limits."""
    database_file_name = raw.get("database_file_name")
    if not isinstance(database_file_name, str) or not database_file_name.strip():
        database_file_name = DEFAULT_SETTINGS.database_file_name
    return HistorySettings(
        database_file_name=database_file_name.strip(),
        delay_after_file_opening_ms=_coerce_int(
            raw.get("delay_after_file_opening_ms"),
            DEFAULT_SETTINGS.delay_after_file_opening_ms,
            MIN_DELAY_AFTER_FILE_OPENING_MS,
            MAX_DELAY_AFTER_FILE_OPENING_MS,
        ),
        save_timeout_ms=_coerce_int(
            raw.get("save_timeout_ms"),
            DEFAULT_SETTINGS.save_timeout_ms,
            MIN_SAVE_TIMEOUT_MS,
            MAX_SAVE_TIMEOUT_MS,
        ),
        max_history_length=_coerce_int(
            raw.get("max_history_length"),
            DEFAULT_SETTINGS.max_history_length,
            MIN_HISTORY_LENGTH,
            MAX_HISTORY_LENGTH,
        ),
    )


def load_settings() -> HistorySettings:
    return normalize_settings(load_config())


def save_settings(settings: HistorySettings) -> None:
    config = load_config()
    config.update(asdict(normalize_settings(asdict(settings))))
    save_config(config)


class SettingsStore:
    """Live settings holder handed to the history engine and the session.

    Consumers read ``store.settings`` on every use, so ``save_settings``
    takes effect without rebuilding anything.
    """

    def __init__(self, settings: HistorySettings | None = None) -> None:
        self.settings = settings if settings is not None else load_settings()

    def save_settings(self, settings: HistorySettings) -> None:
        self.settings = normalize_settings(asdict(settings))
        save_settings(self.settings)

    def update(self, **changes: object) -> HistorySettings:
        """Apply and persist a partial settings change."""
        self.save_settings(replace(self.settings, **changes))
        return self.settings


__all__ = [
    "CONFIG_PATH",
    "CURSOR_POSITION_UPDATE_INTERVAL_MS",
    "DEFAULT_SETTINGS",
    "MAX_HISTORY_LENGTH",
    "MIN_HISTORY_LENGTH",
    "MIN_SAVE_TIMEOUT_MS",
    "HistorySettings",
    "SettingsStore",
    "load_config",
    "load_settings",
    "normalize_settings",
    "save_config",
    "save_settings",
]
