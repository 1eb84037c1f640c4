"""Host-facing runtime: settings, resume database and the polling session."""

from __future__ import annotations

from .commands import COMMAND_ITEMS, NEXT_CURSOR_POSITION, PREVIOUS_CURSOR_POSITION
from .config import HistorySettings, SettingsStore
from .cursor_state import CursorState, cursor_states_equal
from .database import CursorStateDatabase
from .session import CursorHistorySession

__all__ = [
    "COMMAND_ITEMS",
    "NEXT_CURSOR_POSITION",
    "PREVIOUS_CURSOR_POSITION",
    "CursorHistorySession",
    "CursorState",
    "CursorStateDatabase",
    "HistorySettings",
    "SettingsStore",
    "cursor_states_equal",
]
