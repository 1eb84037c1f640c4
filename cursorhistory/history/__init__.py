"""Cross-document cursor-position history.

``PositionTracker`` and ``HistoryNavigator`` share one ``HistoryState``;
``CursorPositionHistory`` bundles both around a live settings provider.
"""

from __future__ import annotations

from .navigator import DocumentSwitcher, HistoryNavigator
from .position import (
    FORWARD_HISTORY_DECAY_MS,
    MAX_HISTORY_LENGTH_DEFAULT,
    HistoricPosition,
    HistoryState,
    is_spatially_different,
    now_ms,
)
from .tracker import PositionTracker
from .viewport import CharacterRange, VisibleRangeProbe, probe_visible_range, should_scroll_to_center


class CursorPositionHistory:
    """Tracker and navigator over a single history state."""

    def __init__(self, settings_provider: object | None = None) -> None:
        self.settings_provider = settings_provider
        self.state = HistoryState(max_history_length=self.max_history_length)
        self.tracker = PositionTracker(self.state)
        self.navigator = HistoryNavigator(self.state)

    def max_history_length(self) -> int:
        """Read the limit live so settings changes apply without a restart."""
        if self.settings_provider is None:
            return MAX_HISTORY_LENGTH_DEFAULT
        return self.settings_provider.settings.max_history_length

    def update_current_position(self, position: HistoricPosition) -> None:
        self.tracker.update_current_position(position)

    def go_back(self, editor: object | None, open_document: DocumentSwitcher | None) -> None:
        self.navigator.go_back(editor, open_document)

    def go_forward(self, editor: object | None, open_document: DocumentSwitcher | None) -> None:
        self.navigator.go_forward(editor, open_document)


__all__ = [
    "FORWARD_HISTORY_DECAY_MS",
    "MAX_HISTORY_LENGTH_DEFAULT",
    "CharacterRange",
    "CursorPositionHistory",
    "DocumentSwitcher",
    "HistoricPosition",
    "HistoryNavigator",
    "HistoryState",
    "PositionTracker",
    "VisibleRangeProbe",
    "is_spatially_different",
    "now_ms",
    "probe_visible_range",
    "should_scroll_to_center",
]
