"""Fold position-update events into the shared history state."""

from __future__ import annotations

from dataclasses import replace

from .position import FORWARD_HISTORY_DECAY_MS, HistoricPosition, HistoryState, is_spatially_different


class PositionTracker:
    """Records where the user has been, one spatially distinct step at a time."""

    def __init__(self, state: HistoryState, forward_decay_ms: int = FORWARD_HISTORY_DECAY_MS) -> None:
        self.state = state
        self.forward_decay_ms = forward_decay_ms

    def update_current_position(self, position: HistoricPosition) -> None:
        """Update the current position based on scrolling, typing or selecting.

        A move to another line or document demotes the current position onto
        the back stack. Staying on the same line only refreshes its timestamp.
        """
        position = position.normalized()
        state = self.state
        current = state.current

        if not is_spatially_different(current, position):
            assert current is not None
            if position.timestamp_ms > current.timestamp_ms:
                state.current = replace(current, timestamp_ms=position.timestamp_ms)
            return

        if current is not None:
            state.push_bounded(state.back_stack, current)
        if self._forward_history_expired(position):
            state.forward_stack.clear()
        state.current = position

    def _forward_history_expired(self, position: HistoricPosition) -> bool:
        """Return whether the newest forward entry is older than the decay window.

        Right after going back, an incidental update such as selecting text
        must not discard the positions the user may still want to return to.
        The window is measured from when the newest forward entry was last
        observed, not from the moment of going back: after sitting idle on a
        position for more than the window, going back and then moving to
        another line drops the forward history straight away.
        """
        forward = self.state.forward_stack
        if not forward:
            return False
        return position.timestamp_ms - forward[-1].timestamp_ms > self.forward_decay_ms
