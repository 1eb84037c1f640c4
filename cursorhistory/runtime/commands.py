"""Static command definitions exposed to the host's command registry."""

from __future__ import annotations

PREVIOUS_CURSOR_POSITION = "previous-cursor-position"
NEXT_CURSOR_POSITION = "cursor-position-forward"

COMMAND_ITEMS: tuple[tuple[str, str], ...] = (
    (PREVIOUS_CURSOR_POSITION, "Return to previous cursor position"),
    (NEXT_CURSOR_POSITION, "Re-return to next cursor position"),
)

__all__ = ["COMMAND_ITEMS", "NEXT_CURSOR_POSITION", "PREVIOUS_CURSOR_POSITION"]
