"""Historic cursor positions and the shared back/forward history state.

This module intentionally has no editor concerns.
It provides the value types both the tracker and the navigator operate on.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import time

MAX_HISTORY_LENGTH_DEFAULT = 500
FORWARD_HISTORY_DECAY_MS = 60_000


def now_ms() -> int:
    """Return the current wall-clock time as integer epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class HistoricPosition:
    """One cursor position the user visited inside a document."""

    document_id: str
    line: int = 0
    column_in_line: int = 0
    timestamp_ms: int = 0

    def normalized(self) -> HistoricPosition:
        """Return a variant with non-negative line and column."""
        return HistoricPosition(
            document_id=self.document_id,
            line=max(0, self.line),
            column_in_line=max(0, self.column_in_line),
            timestamp_ms=self.timestamp_ms,
        )


def is_spatially_different(previous: HistoricPosition | None, new: HistoricPosition) -> bool:
    """Return whether ``new`` is far enough from ``previous`` to be recorded.

    Only the document and the line count. The column changes too often while
    typing to be meaningful as a history step.
    """
    if previous is None:
        return True
    if previous is new:
        return False
    if previous.document_id != new.document_id:
        return True
    return previous.line != new.line


@dataclass
class HistoryState:
    """Back/forward stacks plus the position the user is currently at.

    ``max_history_length`` is called on every bounding operation so that
    settings changes apply without rebuilding the state.
    """

    max_history_length: Callable[[], int] = lambda: MAX_HISTORY_LENGTH_DEFAULT
    back_stack: list[HistoricPosition] = field(default_factory=list)
    forward_stack: list[HistoricPosition] = field(default_factory=list)
    current: HistoricPosition | None = None

    def push_bounded(self, stack: list[HistoricPosition], position: HistoricPosition) -> None:
        """Append ``position`` and drop the oldest entries past the limit."""
        stack.append(position)
        overflow = len(stack) - max(1, self.max_history_length())
        if overflow > 0:
            del stack[:overflow]


__all__ = [
    "FORWARD_HISTORY_DECAY_MS",
    "MAX_HISTORY_LENGTH_DEFAULT",
    "HistoricPosition",
    "HistoryState",
    "is_spatially_different",
    "now_ms",
]
