"""Per-document cursor and scroll snapshot used for "resume where I left off"."""

from __future__ import annotations

from dataclasses import dataclass
import math

from ..editor import EditorPoint, EditorRange, ScrollState


@dataclass(frozen=True)
class CursorState:
    cursor: EditorRange | None = None
    scroll_state: ScrollState | None = None

    def has_usable_scroll_state(self) -> bool:
        """Return whether the scroll offsets are present and numeric."""
        scroll = self.scroll_state
        if scroll is None:
            return False
        return not (math.isnan(scroll.top) or math.isnan(scroll.left))


def cursor_states_equal(first: CursorState | None, second: CursorState | None) -> bool:
    """Compare two snapshots by cursor endpoints and scroll offsets."""
    first_cursor = first.cursor if first is not None else None
    second_cursor = second.cursor if second is not None else None
    if first_cursor is None or second_cursor is None:
        if first_cursor is not second_cursor:
            return False
    elif first_cursor != second_cursor:
        return False

    first_scroll = first.scroll_state if first is not None else None
    second_scroll = second.scroll_state if second is not None else None
    return first_scroll == second_scroll


def _coerce_nonnegative_int(value: object) -> int:
    """Normalize JSON scalars for line/column values.

    Booleans and non-integers are treated as invalid and coerced to ``0``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def _coerce_float(value: object) -> float | None:
    """Accept finite JSON numbers only; ``NaN`` and infinities yield ``None``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def _point_from_json(raw: object) -> EditorPoint | None:
    if not isinstance(raw, dict):
        return None
    return EditorPoint(
        line=_coerce_nonnegative_int(raw.get("line", 0)),
        ch=_coerce_nonnegative_int(raw.get("ch", 0)),
    )


def cursor_state_from_json(raw: object) -> CursorState | None:
    """Decode one stored entry, returning ``None`` for malformed shapes.

    A cursor missing either endpoint is dropped; scroll offsets must both be
    numbers for the scroll state to survive.
    """
    if not isinstance(raw, dict):
        return None

    cursor = None
    raw_cursor = raw.get("cursor")
    if isinstance(raw_cursor, dict):
        start = _point_from_json(raw_cursor.get("from"))
        end = _point_from_json(raw_cursor.get("to"))
        if start is not None and end is not None:
            cursor = EditorRange(from_=start, to=end)

    scroll_state = None
    raw_scroll = raw.get("scrollState")
    if isinstance(raw_scroll, dict):
        top = _coerce_float(raw_scroll.get("top"))
        left = _coerce_float(raw_scroll.get("left"))
        if top is not None and left is not None:
            scroll_state = ScrollState(top=top, left=left)

    return CursorState(cursor=cursor, scroll_state=scroll_state)


def cursor_state_to_json(state: CursorState) -> dict[str, object]:
    out: dict[str, object] = {}
    if state.cursor is not None:
        out["cursor"] = {
            "from": {"ch": state.cursor.from_.ch, "line": state.cursor.from_.line},
            "to": {"ch": state.cursor.to.ch, "line": state.cursor.to.line},
        }
    if state.scroll_state is not None:
        out["scrollState"] = {"top": state.scroll_state.top, "left": state.scroll_state.left}
    return out


__all__ = [
    "CursorState",
    "cursor_state_from_json",
    "cursor_state_to_json",
    "cursor_states_equal",
]
