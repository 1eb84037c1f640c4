"""Visible-range introspection and the viewport-centering heuristic.

Editors may optionally expose ``visible_character_range()`` and
``line_start_offset(line)``. When they do, centering is decided by whether
the target offset is on screen; otherwise a fixed line-delta threshold is used.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .position import HistoricPosition

logger = logging.getLogger(__name__)

BIG_LINE_CHANGE_THRESHOLD = 20

PROBE_AVAILABLE = "available"
PROBE_UNAVAILABLE = "unavailable"
PROBE_FAILED = "failed"


@dataclass(frozen=True)
class CharacterRange:
    """Absolute character offsets into a document, ignoring line breaks."""

    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end


@dataclass(frozen=True)
class VisibleRangeProbe:
    """Outcome of asking an editor which part of the document is on screen."""

    status: str
    visible: CharacterRange | None = None
    target_offset: int | None = None
    error: str = ""

    @property
    def available(self) -> bool:
        return self.status == PROBE_AVAILABLE


def _coerce_offset(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid character offset: {value!r}")
    if value < 0:
        raise ValueError(f"negative character offset: {value}")
    return value


def _coerce_range(raw: object) -> CharacterRange:
    if isinstance(raw, CharacterRange):
        start, end = raw.start, raw.end
    elif isinstance(raw, (tuple, list)) and len(raw) == 2:
        start, end = raw
    else:
        start = getattr(raw, "start", getattr(raw, "from_", None))
        end = getattr(raw, "end", getattr(raw, "to", None))
    visible = CharacterRange(_coerce_offset(start), _coerce_offset(end))
    if visible.start > visible.end:
        raise ValueError(f"inverted visible range: {visible.start}..{visible.end}")
    return visible


def probe_visible_range(editor: object, target: HistoricPosition) -> VisibleRangeProbe:
    """Locate ``target`` relative to the editor's visible character range.

    Never raises: editors without the capability yield ``unavailable`` and any
    error or malformed answer yields ``failed`` with the error text.
    """
    visible_character_range = getattr(editor, "visible_character_range", None)
    line_start_offset = getattr(editor, "line_start_offset", None)
    if not callable(visible_character_range) or not callable(line_start_offset):
        return VisibleRangeProbe(PROBE_UNAVAILABLE)

    try:
        raw_visible = visible_character_range()
        if raw_visible is None:
            return VisibleRangeProbe(PROBE_UNAVAILABLE)
        visible = _coerce_range(raw_visible)
        target_offset = _coerce_offset(line_start_offset(target.line)) + target.column_in_line
    except Exception as exc:
        return VisibleRangeProbe(PROBE_FAILED, error=f"{type(exc).__name__}: {exc}")
    return VisibleRangeProbe(PROBE_AVAILABLE, visible=visible, target_offset=target_offset)


def should_scroll_to_center(
    editor: object | None,
    source: HistoricPosition | None,
    target: HistoricPosition,
) -> bool:
    """Return whether jumping from ``source`` to ``target`` should center the view.

    Only centers when moving "far": into another document, off screen, or by
    more than ``BIG_LINE_CHANGE_THRESHOLD`` lines when the screen is unknown.
    """
    if editor is None:
        return False  # cannot scroll anyway
    if source is None or source.document_id != target.document_id:
        return True

    probe = probe_visible_range(editor, target)
    if probe.status == PROBE_FAILED:
        logger.warning("Failed to determine whether to scroll to center: %s", probe.error)
        return False
    if probe.available:
        assert probe.visible is not None and probe.target_offset is not None
        return not probe.visible.contains(probe.target_offset)
    return abs(source.line - target.line) > BIG_LINE_CHANGE_THRESHOLD


__all__ = [
    "BIG_LINE_CHANGE_THRESHOLD",
    "PROBE_AVAILABLE",
    "PROBE_FAILED",
    "PROBE_UNAVAILABLE",
    "CharacterRange",
    "VisibleRangeProbe",
    "probe_visible_range",
    "should_scroll_to_center",
]
