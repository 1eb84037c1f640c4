"""Editor geometry shared by the history engine and the resume-position store.

Editor surfaces are duck-typed host objects. The methods used are:

- ``get_selection() -> EditorRange | None``
- ``get_scroll_info() -> ScrollState | None``
- ``set_selection(anchor, head=None)``
- ``scroll_into_view(editor_range, center)``
- ``scroll_to(left, top)``

and, optionally, ``visible_character_range()`` plus ``line_start_offset(line)``
for precise on-screen checks.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorPoint:
    """Zero-based line plus character offset inside that line."""

    line: int = 0
    ch: int = 0


@dataclass(frozen=True)
class EditorRange:
    """Selection from ``anchor`` (``from``) to ``head`` (``to``)."""

    from_: EditorPoint
    to: EditorPoint

    @classmethod
    def caret(cls, point: EditorPoint) -> EditorRange:
        return cls(from_=point, to=point)


@dataclass(frozen=True)
class ScrollState:
    top: float = 0.0
    left: float = 0.0


__all__ = ["EditorPoint", "EditorRange", "ScrollState"]
