"""Backward/forward traversal of the cursor-position history."""

from __future__ import annotations

from collections.abc import Callable
import logging

from ..editor import EditorPoint, EditorRange
from .position import HistoricPosition, HistoryState
from .viewport import should_scroll_to_center

logger = logging.getLogger(__name__)

DocumentSwitcher = Callable[[str], None]


class HistoryNavigator:
    """Undo/redo for the cursor position across documents.

    ``open_document`` callbacks must return only once the document is active,
    since its editor surface does not exist before that. Errors they raise
    propagate to the caller; the stack update already done is kept.
    """

    def __init__(self, state: HistoryState) -> None:
        self.state = state

    def go_back(self, editor: object | None, open_document: DocumentSwitcher | None) -> None:
        """The equivalent of "Undo" for the cursor position."""
        state = self.state
        if not state.back_stack:
            return
        target = state.back_stack.pop()
        superseded = state.current
        state.current = target
        if superseded is not None:
            state.push_bounded(state.forward_stack, superseded)
        self._navigate_to_position(editor, open_document, superseded, target)

    def go_forward(self, editor: object | None, open_document: DocumentSwitcher | None) -> None:
        """The equivalent of "Redo" for the cursor position."""
        state = self.state
        if not state.forward_stack:
            return
        target = state.forward_stack.pop()
        superseded = state.current
        state.current = target
        if superseded is not None:
            state.push_bounded(state.back_stack, superseded)
        self._navigate_to_position(editor, open_document, superseded, target)

    def _navigate_to_position(
        self,
        editor: object | None,
        open_document: DocumentSwitcher | None,
        source: HistoricPosition | None,
        target: HistoricPosition,
    ) -> None:
        if source is None or source.document_id != target.document_id:
            logger.debug("Switching to %s for history navigation", target.document_id)
            if open_document is not None:
                open_document(target.document_id)

        if editor is None:
            return
        point = EditorPoint(line=target.line, ch=target.column_in_line)
        center = should_scroll_to_center(editor, source, target)
        editor.set_selection(point)
        editor.scroll_into_view(EditorRange.caret(point), center)


__all__ = ["DocumentSwitcher", "HistoryNavigator"]
