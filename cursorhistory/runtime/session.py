"""Host-facing session: resume positions per document plus navigation history.

The host calls ``tick()`` from its event loop, ``restore_cursor_state()``
whenever a document is opened, and ``run_command()`` for the two navigation
commands. The workspace object is duck-typed and must provide
``active_document_id()``, ``active_editor()``, ``open_document(document_id)``,
``open_view_identifiers()`` and ``active_view_identifier()``. It may provide
``is_link_highlight_active()`` to suppress restoring when the document was
opened through a link that already scrolled somewhere.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import time

from ..editor import EditorRange
from ..history import CursorPositionHistory, HistoricPosition, now_ms
from .commands import NEXT_CURSOR_POSITION, PREVIOUS_CURSOR_POSITION
from .config import CURSOR_POSITION_UPDATE_INTERVAL_MS, SettingsStore
from .cursor_state import CursorState, cursor_states_equal
from .database import CursorStateDatabase

logger = logging.getLogger(__name__)

RESTORE_SETTLE_SECONDS = 0.01


class CursorHistorySession:
    """Owns the resume database, the navigation history and their polling."""

    def __init__(
        self,
        *,
        workspace: object,
        settings_store: SettingsStore,
        database: CursorStateDatabase | None = None,
        history: CursorPositionHistory | None = None,
        sleep: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
        clock_ms: Callable[[], int] = now_ms,
    ) -> None:
        self.workspace = workspace
        self.settings_store = settings_store
        if database is None:
            database = CursorStateDatabase(settings_store.settings.database_file_name)
        self.database = database
        self.history = history if history is not None else CursorPositionHistory(settings_store)
        self.sleep = sleep
        self.monotonic = monotonic
        self.clock_ms = clock_ms

        self.loaded_view_ids: list[str] = []
        self.latest_cursor_state: CursorState | None = None
        self.last_loaded_document_id: str | None = None
        self.loading_document = False
        self.last_poll = 0.0
        self.last_write = 0.0

    def start(self) -> None:
        """Load the database and restore the position of the active document."""
        self.database.load()
        now = self.monotonic()
        self.last_poll = now
        self.last_write = now
        self.restore_cursor_state()

    def tick(self) -> None:
        self.maybe_check_cursor_state()
        self.maybe_write_database()

    def maybe_check_cursor_state(self) -> None:
        now = self.monotonic()
        if (now - self.last_poll) < CURSOR_POSITION_UPDATE_INTERVAL_MS / 1000:
            return
        self.last_poll = now
        self.check_cursor_state_changed()

    def maybe_write_database(self) -> None:
        now = self.monotonic()
        if (now - self.last_write) < self.settings_store.settings.save_timeout_ms / 1000:
            return
        self.last_write = now
        self.database.write()

    def quit(self) -> None:
        self.database.write()

    def check_cursor_state_changed(self) -> None:
        """Record the active editor's cursor in the database and the history."""
        document_id = self.workspace.active_document_id()
        # wait until the document is loaded
        if not document_id or document_id != self.last_loaded_document_id or self.loading_document:
            return

        state = self.read_cursor_state()
        if self.latest_cursor_state is None:
            self.latest_cursor_state = state
        if not state.has_usable_scroll_state() or cursor_states_equal(state, self.latest_cursor_state):
            return

        self.database.set(document_id, state)
        self.latest_cursor_state = state
        if state.cursor is not None:
            self.history.update_current_position(
                HistoricPosition(
                    document_id=document_id,
                    line=state.cursor.to.line,
                    column_in_line=state.cursor.to.ch,
                    timestamp_ms=self.clock_ms(),
                )
            )

    def restore_cursor_state(self) -> None:
        """Scroll a freshly opened document back to where it was left."""
        document_id = self.workspace.active_document_id()
        if not document_id:
            return
        if self.loading_document and self.last_loaded_document_id == document_id:
            return
        if self._is_active_view_already_loaded():
            # tab switch: keep the on-screen position but track the new document
            if self.last_loaded_document_id != document_id:
                self.last_loaded_document_id = document_id
                self.latest_cursor_state = CursorState()
            return

        self.loaded_view_ids = [view_id for view_id in self.workspace.open_view_identifiers() if view_id]
        self.loading_document = True
        try:
            if self.last_loaded_document_id != document_id:
                self.latest_cursor_state = CursorState()
                self.last_loaded_document_id = document_id
                state = self.database.get(document_id)
                if state is not None:
                    self.sleep(self.settings_store.settings.delay_after_file_opening_ms / 1000)
                    if self._link_highlight_active():
                        logger.debug("Not restoring %s: opened through a link", document_id)
                    else:
                        self.sleep(RESTORE_SETTLE_SECONDS)
                        self.apply_cursor_state(state)
                self.latest_cursor_state = state
        finally:
            self.loading_document = False

    def read_cursor_state(self) -> CursorState:
        editor = self.workspace.active_editor()
        if editor is None:
            return CursorState()
        selection = editor.get_selection()
        cursor = EditorRange(from_=selection.from_, to=selection.to) if selection is not None else None
        return CursorState(cursor=cursor, scroll_state=editor.get_scroll_info())

    def apply_cursor_state(self, state: CursorState) -> None:
        editor = self.workspace.active_editor()
        if editor is None:
            return
        if state.cursor is not None:
            editor.set_selection(state.cursor.from_, state.cursor.to)
            editor.scroll_into_view(state.cursor, True)
        elif state.scroll_state is not None:
            editor.scroll_to(state.scroll_state.left, state.scroll_state.top)

    def rename_document(self, old_document_id: str, new_document_id: str) -> None:
        self.database.rename(old_document_id, new_document_id)

    def delete_document(self, document_id: str) -> None:
        self.database.delete(document_id)

    def run_command(self, command_id: str) -> bool:
        """Dispatch a navigation command, returning whether ``command_id`` is known.

        Errors from opening another document propagate to the caller.
        """
        editor = self.workspace.active_editor()
        if command_id == PREVIOUS_CURSOR_POSITION:
            self.history.go_back(editor, self.workspace.open_document)
            return True
        if command_id == NEXT_CURSOR_POSITION:
            self.history.go_forward(editor, self.workspace.open_document)
            return True
        return False

    def _is_active_view_already_loaded(self) -> bool:
        view_id = self.workspace.active_view_identifier()
        return bool(view_id) and view_id in self.loaded_view_ids

    def _link_highlight_active(self) -> bool:
        is_link_highlight_active = getattr(self.workspace, "is_link_highlight_active", None)
        return bool(is_link_highlight_active()) if callable(is_link_highlight_active) else False


__all__ = ["CursorHistorySession", "RESTORE_SETTLE_SECONDS"]
