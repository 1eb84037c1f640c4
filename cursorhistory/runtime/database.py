"""JSON-backed map from document path to its last cursor state.

Reads are forgiving: a missing file is an empty map and a corrupt one is
logged and replaced by an empty map. Writes only touch disk when the map
changed since the last successful write.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .cursor_state import CursorState, cursor_state_from_json, cursor_state_to_json

logger = logging.getLogger(__name__)


class CursorStateDatabase:
    """Last known cursor state per document, persisted as one JSON object."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.entries: dict[str, CursorState] = {}
        self._last_saved: dict[str, object] = {}

    def load(self) -> dict[str, CursorState]:
        """Read the database file, replacing in-memory entries."""
        self.entries = {}
        if self.path.exists():
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except Exception as exc:
                logger.error("Cannot read cursor position database %s: %s", self.path, exc)
                data = {}
            if not isinstance(data, dict):
                logger.error("Ignoring cursor position database %s: not a JSON object", self.path)
                data = {}
            for document_id, raw_state in data.items():
                state = cursor_state_from_json(raw_state)
                if isinstance(document_id, str) and document_id and state is not None:
                    self.entries[document_id] = state
        self._last_saved = self.serialized()
        return self.entries

    def get(self, document_id: str) -> CursorState | None:
        return self.entries.get(document_id)

    def set(self, document_id: str, state: CursorState) -> None:
        self.entries[document_id] = state

    def rename(self, old_document_id: str, new_document_id: str) -> None:
        """Move the entry of a renamed document to its new path."""
        state = self.entries.pop(old_document_id, None)
        if state is not None:
            self.entries[new_document_id] = state

    def delete(self, document_id: str) -> None:
        self.entries.pop(document_id, None)

    def serialized(self) -> dict[str, object]:
        return {document_id: cursor_state_to_json(state) for document_id, state in self.entries.items()}

    def is_dirty(self) -> bool:
        return self.serialized() != self._last_saved

    def write(self) -> bool:
        """Persist entries when changed, returning whether the file was written.

        Write failures are logged; the entries stay dirty so the next periodic
        save retries.
        """
        data = self.serialized()
        if data == self._last_saved:
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except Exception as exc:
            logger.warning("Cannot write cursor position database %s: %s", self.path, exc)
            return False
        self._last_saved = data
        return True


__all__ = ["CursorStateDatabase"]
