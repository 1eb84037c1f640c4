"""Command-line front door for cursorhistory.

Inspects and maintains the resume-position database: lists remembered
documents, forgets or renames entries, and writes the result back.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .runtime.config import load_settings
from .runtime.cursor_state import CursorState
from .runtime.database import CursorStateDatabase


def _describe(document_id: str, state: CursorState) -> str:
    """Render one database entry as a ``path:line:col`` row."""
    if state.cursor is None:
        location = "-"
    else:
        location = f"{state.cursor.to.line + 1}:{state.cursor.to.ch + 1}"
    if state.scroll_state is None:
        scroll = ""
    else:
        scroll = f"  (scroll {state.scroll_state.top:g})"
    return f"{document_id}:{location}{scroll}"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one database maintenance action.

    Without ``--forget``/``--rename`` the stored entries are listed, as text
    rows or, with ``--json``, as the raw database object.
    """
    parser = argparse.ArgumentParser(
        description="Inspect the remembered cursor positions of your documents."
    )
    parser.add_argument(
        "--database",
        metavar="PATH",
        default=None,
        help="Database file (default: the path from the settings file).",
    )
    parser.add_argument("--forget", metavar="DOC", action="append", default=[], help="Drop the entry of DOC.")
    parser.add_argument("--rename", metavar=("OLD", "NEW"), nargs=2, help="Move the entry of OLD to NEW.")
    parser.add_argument("--json", action="store_true", help="Print the database as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args.database) if args.database else Path(load_settings().database_file_name)
    database = CursorStateDatabase(path)
    if not path.exists() and (args.forget or args.rename):
        raise SystemExit(f"Database not found: {path}")
    database.load()

    if args.forget or args.rename:
        for document_id in args.forget:
            if database.get(document_id) is None:
                raise SystemExit(f"No entry for: {document_id}")
            database.delete(document_id)
        if args.rename:
            old_document_id, new_document_id = args.rename
            if database.get(old_document_id) is None:
                raise SystemExit(f"No entry for: {old_document_id}")
            database.rename(old_document_id, new_document_id)
        database.write()
        return

    if args.json:
        sys.stdout.write(json.dumps(database.serialized(), indent=2) + "\n")
        return
    for document_id in sorted(database.entries):
        sys.stdout.write(_describe(document_id, database.entries[document_id]) + "\n")
