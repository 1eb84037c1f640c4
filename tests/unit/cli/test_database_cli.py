"""CLI behavior tests for listing and maintaining the cursor database.

Verifies how ``cursorhistory.cli.main`` resolves the database path and
applies forget/rename edits.
"""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cursorhistory import cli
from cursorhistory.runtime.config import HistorySettings


def _entry(line: int, ch: int = 0) -> dict[str, object]:
    point = {"line": line, "ch": ch}
    return {"cursor": {"from": point, "to": point}, "scrollState": {"top": 12.0, "left": 0.0}}


class CliDatabaseTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.db_path = Path(self._tmp.name) / "db.json"
        self.db_path.write_text(
            json.dumps({"notes/b.md": _entry(9, 1), "notes/a.md": {"scrollState": {"top": 3, "left": 0}}}),
            encoding="utf-8",
        )

    def _run(self, *argv: str) -> str:
        out = io.StringIO()
        with mock.patch("sys.stdout", out):
            cli.main(["--database", str(self.db_path), *argv])
        return out.getvalue()

    def test_lists_entries_sorted_with_one_based_positions(self) -> None:
        self.assertEqual(
            self._run().splitlines(),
            ["notes/a.md:-  (scroll 3)", "notes/b.md:10:2  (scroll 12)"],
        )

    def test_json_output_is_the_database_object(self) -> None:
        data = json.loads(self._run("--json"))
        self.assertEqual(data["notes/b.md"], _entry(9, 1))

    def test_forget_and_rename_write_back(self) -> None:
        self.assertEqual(self._run("--forget", "notes/a.md", "--rename", "notes/b.md", "c.md"), "")

        saved = json.loads(self.db_path.read_text(encoding="utf-8"))
        self.assertEqual(list(saved), ["c.md"])

    def test_unknown_entry_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run("--forget", "missing.md")
        self.assertIn("missing.md", str(ctx.exception))

    def test_default_database_path_comes_from_settings(self) -> None:
        settings = HistorySettings(database_file_name=str(self.db_path))
        out = io.StringIO()
        with mock.patch("cursorhistory.cli.load_settings", return_value=settings), mock.patch("sys.stdout", out):
            cli.main([])
        self.assertIn("notes/b.md:10:2", out.getvalue())

    def test_edit_on_missing_database_exits(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["--database", str(Path(self._tmp.name) / "none.json"), "--forget", "x.md"])


if __name__ == "__main__":
    unittest.main()
