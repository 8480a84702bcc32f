from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from element_catalogue.app import open_bookmark_repository
from element_catalogue.chem.bookmarks import InMemoryBookmarkRepository, SqliteBookmarkRepository, toggle_bookmark


class OpenBookmarkRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_opens_sqlite_store(self) -> None:
        repo = open_bookmark_repository(self.root / "bookmarks.sqlite")
        self.assertIsInstance(repo, SqliteBookmarkRepository)
        repo.close()

    def test_uncreatable_directory_falls_back_to_memory(self) -> None:
        blocker = self.root / "blocker"
        blocker.write_text("not a directory")
        with self.assertLogs("element_catalogue.app", level="WARNING"):
            repo = open_bookmark_repository(blocker / "data" / "bookmarks.sqlite")
        self.assertIsInstance(repo, InMemoryBookmarkRepository)
        self.assertTrue(toggle_bookmark(repo, 1))


if __name__ == "__main__":
    unittest.main()
