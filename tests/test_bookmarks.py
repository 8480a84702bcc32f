from __future__ import annotations

import sys
import tempfile
import threading
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.bookmarks import (
    Bookmark,
    InMemoryBookmarkRepository,
    SqliteBookmarkRepository,
    bookmarked_elements,
    clear_bookmarks,
    toggle_bookmark,
)
from element_catalogue.chem.catalogue import Catalogue
from element_fixtures import hydrogen_helium

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class BookmarkBehaviour:
    """Shared checks run against every repository implementation."""

    def make_repository(self):
        raise NotImplementedError

    def setUp(self) -> None:
        self.repo = self.make_repository()

    def test_toggle_adds_then_removes(self) -> None:
        self.assertTrue(toggle_bookmark(self.repo, 1, now=T0))
        self.assertTrue(self.repo.contains(1))
        self.assertEqual(self.repo.list(), [Bookmark(1, T0)])
        self.assertFalse(toggle_bookmark(self.repo, 1))
        self.assertFalse(self.repo.contains(1))
        self.assertEqual(self.repo.list(), [])

    def test_double_toggle_restores_state(self) -> None:
        toggle_bookmark(self.repo, 2, now=T0)
        before = self.repo.numbers()
        toggle_bookmark(self.repo, 5)
        toggle_bookmark(self.repo, 5)
        self.assertEqual(self.repo.numbers(), before)

    def test_at_most_one_bookmark_per_element(self) -> None:
        self.repo.add(Bookmark(3, T0))
        self.repo.add(Bookmark(3, T0 + timedelta(minutes=1)))
        self.assertEqual(len(self.repo), 1)
        self.assertEqual(self.repo.get(3).date_bookmarked, T0 + timedelta(minutes=1))

    def test_listed_in_bookmark_order(self) -> None:
        toggle_bookmark(self.repo, 26, now=T0 + timedelta(seconds=2))
        toggle_bookmark(self.repo, 1, now=T0 + timedelta(seconds=5))
        toggle_bookmark(self.repo, 2, now=T0)
        self.assertEqual([b.element_number for b in self.repo.list()], [2, 26, 1])

    def test_clear_removes_everything(self) -> None:
        for number in (1, 2, 3):
            toggle_bookmark(self.repo, number, now=T0)
        self.assertEqual(clear_bookmarks(self.repo), 3)
        self.assertEqual(len(self.repo), 0)
        self.assertEqual(clear_bookmarks(self.repo), 0)

    def test_remove_unknown_is_false(self) -> None:
        self.assertFalse(self.repo.remove(42))
        self.assertIsNone(self.repo.get(42))

    def test_concurrent_toggles_keep_one_record(self) -> None:
        # an even number of toggles per element leaves it unmarked
        threads = [threading.Thread(target=toggle_bookmark, args=(self.repo, 7)) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertFalse(self.repo.contains(7))
        self.assertLessEqual(len(self.repo), 1)


class InMemoryBookmarkTests(BookmarkBehaviour, unittest.TestCase):
    def make_repository(self):
        return InMemoryBookmarkRepository()


class SqliteBookmarkTests(BookmarkBehaviour, unittest.TestCase):
    def make_repository(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "bookmarks.sqlite"
        return SqliteBookmarkRepository(self.path)

    def tearDown(self) -> None:
        self.repo.close()
        self._tmp.cleanup()

    def test_bookmarks_survive_reopen(self) -> None:
        toggle_bookmark(self.repo, 1, now=T0)
        toggle_bookmark(self.repo, 2, now=T0 + timedelta(hours=1))
        self.repo.close()
        with SqliteBookmarkRepository(self.path) as reopened:
            self.assertEqual(reopened.list(), [Bookmark(1, T0), Bookmark(2, T0 + timedelta(hours=1))])
        self.repo = SqliteBookmarkRepository(self.path)

    def test_creates_parent_directory(self) -> None:
        self.assertTrue(self.path.parent.is_dir())


class BookmarkedElementsTests(unittest.TestCase):
    def test_resolves_records_and_skips_unknown_numbers(self) -> None:
        catalogue = Catalogue(hydrogen_helium())
        repo = InMemoryBookmarkRepository()
        toggle_bookmark(repo, 2, now=T0)
        toggle_bookmark(repo, 99, now=T0 + timedelta(seconds=1))
        toggle_bookmark(repo, 1, now=T0 + timedelta(seconds=2))
        self.assertEqual([r.symbol for r in bookmarked_elements(repo, catalogue)], ["He", "H"])

    def test_hydrogen_scenario(self) -> None:
        repo = InMemoryBookmarkRepository()
        toggle_bookmark(repo, 1)
        self.assertEqual([b.element_number for b in repo.list()], [1])
        clear_bookmarks(repo)
        self.assertEqual(repo.list(), [])


if __name__ == "__main__":
    unittest.main()
