from __future__ import annotations

import abc
import logging
import sqlite3
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.elements import ElementRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bookmark:
    element_number: int
    date_bookmarked: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _ordered(bookmarks) -> list[Bookmark]:
    return sorted(bookmarks, key=lambda item: (item.date_bookmarked, item.element_number))


class BookmarkRepository(abc.ABC):
    """Keyed store holding at most one bookmark per element number."""

    def __init__(self) -> None:
        self.lock = threading.RLock()

    @abc.abstractmethod
    def list(self) -> list[Bookmark]: ...

    @abc.abstractmethod
    def get(self, element_number: int) -> Bookmark | None: ...

    @abc.abstractmethod
    def add(self, bookmark: Bookmark) -> None: ...

    @abc.abstractmethod
    def remove(self, element_number: int) -> bool: ...

    @abc.abstractmethod
    def clear(self) -> int: ...

    def contains(self, element_number: int) -> bool:
        return self.get(element_number) is not None

    def numbers(self) -> set[int]:
        return {bookmark.element_number for bookmark in self.list()}

    def __len__(self) -> int:
        return len(self.list())


class InMemoryBookmarkRepository(BookmarkRepository):
    def __init__(self) -> None:
        super().__init__()
        self._items: dict[int, Bookmark] = {}

    def list(self) -> list[Bookmark]:
        with self.lock:
            return _ordered(self._items.values())

    def get(self, element_number: int) -> Bookmark | None:
        with self.lock:
            return self._items.get(int(element_number))

    def add(self, bookmark: Bookmark) -> None:
        with self.lock:
            self._items[bookmark.element_number] = bookmark

    def remove(self, element_number: int) -> bool:
        with self.lock:
            return self._items.pop(int(element_number), None) is not None

    def clear(self) -> int:
        with self.lock:
            count = len(self._items)
            self._items.clear()
            return count


class SqliteBookmarkRepository(BookmarkRepository):
    """Bookmarks persisted in a single-table SQLite file."""

    SCHEMA = (
        "CREATE TABLE IF NOT EXISTS bookmarks ("
        "element_number INTEGER PRIMARY KEY, "
        "date_bookmarked TEXT NOT NULL)"
    )

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        if str(path) != ":memory:":
            self.path.parent.mkdir(parents=True, exist_ok=True)
        self._connection = sqlite3.connect(str(path), check_same_thread=False)
        self._connection.row_factory = sqlite3.Row
        with self._connection:
            self._connection.execute(self.SCHEMA)
        logger.debug("Opened bookmark store at %s", self.path)

    def close(self) -> None:
        with self.lock:
            self._connection.close()

    def __enter__(self) -> SqliteBookmarkRepository:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Bookmark:
        stamp = datetime.fromisoformat(row["date_bookmarked"])
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        return Bookmark(int(row["element_number"]), stamp)

    def list(self) -> list[Bookmark]:
        with self.lock:
            rows = self._connection.execute(
                "SELECT element_number, date_bookmarked FROM bookmarks"
            ).fetchall()
        return _ordered(self._from_row(row) for row in rows)

    def get(self, element_number: int) -> Bookmark | None:
        with self.lock:
            row = self._connection.execute(
                "SELECT element_number, date_bookmarked FROM bookmarks WHERE element_number = ?",
                (int(element_number),),
            ).fetchone()
        return self._from_row(row) if row else None

    def add(self, bookmark: Bookmark) -> None:
        with self.lock, self._connection:
            self._connection.execute(
                "INSERT OR REPLACE INTO bookmarks (element_number, date_bookmarked) VALUES (?, ?)",
                (bookmark.element_number, bookmark.date_bookmarked.isoformat()),
            )

    def remove(self, element_number: int) -> bool:
        with self.lock, self._connection:
            cursor = self._connection.execute(
                "DELETE FROM bookmarks WHERE element_number = ?",
                (int(element_number),),
            )
        return cursor.rowcount > 0

    def clear(self) -> int:
        with self.lock, self._connection:
            cursor = self._connection.execute("DELETE FROM bookmarks")
        return max(cursor.rowcount, 0)


def toggle_bookmark(repo: BookmarkRepository, element_number: int, now: datetime | None = None) -> bool:
    """Flip the bookmark for one element and return whether it is now bookmarked."""
    number = int(element_number)
    with repo.lock:
        if repo.contains(number):
            repo.remove(number)
            logger.debug("Removed bookmark for element %d", number)
            return False
        repo.add(Bookmark(number, now or _utcnow()))
        logger.debug("Bookmarked element %d", number)
        return True


def clear_bookmarks(repo: BookmarkRepository) -> int:
    with repo.lock:
        removed = repo.clear()
    logger.info("Cleared %d bookmarks", removed)
    return removed


def bookmarked_elements(repo: BookmarkRepository, catalogue: Catalogue) -> list[ElementRecord]:
    records = []
    for bookmark in repo.list():
        record = catalogue.by_number(bookmark.element_number)
        if record is not None:
            records.append(record)
    return records
