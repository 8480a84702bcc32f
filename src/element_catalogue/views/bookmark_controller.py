from __future__ import annotations

import logging

from PySide6 import QtCore

from element_catalogue.chem.bookmarks import (
    BookmarkRepository,
    bookmarked_elements,
    clear_bookmarks,
    toggle_bookmark,
)
from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.elements import ElementRecord

logger = logging.getLogger(__name__)


class BookmarkController(QtCore.QObject):
    """Qt-side owner of the bookmark repository; every view listens to ``changed``."""

    changed = QtCore.Signal()

    def __init__(self, repository: BookmarkRepository, catalogue: Catalogue, parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent)
        self._repository = repository
        self._catalogue = catalogue

    @property
    def repository(self) -> BookmarkRepository:
        return self._repository

    def is_bookmarked(self, element_number: int) -> bool:
        return self._repository.contains(element_number)

    def numbers(self) -> set[int]:
        return self._repository.numbers()

    def is_empty(self) -> bool:
        return len(self._repository) == 0

    def elements(self) -> list[ElementRecord]:
        return bookmarked_elements(self._repository, self._catalogue)

    def toggle(self, element_number: int) -> bool:
        state = toggle_bookmark(self._repository, element_number)
        logger.debug("Element %s bookmarked=%s", element_number, state)
        self.changed.emit()
        return state

    def clear(self) -> int:
        removed = clear_bookmarks(self._repository)
        self.changed.emit()
        return removed
