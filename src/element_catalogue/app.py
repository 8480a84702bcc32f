from __future__ import annotations

import logging
import sqlite3
import sys
from pathlib import Path

from PySide6 import QtWidgets

from element_catalogue.chem.bookmarks import (
    BookmarkRepository,
    InMemoryBookmarkRepository,
    SqliteBookmarkRepository,
)
from element_catalogue.chem.catalogue import Catalogue, load_catalogue
from element_catalogue.errors import CatalogueLoadError
from element_catalogue.settings import APPLICATION, ORGANIZATION, AppSettings, bookmarks_db_path
from element_catalogue.views.bookmark_controller import BookmarkController
from element_catalogue.views.main_window import ElementCatalogueWindow

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def open_bookmark_repository(path: Path | None = None) -> BookmarkRepository:
    try:
        path = path or bookmarks_db_path()
        return SqliteBookmarkRepository(path)
    except (sqlite3.Error, OSError) as exc:
        logger.warning("Bookmark store %s unavailable (%s); bookmarks will not persist", path, exc)
        return InMemoryBookmarkRepository()


def main() -> None:
    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(ORGANIZATION)
    app.setApplicationName(APPLICATION)
    app.setStyle("Fusion")

    settings = AppSettings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    load_error = None
    try:
        catalogue = load_catalogue(settings.dataset_path)
    except CatalogueLoadError as exc:
        load_error = str(exc)
        catalogue = Catalogue.empty()
        QtWidgets.QMessageBox.warning(None, "Element Catalogue", f"Element data could not be loaded.\n\n{exc}")

    repository = open_bookmark_repository()
    bookmarks = BookmarkController(repository, catalogue)
    window = ElementCatalogueWindow(catalogue, bookmarks, settings=settings, load_error=load_error)
    window.show()
    exit_code = app.exec()
    if isinstance(repository, SqliteBookmarkRepository):
        repository.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
