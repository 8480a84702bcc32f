from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtWidgets

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.bookmarks import InMemoryBookmarkRepository
from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.query import FilterSet, SortOption
from element_catalogue.views.bookmark_controller import BookmarkController
from element_catalogue.views.element_list_view import ElementListTab
from element_fixtures import hydrogen_helium


class FilterMenuResetTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])

    def setUp(self) -> None:
        catalogue = Catalogue(hydrogen_helium())
        self.tab = ElementListTab(catalogue, BookmarkController(InMemoryBookmarkRepository(), catalogue))
        self.sorts = []
        self.tab.sort_changed.connect(self.sorts.append)

    def tearDown(self) -> None:
        self.tab.deleteLater()

    def _reset_action(self):
        self.tab._populate_filter_menu()
        return next(a for a in self.tab.filter_menu.actions() if a.text() == "Reset All Filters")

    def test_disabled_for_default_query(self) -> None:
        self.assertFalse(self._reset_action().isEnabled())

    def test_sort_alone_enables_reset(self) -> None:
        self.tab.set_sort(SortOption.DENSITY)
        self.assertTrue(self._reset_action().isEnabled())

    def test_reset_clears_filters_and_sort_but_keeps_text(self) -> None:
        self.tab.search_edit.setText("he")
        self.tab.set_sort(SortOption.ATOMIC_MASS)
        self.tab.set_filters(FilterSet(phase="Gas"))
        self._reset_action().trigger()
        self.assertTrue(self.tab.query.is_default)
        self.assertEqual(self.tab.query.text, "he")
        self.assertEqual(self.sorts, [SortOption.ATOMIC_MASS, SortOption.ATOMIC_NUMBER])


if __name__ == "__main__":
    unittest.main()
