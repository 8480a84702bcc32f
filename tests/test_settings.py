from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from pathlib import Path

from PySide6 import QtCore

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
sys.path.append(str(Path(__file__).resolve().parent))

from element_catalogue.chem.bookmarks import InMemoryBookmarkRepository
from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.query import SortOption
from element_catalogue.settings import AppSettings
from element_catalogue.theming.theme_manager import ThemeManager
from element_catalogue.theming.theme_tokens import DEFAULT_THEME, THEME_TOKENS, get_theme_tokens
from element_catalogue.views.bookmark_controller import BookmarkController
from element_fixtures import hydrogen_helium


class AppSettingsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = str(Path(self._tmp.name) / "settings.ini")
        self.settings = AppSettings(QtCore.QSettings(self.path, QtCore.QSettings.Format.IniFormat))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_defaults(self) -> None:
        self.assertEqual(self.settings.theme, DEFAULT_THEME)
        self.assertEqual(self.settings.temperature_unit, "K")
        self.assertIs(self.settings.sort_option, SortOption.ATOMIC_NUMBER)
        self.assertIsNone(self.settings.dataset_path)
        self.assertEqual(self.settings.log_level, logging.INFO)
        self.assertIsNone(self.settings.window_geometry)

    def test_values_persist(self) -> None:
        self.settings.theme = "High Contrast"
        self.settings.temperature_unit = "°F"
        self.settings.sort_option = SortOption.DENSITY
        self.settings.sync()
        reopened = AppSettings(QtCore.QSettings(self.path, QtCore.QSettings.Format.IniFormat))
        self.assertEqual(reopened.theme, "High Contrast")
        self.assertEqual(reopened.temperature_unit, "°F")
        self.assertIs(reopened.sort_option, SortOption.DENSITY)

    def test_invalid_values_fall_back(self) -> None:
        raw = QtCore.QSettings(self.path, QtCore.QSettings.Format.IniFormat)
        raw.setValue("temperature_unit", "Rankine")
        raw.setValue("sort_option", "Popularity")
        raw.setValue("log_level", "chatty")
        settings = AppSettings(raw)
        self.assertEqual(settings.temperature_unit, "K")
        self.assertIs(settings.sort_option, SortOption.ATOMIC_NUMBER)
        self.assertEqual(settings.log_level, logging.INFO)

    def test_dataset_override_and_log_level(self) -> None:
        raw = QtCore.QSettings(self.path, QtCore.QSettings.Format.IniFormat)
        raw.setValue("dataset_path", "/tmp/elements.json")
        raw.setValue("log_level", "debug")
        settings = AppSettings(raw)
        self.assertEqual(settings.dataset_path, Path("/tmp/elements.json"))
        self.assertEqual(settings.log_level, logging.DEBUG)


class ThemeManagerTests(unittest.TestCase):
    def test_every_theme_has_the_tokens_views_read(self) -> None:
        for name in THEME_TOKENS:
            colors = get_theme_tokens(name)["colors"]
            for key in ("surface", "border", "text", "bookmark", "badge", "badgeText"):
                self.assertIn(key, colors, f"{name} lacks {key}")

    def test_set_theme_emits_tokens(self) -> None:
        manager = ThemeManager()
        received = []
        manager.theme_changed.connect(received.append)
        manager.set_theme("Catalogue Light")
        self.assertEqual(manager.theme_name(), "Catalogue Light")
        self.assertEqual(received, [THEME_TOKENS["Catalogue Light"]])

    def test_unknown_theme_uses_default(self) -> None:
        manager = ThemeManager()
        with self.assertLogs("element_catalogue.theming.theme_manager", level="WARNING"):
            manager.set_theme("Neon")
        self.assertEqual(manager.theme_name(), DEFAULT_THEME)


class BookmarkControllerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.controller = BookmarkController(InMemoryBookmarkRepository(), Catalogue(hydrogen_helium()))
        self.changes = []
        self.controller.changed.connect(lambda: self.changes.append(True))

    def test_toggle_notifies_listeners(self) -> None:
        self.assertTrue(self.controller.toggle(2))
        self.assertTrue(self.controller.is_bookmarked(2))
        self.assertEqual([r.symbol for r in self.controller.elements()], ["He"])
        self.assertFalse(self.controller.toggle(2))
        self.assertEqual(len(self.changes), 2)
        self.assertTrue(self.controller.is_empty())

    def test_clear_reports_removed_count(self) -> None:
        self.controller.toggle(1)
        self.controller.toggle(2)
        self.assertEqual(self.controller.numbers(), {1, 2})
        self.assertEqual(self.controller.clear(), 2)
        self.assertTrue(self.controller.is_empty())
        self.assertEqual(len(self.changes), 3)


if __name__ == "__main__":
    unittest.main()
