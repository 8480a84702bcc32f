from __future__ import annotations

import logging

import qtawesome as qta
from PySide6 import QtGui, QtWidgets

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.query import SortOption
from element_catalogue.chem.units import TEMPERATURE_UNITS
from element_catalogue.dialogs.element_detail_dialog import ElementDetailDialog
from element_catalogue.settings import AppSettings
from element_catalogue.theming.apply_theme import apply_theme as apply_theme_tokens
from element_catalogue.theming.theme_manager import get_theme_manager
from element_catalogue.views.bookmark_controller import BookmarkController
from element_catalogue.views.element_list_view import ElementListTab
from element_catalogue.views.periodic_table_view import PeriodicTableTab
from element_catalogue.views.spectrum_view import SpectralTab

logger = logging.getLogger(__name__)


class ElementCatalogueWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        catalogue: Catalogue,
        bookmarks: BookmarkController,
        settings: AppSettings | None = None,
        load_error: str | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Element Catalogue")
        self.setMinimumSize(1100, 720)
        self.catalogue = catalogue
        self.bookmarks = bookmarks
        self._settings = settings or AppSettings()
        self._load_error = load_error
        self._theme_name = self._settings.theme
        self._temperature_unit = self._settings.temperature_unit
        self._theme_manager = get_theme_manager()
        self._theme_manager.theme_changed.connect(self._on_theme_changed)

        self.tabs = QtWidgets.QTabWidget()
        self.list_tab = ElementListTab(catalogue, bookmarks, sort=self._settings.sort_option)
        self.table_tab = PeriodicTableTab(catalogue, bookmarks)
        self.spectral_tab = SpectralTab(catalogue)
        self.tabs.addTab(self.list_tab, qta.icon("fa5s.list"), "Elements")
        self.tabs.addTab(self.table_tab, qta.icon("fa5s.th"), "Periodic Table")
        self.tabs.addTab(self.spectral_tab, qta.icon("fa5s.rainbow"), "Spectral View")
        self.setCentralWidget(self.tabs)

        self.list_tab.element_activated.connect(self.show_element)
        self.table_tab.element_activated.connect(self.show_element)
        self.list_tab.sort_changed.connect(self._on_sort_changed)
        self.bookmarks.changed.connect(self._update_bookmark_actions)

        self._build_menus()
        self._update_bookmark_actions()
        self.table_tab.set_temperature_unit(self._temperature_unit)
        self._show_catalogue_status()

        geometry = self._settings.window_geometry
        if geometry is not None:
            self.restoreGeometry(geometry)
        self.apply_theme(self._theme_name)

    def _build_menus(self) -> None:
        tools_menu = self.menuBar().addMenu("Tools")
        find_action = QtGui.QAction(qta.icon("fa5s.search"), "Find Element", self)
        find_action.setShortcut(QtGui.QKeySequence.StandardKey.Find)
        find_action.triggered.connect(self._focus_search)
        tools_menu.addAction(find_action)
        tools_menu.addSeparator()
        self.clear_bookmarks_action = QtGui.QAction(qta.icon("fa5s.trash-alt"), "Clear All Bookmarks", self)
        self.clear_bookmarks_action.setShortcut(QtGui.QKeySequence("Ctrl+Shift+D"))
        self.clear_bookmarks_action.triggered.connect(self.confirm_clear_bookmarks)
        tools_menu.addAction(self.clear_bookmarks_action)

        view_menu = self.menuBar().addMenu("View")
        theme_menu = view_menu.addMenu("Theme")
        theme_group = QtGui.QActionGroup(self)
        theme_group.setExclusive(True)
        for name in self._theme_manager.available_themes():
            action = QtGui.QAction(name, self)
            action.setCheckable(True)
            action.setChecked(name == self._theme_name)
            action.triggered.connect(lambda checked, n=name: self.apply_theme(n))
            theme_group.addAction(action)
            theme_menu.addAction(action)

        unit_menu = view_menu.addMenu("Temperature Unit")
        unit_group = QtGui.QActionGroup(self)
        unit_group.setExclusive(True)
        for unit in TEMPERATURE_UNITS:
            action = QtGui.QAction(unit, self)
            action.setCheckable(True)
            action.setChecked(unit == self._temperature_unit)
            action.triggered.connect(lambda checked, u=unit: self.set_temperature_unit(u))
            unit_group.addAction(action)
            unit_menu.addAction(action)

    def _show_catalogue_status(self) -> None:
        if self._load_error:
            self.statusBar().showMessage(f"Element data could not be loaded: {self._load_error}")
        else:
            self.statusBar().showMessage(f"{len(self.catalogue)} elements loaded")

    def _focus_search(self) -> None:
        self.tabs.setCurrentWidget(self.list_tab)
        self.list_tab.focus_search()

    def _update_bookmark_actions(self) -> None:
        self.clear_bookmarks_action.setEnabled(not self.bookmarks.is_empty())

    def confirm_clear_bookmarks(self) -> None:
        if self.bookmarks.is_empty():
            return
        answer = QtWidgets.QMessageBox.question(
            self,
            "Clear All Bookmarks",
            "Are you sure you want to remove all bookmarked elements?",
            QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.Cancel,
            QtWidgets.QMessageBox.StandardButton.Cancel,
        )
        if answer != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        removed = self.bookmarks.clear()
        self.statusBar().showMessage(f"Removed {removed} bookmarks", 4000)

    def show_element(self, number: int) -> None:
        record = self.catalogue.by_number(number)
        if record is None:
            logger.debug("No element with number %s", number)
            return
        self.spectral_tab.set_element(number)
        dialog = ElementDetailDialog(
            record,
            self.bookmarks,
            temperature_unit=self._temperature_unit,
            tokens=self._theme_manager.tokens(),
            parent=self,
        )
        dialog.exec()
        dialog.deleteLater()

    def _on_sort_changed(self, option: SortOption) -> None:
        self._settings.sort_option = option

    def set_temperature_unit(self, unit: str) -> None:
        self._temperature_unit = unit
        self._settings.temperature_unit = unit
        self.table_tab.set_temperature_unit(unit)

    def apply_theme(self, theme_name: str) -> None:
        self._theme_name = theme_name
        self._settings.theme = theme_name
        self._theme_manager.set_theme(theme_name)

    def _on_theme_changed(self, tokens: dict) -> None:
        app = QtWidgets.QApplication.instance()
        if app:
            apply_theme_tokens(app, tokens)
        for tab_index in range(self.tabs.count()):
            apply = getattr(self.tabs.widget(tab_index), "apply_theme", None)
            if callable(apply):
                apply(tokens)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._settings.window_geometry = self.saveGeometry()
        self._settings.sync()
        super().closeEvent(event)
