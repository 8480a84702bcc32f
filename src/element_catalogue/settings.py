from __future__ import annotations

import logging
from pathlib import Path

from PySide6 import QtCore

from element_catalogue.chem.query import SortOption
from element_catalogue.chem.units import TEMPERATURE_UNITS
from element_catalogue.theming.theme_tokens import DEFAULT_THEME

ORGANIZATION = "Element Catalogue"
APPLICATION = "Element Catalogue"
BOOKMARKS_FILENAME = "bookmarks.sqlite"


def app_data_dir() -> Path:
    base = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.StandardLocation.AppDataLocation)
    path = Path(base) if base else Path.home() / ".element_catalogue"
    path.mkdir(parents=True, exist_ok=True)
    return path


def bookmarks_db_path() -> Path:
    return app_data_dir() / BOOKMARKS_FILENAME


class AppSettings:
    """Typed access to the values persisted in QSettings."""

    def __init__(self, settings: QtCore.QSettings | None = None) -> None:
        self._settings = settings or QtCore.QSettings(ORGANIZATION, APPLICATION)

    def _string(self, key: str, default: str) -> str:
        value = self._settings.value(key, default)
        return str(value) if value not in (None, "") else default

    @property
    def theme(self) -> str:
        return self._string("theme", DEFAULT_THEME)

    @theme.setter
    def theme(self, name: str) -> None:
        self._settings.setValue("theme", name)

    @property
    def temperature_unit(self) -> str:
        unit = self._string("temperature_unit", "K")
        return unit if unit in TEMPERATURE_UNITS else "K"

    @temperature_unit.setter
    def temperature_unit(self, unit: str) -> None:
        self._settings.setValue("temperature_unit", unit)

    @property
    def sort_option(self) -> SortOption:
        return SortOption.from_label(self._string("sort_option", SortOption.ATOMIC_NUMBER.label))

    @sort_option.setter
    def sort_option(self, option: SortOption) -> None:
        self._settings.setValue("sort_option", option.label)

    @property
    def dataset_path(self) -> Path | None:
        value = self._string("dataset_path", "")
        return Path(value) if value else None

    @property
    def log_level(self) -> int:
        name = self._string("log_level", "INFO").upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def window_geometry(self) -> QtCore.QByteArray | None:
        value = self._settings.value("window_geometry")
        return value if isinstance(value, QtCore.QByteArray) else None

    @window_geometry.setter
    def window_geometry(self, geometry: QtCore.QByteArray) -> None:
        self._settings.setValue("window_geometry", geometry)

    def sync(self) -> None:
        self._settings.sync()
