from __future__ import annotations

import logging

from PySide6 import QtCore

from element_catalogue.theming.theme_tokens import DEFAULT_THEME, THEME_TOKENS

logger = logging.getLogger(__name__)


class ThemeManager(QtCore.QObject):
    theme_changed = QtCore.Signal(dict)

    def __init__(self) -> None:
        super().__init__()
        self._theme_name = DEFAULT_THEME
        self._tokens: dict = THEME_TOKENS[DEFAULT_THEME]

    def available_themes(self) -> list[str]:
        return list(THEME_TOKENS.keys())

    def theme_name(self) -> str:
        return self._theme_name

    def set_theme(self, name: str) -> dict:
        if name not in THEME_TOKENS:
            logger.warning("Unknown theme %r, using %s", name, DEFAULT_THEME)
            name = DEFAULT_THEME
        self._theme_name = name
        self._tokens = THEME_TOKENS[name]
        self.theme_changed.emit(self._tokens)
        return self._tokens

    def tokens(self) -> dict:
        return self._tokens


_theme_manager: ThemeManager | None = None


def get_theme_manager() -> ThemeManager:
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager
