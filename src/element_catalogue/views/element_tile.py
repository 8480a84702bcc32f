from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.colors import NEUTRAL_COLOR, contrast_text


class RotatedLabel(QtWidgets.QLabel):
    def __init__(self, text: str, angle: int = -90, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(text, parent)
        self._angle = angle

    def minimumSizeHint(self) -> QtCore.QSize:
        size = super().minimumSizeHint()
        return QtCore.QSize(size.height(), size.width()) if self._angle % 180 else size

    def sizeHint(self) -> QtCore.QSize:
        return self.minimumSizeHint()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.translate(self.width() / 2, self.height() / 2)
        painter.rotate(self._angle)
        rect = QtCore.QRect(-self.height() // 2, -self.width() // 2, self.height(), self.width())
        painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()


class ElementTileButton(QtWidgets.QAbstractButton):
    """Periodic table cell: symbol, atomic number, an optional value line and a bookmark star."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._symbol = ""
        self._atomic_number = 0
        self._caption = ""
        self._bookmarked = False
        self._base_color = QtGui.QColor(NEUTRAL_COLOR)
        self._text_color = QtGui.QColor(contrast_text(NEUTRAL_COLOR))
        self._border_color = QtGui.QColor("#334155")
        self._focus_color = QtGui.QColor("#fbbf24")
        self._star_color = QtGui.QColor("#facc15")
        self._font_point_size = 10
        self.setCheckable(True)
        self.setMinimumSize(48, 52)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Expanding)

    def set_theme(self, colors: dict, font_point_size: int) -> None:
        self._border_color = QtGui.QColor(colors.get("border", "#334155"))
        self._focus_color = QtGui.QColor(colors.get("focusRing", colors.get("accent", "#fbbf24")))
        self._star_color = QtGui.QColor(colors.get("bookmark", "#facc15"))
        self._font_point_size = font_point_size
        self.update()

    def set_tile_color(self, base_hex: str) -> None:
        self._base_color = QtGui.QColor(base_hex)
        self._text_color = QtGui.QColor(contrast_text(base_hex))
        self.update()

    def set_element(self, symbol: str, atomic_number: int, name: str = "") -> None:
        self._symbol = symbol
        self._atomic_number = atomic_number
        self.setToolTip(name or symbol)
        self.setAccessibleName(f"{name or symbol}, atomic number {atomic_number}")
        self.update()

    def set_caption(self, caption: str) -> None:
        self._caption = caption
        self.update()

    def set_bookmarked(self, bookmarked: bool) -> None:
        if bookmarked != self._bookmarked:
            self._bookmarked = bookmarked
            self.update()

    def is_bookmarked(self) -> bool:
        return self._bookmarked

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(60, 60)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        rect = self.rect().adjusted(1, 1, -1, -1)
        radius = 5

        base = QtGui.QColor(self._base_color)
        if self.underMouse():
            base = base.lighter(110)
        painter.setPen(QtGui.QPen(self._border_color, 1))
        painter.setBrush(QtGui.QBrush(base))
        painter.drawRoundedRect(rect, radius, radius)

        # chamfer: light top-left edge, dark bottom-right edge
        inner = rect.adjusted(1, 1, -1, -1)
        painter.setPen(QtGui.QPen(base.lighter(112), 1))
        painter.drawLine(inner.topLeft(), inner.topRight())
        painter.drawLine(inner.topLeft(), inner.bottomLeft())
        painter.setPen(QtGui.QPen(base.darker(112), 1))
        painter.drawLine(inner.bottomLeft(), inner.bottomRight())
        painter.drawLine(inner.topRight(), inner.bottomRight())

        if self.hasFocus() or self.isChecked():
            painter.setPen(QtGui.QPen(self._focus_color, 2))
            painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
            painter.drawRoundedRect(rect.adjusted(1, 1, -1, -1), radius, radius)

        font = painter.font()
        font.setBold(True)
        font.setPointSize(self._font_point_size + 2)
        painter.setFont(font)
        painter.setPen(QtGui.QPen(self._text_color))
        symbol_rect = rect.adjusted(0, 0, 0, -8) if self._caption else rect
        painter.drawText(symbol_rect, QtCore.Qt.AlignmentFlag.AlignCenter, self._symbol)

        small_font = painter.font()
        small_font.setBold(False)
        small_font.setPointSize(max(self._font_point_size - 2, 7))
        painter.setFont(small_font)
        if self._atomic_number:
            painter.drawText(
                rect.adjusted(5, 3, -5, -3),
                QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignLeft,
                str(self._atomic_number),
            )
        if self._caption:
            painter.drawText(
                rect.adjusted(3, 3, -3, -3),
                QtCore.Qt.AlignmentFlag.AlignBottom | QtCore.Qt.AlignmentFlag.AlignHCenter,
                self._caption,
            )
        if self._bookmarked:
            painter.setPen(QtGui.QPen(self._star_color))
            painter.drawText(
                rect.adjusted(5, 3, -5, -3),
                QtCore.Qt.AlignmentFlag.AlignTop | QtCore.Qt.AlignmentFlag.AlignRight,
                "★",
            )
        painter.end()

    def enterEvent(self, event: QtCore.QEvent) -> None:
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event: QtCore.QEvent) -> None:
        self.update()
        super().leaveEvent(event)
