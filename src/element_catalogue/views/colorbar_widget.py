from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field

from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.colors import resolve_cmap
from element_catalogue.chem.units import format_numeric

TICK_FRACTIONS = (0.0, 0.25, 0.5, 0.75, 1.0)


def _identity(value: float) -> float:
    return value


@dataclass
class ColorbarData:
    cmap_name: str
    vmin: float
    vmax: float
    label: str
    mode: str = "linear"
    display: Callable[[float], float] = field(default=_identity)

    def value_at(self, fraction: float) -> float:
        """Raw data value under a point of the bar; log bars interpolate exponents."""
        if self.mode == "log" and self.vmin > 0 and self.vmax > 0:
            lo, hi = math.log10(self.vmin), math.log10(self.vmax)
            return 10 ** (lo + (hi - lo) * fraction)
        return self.vmin + (self.vmax - self.vmin) * fraction

    def tick_labels(self) -> list[tuple[float, str]]:
        return [(f, format_numeric(self.display(self.value_at(f)))) for f in TICK_FRACTIONS]


class HorizontalColorbarWidget(QtWidgets.QWidget):
    """Colormap strip with a caption above and five value ticks below."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._data: ColorbarData | None = None
        self._colors = {"text": "#f8fafc", "border": "#334155", "surface": "#111827"}
        self._strip: QtGui.QImage | None = None
        self.setMinimumHeight(58)

    def apply_theme(self, tokens: dict) -> None:
        colors = tokens.get("colors", {})
        self._colors = {key: colors.get(key, value) for key, value in self._colors.items()}
        self._strip = None
        self.update()

    def set_data(
        self,
        cmap_name: str,
        vmin: float,
        vmax: float,
        label: str,
        mode: str = "linear",
        display: Callable[[float], float] | None = None,
    ) -> None:
        self._data = ColorbarData(cmap_name, vmin, vmax, label, mode, display or _identity)
        self._strip = None
        self.update()

    def _render_strip(self, width: int) -> QtGui.QImage:
        # one pixel row, stretched vertically by drawImage
        strip = QtGui.QImage(width, 1, QtGui.QImage.Format.Format_RGB32)
        cmap = resolve_cmap(self._data.cmap_name)
        for x in range(width):
            r, g, b, _ = cmap(x / max(width - 1, 1))
            strip.setPixelColor(x, 0, QtGui.QColor.fromRgbF(float(r), float(g), float(b)))
        return strip

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        try:
            area = self.rect()
            painter.fillRect(area, QtGui.QColor(self._colors["surface"]))
            if self._data is None:
                return
            metrics = painter.fontMetrics()
            bar = QtCore.QRect(area.left() + 8, area.top() + 8 + metrics.height(), area.width() - 16, 12)
            if bar.width() <= 0:
                return
            if self._strip is None or self._strip.width() != bar.width():
                self._strip = self._render_strip(bar.width())
            painter.drawImage(bar, self._strip)

            text_pen = QtGui.QPen(QtGui.QColor(self._colors["text"]))
            painter.setPen(QtGui.QPen(QtGui.QColor(self._colors["border"])))
            painter.drawRect(bar.adjusted(0, 0, -1, -1))
            painter.setPen(text_pen)
            painter.drawText(bar.left(), area.top() + 4 + metrics.ascent(), self._data.label)

            baseline = bar.bottom() + 4 + metrics.ascent()
            for fraction, text in self._data.tick_labels():
                x = bar.left() + round(fraction * (bar.width() - 1))
                painter.drawLine(x, bar.bottom() + 1, x, bar.bottom() + 3)
                advance = metrics.horizontalAdvance(text)
                left = min(max(x - advance // 2, bar.left()), bar.right() - advance)
                painter.drawText(left, baseline, text)
        finally:
            painter.end()
