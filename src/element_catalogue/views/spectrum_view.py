from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.colors import color_for_element, contrast_text
from element_catalogue.chem.elements import ElementRecord
from element_catalogue.chem.spectrum import (
    DISCLAIMER,
    SCALE_TICKS,
    VISIBLE_MAX_NM,
    VISIBLE_MIN_NM,
    notable_line_labels,
    simulated_lines,
    spectrum_caption,
    wavelength_to_rgb,
)


class SpectrumWidget(QtWidgets.QWidget):
    """Dark canvas with the visible band and one white line per simulated emission line."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._record: ElementRecord | None = None
        self._border = QtGui.QColor("#334155")
        self.setMinimumHeight(120)
        self.setSizePolicy(QtWidgets.QSizePolicy.Policy.Expanding, QtWidgets.QSizePolicy.Policy.Fixed)

    def sizeHint(self) -> QtCore.QSize:
        return QtCore.QSize(480, 120)

    def apply_theme(self, tokens: dict) -> None:
        self._border = QtGui.QColor(tokens.get("colors", {}).get("border", "#334155"))
        self.update()

    def set_element(self, record: ElementRecord | None) -> None:
        self._record = record
        self.update()

    def _band_gradient(self, rect: QtCore.QRectF) -> QtGui.QLinearGradient:
        gradient = QtGui.QLinearGradient(rect.topLeft(), rect.topRight())
        steps = 24
        for i in range(steps + 1):
            t = i / steps
            r, g, b = wavelength_to_rgb(VISIBLE_MIN_NM + t * (VISIBLE_MAX_NM - VISIBLE_MIN_NM))
            gradient.setColorAt(t, QtGui.QColor.fromRgbF(r, g, b))
        return gradient

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        if not painter.isActive():
            return
        try:
            painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
            rect = QtCore.QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5)
            path = QtGui.QPainterPath()
            path.addRoundedRect(rect, 8, 8)
            painter.fillPath(path, QtGui.QColor(0, 0, 0, 204))
            painter.setPen(QtGui.QPen(self._border, 1))
            painter.drawPath(path)
            if self._record is None:
                return
            band = QtCore.QRectF(rect.left(), rect.top() + rect.height() / 3, rect.width(), rect.height() / 3)
            painter.fillRect(band, QtGui.QBrush(self._band_gradient(band)))
            painter.setPen(QtGui.QPen(QtGui.QColor("#ffffff"), 3))
            for line in simulated_lines(self._record):
                x = rect.left() + rect.width() * line.position
                painter.drawLine(QtCore.QPointF(x, rect.top()), QtCore.QPointF(x, rect.bottom()))
        finally:
            painter.end()


def _scale_row() -> QtWidgets.QHBoxLayout:
    row = QtWidgets.QHBoxLayout()
    row.setContentsMargins(0, 0, 0, 0)
    for tick in SCALE_TICKS:
        label = QtWidgets.QLabel(f"{tick}nm")
        label.setObjectName("mutedLabel")
        label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        row.addWidget(label, 1)
    return row


class SpectrumPanel(QtWidgets.QGroupBox):
    """Spectrum canvas with wavelength scale, notable lines and disclaimer."""

    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__("Emission Spectrum", parent)
        layout = QtWidgets.QVBoxLayout(self)
        self.canvas = SpectrumWidget()
        layout.addWidget(self.canvas)
        layout.addLayout(_scale_row())
        layout.addWidget(QtWidgets.QLabel("Notable spectral lines:"))
        self.caption = QtWidgets.QLabel()
        self.caption.setWordWrap(True)
        layout.addWidget(self.caption)
        self.line_labels: list[QtWidgets.QLabel] = []
        for text in notable_line_labels():
            label = QtWidgets.QLabel()
            label.setTextFormat(QtCore.Qt.TextFormat.RichText)
            label.setProperty("line_text", text)
            self.line_labels.append(label)
            layout.addWidget(label)
        disclaimer = QtWidgets.QLabel(DISCLAIMER)
        disclaimer.setObjectName("mutedLabel")
        disclaimer.setWordWrap(True)
        layout.addWidget(disclaimer)

    def apply_theme(self, tokens: dict) -> None:
        self.canvas.apply_theme(tokens)

    def set_element(self, record: ElementRecord | None) -> None:
        self.canvas.set_element(record)
        self.caption.setText(spectrum_caption(record) if record else "")
        dot = color_for_element(record) if record else "#94a3b8"
        for label in self.line_labels:
            label.setText(f'<span style="color:{dot}">●</span>&nbsp;{label.property("line_text")}')


class SpectralTab(QtWidgets.QWidget):
    def __init__(self, catalogue: Catalogue, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.catalogue = catalogue
        layout = QtWidgets.QVBoxLayout(self)

        picker_row = QtWidgets.QHBoxLayout()
        picker_row.addStretch()
        picker_row.addWidget(QtWidgets.QLabel("Select Element"))
        self.element_combo = QtWidgets.QComboBox()
        self.element_combo.setMaximumWidth(220)
        for record in catalogue:
            self.element_combo.addItem(record.name, userData=record.number)
        picker_row.addWidget(self.element_combo)
        picker_row.addStretch()
        layout.addLayout(picker_row)

        self.card = QtWidgets.QFrame()
        self.card.setMinimumWidth(300)
        card_layout = QtWidgets.QVBoxLayout(self.card)
        card_layout.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.symbol_label = QtWidgets.QLabel()
        font = self.symbol_label.font()
        font.setPointSize(36)
        font.setBold(True)
        self.symbol_label.setFont(font)
        self.name_label = QtWidgets.QLabel()
        name_font = self.name_label.font()
        name_font.setPointSize(18)
        self.name_label.setFont(name_font)
        self.number_label = QtWidgets.QLabel()
        self.mass_label = QtWidgets.QLabel()
        for label in (self.symbol_label, self.name_label, self.number_label, self.mass_label):
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            card_layout.addWidget(label)
        card_row = QtWidgets.QHBoxLayout()
        card_row.addStretch()
        card_row.addWidget(self.card)
        card_row.addStretch()
        layout.addLayout(card_row)

        self.panel = SpectrumPanel()
        layout.addWidget(self.panel)

        self.empty_label = QtWidgets.QLabel("Select an element to view its spectral lines")
        self.empty_label.setObjectName("mutedLabel")
        self.empty_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label, 1)
        layout.addStretch()

        self.element_combo.currentIndexChanged.connect(self._on_combo_changed)
        self._on_combo_changed()

    def apply_theme(self, tokens: dict) -> None:
        self.panel.apply_theme(tokens)

    def set_element(self, number: int) -> None:
        index = self.element_combo.findData(number)
        if index >= 0:
            self.element_combo.setCurrentIndex(index)

    def _on_combo_changed(self) -> None:
        record = self.catalogue.by_number(self.element_combo.currentData())
        self.card.setVisible(record is not None)
        self.panel.setVisible(record is not None)
        self.empty_label.setVisible(record is None)
        self.panel.set_element(record)
        if record is None:
            return
        color = color_for_element(record)
        text = contrast_text(color)
        self.card.setStyleSheet(f"QFrame {{ background-color: {color}; border-radius: 12px; }} QLabel {{ color: {text}; }}")
        self.symbol_label.setText(record.symbol)
        self.name_label.setText(record.name)
        self.number_label.setText(f"Atomic Number: {record.number}")
        self.mass_label.setText(f"Atomic Mass: {record.atomic_mass:.3f}")
