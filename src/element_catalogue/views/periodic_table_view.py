from __future__ import annotations

import logging
from functools import partial

from PySide6 import QtCore, QtWidgets

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.colors import (
    CATEGORY_COLORS,
    COLORMAPS,
    PHASE_COLORS,
    PROPERTY_SCHEMES,
    PropertyScheme,
    scheme_colors,
    value_range,
)
from element_catalogue.chem.units import convert_temperature, format_numeric
from element_catalogue.views.bookmark_controller import BookmarkController
from element_catalogue.views.colorbar_widget import HorizontalColorbarWidget
from element_catalogue.views.element_tile import ElementTileButton, RotatedLabel

logger = logging.getLogger(__name__)

_TEMPERATURE_FIELDS = ("melt", "boil")
# detached lanthanide/actinide rows sit below a spacer row
_F_ROWS = {9: "La–Lu", 10: "Ac–Lr"}


class TableCanvas(QtWidgets.QWidget):
    def __init__(self, layout: QtWidgets.QGridLayout, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.setLayout(layout)
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_StyledBackground, True)


class PeriodicTableTab(QtWidgets.QWidget):
    element_activated = QtCore.Signal(int)

    def __init__(
        self,
        catalogue: Catalogue,
        bookmarks: BookmarkController,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.catalogue = catalogue
        self.bookmarks = bookmarks
        self.font_point_size = 10
        self.temp_unit = "K"
        self.current_scheme: PropertyScheme = PROPERTY_SCHEMES[0]
        self.current_cmap = self.current_scheme.default_cmap
        self.log_scale = False
        self._theme_colors: dict = {}
        self.buttons: dict[int, ElementTileButton] = {}

        layout = QtWidgets.QVBoxLayout(self)
        controls_row = QtWidgets.QHBoxLayout()
        controls_row.addWidget(QtWidgets.QLabel("Color by:"))
        self.scheme_combo = QtWidgets.QComboBox()
        for scheme in PROPERTY_SCHEMES:
            self.scheme_combo.addItem(scheme.label, userData=scheme)
        controls_row.addWidget(self.scheme_combo)
        controls_row.addWidget(QtWidgets.QLabel("Colormap:"))
        self.cmap_combo = QtWidgets.QComboBox()
        self.cmap_combo.addItems(list(COLORMAPS))
        controls_row.addWidget(self.cmap_combo)
        controls_row.addWidget(QtWidgets.QLabel("Scale:"))
        self.scale_combo = QtWidgets.QComboBox()
        self.scale_combo.addItems(["Linear", "Logarithmic"])
        controls_row.addWidget(self.scale_combo)
        controls_row.addStretch()
        layout.addLayout(controls_row)

        self.legend_container = QtWidgets.QWidget()
        self.legend_row = QtWidgets.QHBoxLayout(self.legend_container)
        self.legend_row.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.legend_container)

        self.colorbar_widget = HorizontalColorbarWidget()
        self.colorbar_widget.setVisible(False)
        layout.addWidget(self.colorbar_widget)

        self.grid_layout = QtWidgets.QGridLayout()
        self.grid_layout.setSpacing(4)
        self.grid_layout.setContentsMargins(8, 8, 8, 8)
        self.grid_widget = TableCanvas(self.grid_layout)
        grid_row_widget = QtWidgets.QWidget()
        grid_row = QtWidgets.QHBoxLayout(grid_row_widget)
        grid_row.setContentsMargins(0, 0, 0, 0)
        period_label = RotatedLabel("Period", angle=-90)
        period_label.setObjectName("mutedLabel")
        grid_row.addWidget(period_label, 0)
        grid_row.addWidget(self.grid_widget, 1)
        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QtWidgets.QFrame.Shape.NoFrame)
        scroll.setWidget(grid_row_widget)
        layout.addWidget(scroll, 1)

        self.empty_label = QtWidgets.QLabel("No element data is loaded.")
        self.empty_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setVisible(catalogue.is_empty)
        layout.addWidget(self.empty_label)

        self._build_grid()
        self.scheme_combo.currentIndexChanged.connect(self._on_scheme_change)
        self.cmap_combo.currentTextChanged.connect(self._on_cmap_change)
        self.scale_combo.currentIndexChanged.connect(self._on_scale_change)
        self.bookmarks.changed.connect(self.refresh_bookmarks)
        self._on_scheme_change()

    def apply_theme(self, tokens: dict) -> None:
        self._theme_colors = dict(tokens.get("colors", {}))
        self.font_point_size = tokens.get("font", {}).get("baseSize", self.font_point_size)
        for btn in self.buttons.values():
            btn.set_theme(self._theme_colors, self.font_point_size)
        self.colorbar_widget.apply_theme(tokens)
        self._build_legend()

    def set_temperature_unit(self, unit: str) -> None:
        self.temp_unit = unit
        self._apply_coloring()

    def _build_grid(self) -> None:
        group_label = QtWidgets.QLabel("Group")
        group_label.setObjectName("mutedLabel")
        group_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        self.grid_layout.addWidget(group_label, 0, 1, 1, 18)
        for col in range(1, 19):
            lbl = QtWidgets.QLabel(str(col))
            lbl.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            self.grid_layout.addWidget(lbl, 1, col)
        for row in range(1, 8):
            lbl = QtWidgets.QLabel(str(row))
            lbl.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            self.grid_layout.addWidget(lbl, row + 1, 0)
        for row, text in _F_ROWS.items():
            lbl = QtWidgets.QLabel(text)
            lbl.setObjectName("mutedLabel")
            lbl.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            self.grid_layout.addWidget(lbl, row + 1, 0)

        for record in self.catalogue:
            btn = ElementTileButton()
            btn.set_element(record.symbol, record.number, record.name)
            btn.set_bookmarked(self.bookmarks.is_bookmarked(record.number))
            btn.clicked.connect(lambda _=False, n=record.number: self._on_tile_clicked(n))
            # header row shifts every element down by one
            self.grid_layout.addWidget(btn, record.ypos + 1, record.xpos)
            self.buttons[record.number] = btn

        self.grid_layout.setRowStretch(0, 0)
        self.grid_layout.setRowStretch(1, 0)
        for row in range(2, 9):
            self.grid_layout.setRowStretch(row, 1)
        self.grid_layout.setRowMinimumHeight(9, 12)
        self.grid_layout.setRowStretch(9, 0)
        self.grid_layout.setRowStretch(10, 1)
        self.grid_layout.setRowStretch(11, 1)

    def _build_legend(self) -> None:
        while self.legend_row.count():
            item = self.legend_row.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        entries = PHASE_COLORS if self.current_scheme.key == "phase" else CATEGORY_COLORS
        border = self._theme_colors.get("border", "#334155")
        for name, color in entries.items():
            swatch = QtWidgets.QLabel("  ")
            swatch.setStyleSheet(f"background-color: {color}; border: 1px solid {border};")
            self.legend_row.addWidget(swatch)
            self.legend_row.addWidget(QtWidgets.QLabel(name.title()))
        self.legend_row.addStretch()

    def _on_tile_clicked(self, number: int) -> None:
        for other, btn in self.buttons.items():
            btn.setChecked(other == number)
        self.element_activated.emit(number)

    def _on_scheme_change(self) -> None:
        scheme = self.scheme_combo.currentData()
        if scheme is None:
            return
        self.current_scheme = scheme
        logger.debug("Colouring table by %s", scheme.key)
        self.cmap_combo.setEnabled(scheme.is_numeric)
        self.scale_combo.setEnabled(scheme.is_numeric)
        if scheme.is_numeric:
            self.cmap_combo.blockSignals(True)
            self.cmap_combo.setCurrentText(scheme.default_cmap)
            self.cmap_combo.blockSignals(False)
            self.current_cmap = scheme.default_cmap
        self._build_legend()
        self._apply_coloring()

    def _on_cmap_change(self, cmap: str) -> None:
        self.current_cmap = cmap
        self._apply_coloring()

    def _on_scale_change(self) -> None:
        self.log_scale = self.scale_combo.currentText().lower().startswith("log")
        self._apply_coloring()

    def _caption(self, value: float | None, field: str) -> str:
        if value is None:
            return "-"
        if field in _TEMPERATURE_FIELDS:
            value = convert_temperature(value, self.temp_unit)
        return format_numeric(value)

    def _apply_coloring(self) -> None:
        scheme = self.current_scheme
        records = self.catalogue.all()
        colors = scheme_colors(records, scheme, self.current_cmap, self.log_scale)
        self.legend_container.setVisible(not scheme.is_numeric)
        if scheme.is_numeric:
            self._render_colorbar(scheme)
        else:
            self.colorbar_widget.setVisible(False)
        for record in records:
            btn = self.buttons.get(record.number)
            if btn is None:
                continue
            btn.set_tile_color(colors[record.number])
            btn.set_caption(self._caption(getattr(record, scheme.field), scheme.field) if scheme.is_numeric else "")

    def _render_colorbar(self, scheme: PropertyScheme) -> None:
        bounds = value_range(self.catalogue.all(), scheme.field, self.log_scale)
        if bounds is None:
            self.colorbar_widget.setVisible(False)
            return
        vmin, vmax = bounds
        unit = scheme.unit
        display = None
        if scheme.field in _TEMPERATURE_FIELDS:
            display = partial(convert_temperature, unit=self.temp_unit)
            unit = self.temp_unit
        label = scheme.label if not unit else f"{scheme.label} [{unit}]"
        if self.log_scale:
            label = f"{label} (log)"
        self.colorbar_widget.set_data(
            self.current_cmap, vmin, vmax, label, "log" if self.log_scale else "linear", display
        )
        self.colorbar_widget.setVisible(True)

    def refresh_bookmarks(self) -> None:
        marked = self.bookmarks.numbers()
        for number, btn in self.buttons.items():
            btn.set_bookmarked(number in marked)
