from __future__ import annotations

import html

import qtawesome as qta
from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.colors import color_for_element, contrast_text
from element_catalogue.chem.details import detail_sections, image_reference
from element_catalogue.chem.elements import ElementRecord
from element_catalogue.views.atomic_model_view import AtomicModelView
from element_catalogue.views.bookmark_controller import BookmarkController
from element_catalogue.views.spectrum_view import SpectrumPanel


class ElementDetailDialog(QtWidgets.QDialog):
    """Full record for one element with its shell model and emission spectrum."""

    def __init__(
        self,
        record: ElementRecord,
        bookmarks: BookmarkController,
        temperature_unit: str = "K",
        tokens: dict | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.record = record
        self.bookmarks = bookmarks
        self.temperature_unit = temperature_unit
        self._tokens = tokens or {}
        self._cleaned_up = False
        self.setWindowTitle(f"{record.name} ({record.symbol})")
        self.setMinimumSize(900, 620)
        self._build_ui()
        self._populate()
        self.bookmarks.changed.connect(self._refresh_bookmark)
        self.apply_theme(self._tokens)

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)

        header = QtWidgets.QHBoxLayout()
        self.symbol_badge = QtWidgets.QLabel(self.record.symbol)
        self.symbol_badge.setFixedSize(72, 72)
        self.symbol_badge.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        font = self.symbol_badge.font()
        font.setPointSize(24)
        font.setBold(True)
        self.symbol_badge.setFont(font)
        header.addWidget(self.symbol_badge)

        title_col = QtWidgets.QVBoxLayout()
        self.name_label = QtWidgets.QLabel(self.record.name)
        name_font = self.name_label.font()
        name_font.setPointSize(18)
        name_font.setBold(True)
        self.name_label.setFont(name_font)
        self.number_label = QtWidgets.QLabel(f"Atomic Number: {self.record.number}")
        self.mass_label = QtWidgets.QLabel(f"Atomic Mass: {self.record.atomic_mass:.3f}")
        self.number_label.setObjectName("mutedLabel")
        self.mass_label.setObjectName("mutedLabel")
        title_col.addWidget(self.name_label)
        title_col.addWidget(self.number_label)
        title_col.addWidget(self.mass_label)
        header.addLayout(title_col, 1)

        self.bookmark_button = QtWidgets.QToolButton()
        self.bookmark_button.setObjectName("bookmarkButton")
        self.bookmark_button.setAutoRaise(True)
        self.bookmark_button.setIconSize(QtCore.QSize(24, 24))
        self.bookmark_button.clicked.connect(self._toggle_bookmark)
        header.addWidget(self.bookmark_button, 0, QtCore.Qt.AlignmentFlag.AlignTop)
        layout.addLayout(header)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        self.info = QtWidgets.QTextBrowser()
        self.info.setOpenExternalLinks(True)
        splitter.addWidget(self.info)

        self.visual_tabs = QtWidgets.QTabWidget()
        self.atom_view = AtomicModelView()
        self.visual_tabs.addTab(self.atom_view, "3D Model")
        spectrum_page = QtWidgets.QScrollArea()
        spectrum_page.setWidgetResizable(True)
        self.spectrum_panel = SpectrumPanel()
        spectrum_page.setWidget(self.spectrum_panel)
        self.visual_tabs.addTab(spectrum_page, "Spectrum")
        splitter.addWidget(self.visual_tabs)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter, 1)

        buttons = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _populate(self) -> None:
        color = color_for_element(self.record)
        self.symbol_badge.setStyleSheet(
            f"background-color: {color}; color: {contrast_text(color)}; border-radius: 36px;"
        )
        self.info.setHtml(self._info_html())
        self.atom_view.set_element(self.record)
        self.spectrum_panel.set_element(self.record)
        self._refresh_bookmark()

    def _info_html(self) -> str:
        border = self._tokens.get("colors", {}).get("border", "#cbd5e1")
        parts = ["<html><body>"]
        for section in detail_sections(self.record, self.temperature_unit):
            parts.append(f"<h3>{html.escape(section.title)}</h3>")
            parts.append("<table style='border-collapse: collapse; width: 100%;'>")
            for title, value in section.rows:
                parts.append(
                    f"<tr><td style='padding-right:12px;'><b>{html.escape(title)}</b></td>"
                    f"<td>{html.escape(value)}</td></tr>"
                )
            parts.append("</table>")
        parts.append("<h3>Summary</h3>")
        parts.append(
            f"<div style='padding:8px; border:1px solid {border}; border-radius:6px;'>"
            f"{html.escape(self.record.summary)}</div>"
        )
        source = html.escape(self.record.source)
        parts.append(f"<p><b>Source:</b> <a href='{source}'>{source}</a></p>")
        parts.append("<h3>Image</h3>")
        image = self.record.image
        if image is not None and image.url:
            url = html.escape(image.url)
            parts.append(f"<p><a href='{url}'>{html.escape(image_reference(self.record))}</a></p>")
        else:
            parts.append(f"<p>{html.escape(image_reference(self.record))}</p>")
        parts.append("</body></html>")
        return "".join(parts)

    def apply_theme(self, tokens: dict) -> None:
        self._tokens = tokens or {}
        self.atom_view.apply_theme(self._tokens)
        self.spectrum_panel.apply_theme(self._tokens)
        self.info.setHtml(self._info_html())
        self._refresh_bookmark()

    def _toggle_bookmark(self) -> None:
        self.bookmarks.toggle(self.record.number)

    def _refresh_bookmark(self) -> None:
        marked = self.bookmarks.is_bookmarked(self.record.number)
        color = self._tokens.get("colors", {}).get("bookmark", "#facc15")
        self.bookmark_button.setIcon(qta.icon("fa5s.star" if marked else "fa5.star", color=color))
        self.bookmark_button.setToolTip("Remove bookmark" if marked else "Bookmark this element")

    def cleanup(self) -> None:
        if self._cleaned_up:
            return
        self._cleaned_up = True
        self.bookmarks.changed.disconnect(self._refresh_bookmark)
        self.atom_view.cleanup()

    def done(self, result: int) -> None:
        # Escape and the Close button end here without a closeEvent
        self.cleanup()
        super().done(result)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.cleanup()
        super().closeEvent(event)
