from __future__ import annotations

import logging
from dataclasses import replace

import qtawesome as qta
from PySide6 import QtCore, QtGui, QtWidgets

from element_catalogue.chem.catalogue import Catalogue
from element_catalogue.chem.colors import color_for_element, contrast_text
from element_catalogue.chem.elements import ElementRecord
from element_catalogue.chem.query import SORT_SECTIONS, ElementQuery, FilterSet, SortOption
from element_catalogue.views.bookmark_controller import BookmarkController

logger = logging.getLogger(__name__)

NUMBER_ROLE = QtCore.Qt.ItemDataRole.UserRole + 1

_FILTER_SECTIONS = (
    ("Categories", "category", "{}"),
    ("Phase", "phase", "{}"),
    ("Block", "block", "Block {}"),
    ("Period", "period", "Period {}"),
    ("Group", "group", "Group {}"),
)


def _star_icon(bookmarked: bool, color: str) -> QtGui.QIcon:
    return qta.icon("fa5s.star" if bookmarked else "fa5.star", color=color)


class ElementRowWidget(QtWidgets.QWidget):
    bookmark_toggled = QtCore.Signal(int)

    def __init__(self, record: ElementRecord, bookmarked: bool, colors: dict, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self.record = record
        self._colors = colors
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(10)

        color = color_for_element(record)
        symbol = QtWidgets.QLabel(record.symbol)
        symbol.setObjectName("elementSymbol")
        symbol.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        symbol.setFixedSize(44, 44)
        symbol.setStyleSheet(f"background-color: {color}; color: {contrast_text(color)}; border-radius: 8px;")
        layout.addWidget(symbol)

        text_col = QtWidgets.QVBoxLayout()
        text_col.setSpacing(0)
        name = QtWidgets.QLabel(record.name)
        detail = QtWidgets.QLabel(f"{record.number} • {record.category}")
        detail.setObjectName("mutedLabel")
        text_col.addWidget(name)
        text_col.addWidget(detail)
        layout.addLayout(text_col, 1)

        self.bookmark_button = QtWidgets.QToolButton()
        self.bookmark_button.setObjectName("bookmarkButton")
        self.bookmark_button.setAutoRaise(True)
        self.bookmark_button.clicked.connect(lambda: self.bookmark_toggled.emit(self.record.number))
        layout.addWidget(self.bookmark_button)
        self.set_bookmarked(bookmarked)

    def set_bookmarked(self, bookmarked: bool) -> None:
        self.bookmark_button.setIcon(_star_icon(bookmarked, self._colors.get("bookmark", "#facc15")))
        self.bookmark_button.setToolTip("Remove bookmark" if bookmarked else "Bookmark this element")


class ElementListTab(QtWidgets.QWidget):
    """Searchable, filterable, sortable list of every element plus a bookmarked section."""

    element_activated = QtCore.Signal(int)
    sort_changed = QtCore.Signal(object)

    def __init__(
        self,
        catalogue: Catalogue,
        bookmarks: BookmarkController,
        sort: SortOption = SortOption.ATOMIC_NUMBER,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.catalogue = catalogue
        self.bookmarks = bookmarks
        self.query = ElementQuery(sort=sort)
        self.results: list[ElementRecord] = []
        self._colors: dict = {}

        layout = QtWidgets.QVBoxLayout(self)

        self.search_edit = QtWidgets.QLineEdit()
        self.search_edit.setPlaceholderText("Search elements")
        self.search_edit.setClearButtonEnabled(True)
        self.search_edit.addAction(qta.icon("fa5s.search"), QtWidgets.QLineEdit.ActionPosition.LeadingPosition)
        self.search_edit.textChanged.connect(self._on_text_changed)
        self.search_edit.returnPressed.connect(self._on_search_submitted)
        layout.addWidget(self.search_edit)

        bar = QtWidgets.QHBoxLayout()
        self.sort_button = QtWidgets.QToolButton()
        self.sort_button.setIcon(qta.icon("fa5s.sort"))
        self.sort_button.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.sort_button.setPopupMode(QtWidgets.QToolButton.ToolButtonPopupMode.InstantPopup)
        self.sort_menu = QtWidgets.QMenu(self.sort_button)
        self._sort_group = QtGui.QActionGroup(self)
        self._sort_group.setExclusive(True)
        self._sort_actions: dict[SortOption, QtGui.QAction] = {}
        for section, options in SORT_SECTIONS:
            self.sort_menu.addSection(section)
            for option in options:
                action = QtGui.QAction(option.label, self)
                action.setCheckable(True)
                action.triggered.connect(lambda _=False, o=option: self.set_sort(o))
                self._sort_group.addAction(action)
                self.sort_menu.addAction(action)
                self._sort_actions[option] = action
        self.sort_button.setMenu(self.sort_menu)
        bar.addWidget(self.sort_button)

        self.filter_button = QtWidgets.QToolButton()
        self.filter_button.setText("Filter")
        self.filter_button.setIcon(qta.icon("fa5s.filter"))
        self.filter_button.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self.filter_button.setPopupMode(QtWidgets.QToolButton.ToolButtonPopupMode.InstantPopup)
        self.filter_menu = QtWidgets.QMenu(self.filter_button)
        self.filter_menu.aboutToShow.connect(self._populate_filter_menu)
        self.filter_button.setMenu(self.filter_menu)
        bar.addWidget(self.filter_button)

        self.reset_button = QtWidgets.QPushButton("Reset")
        self.reset_button.setIcon(qta.icon("fa5s.undo"))
        self.reset_button.clicked.connect(self.reset_query)
        bar.addWidget(self.reset_button)
        bar.addStretch()
        layout.addLayout(bar)

        self.badge_container = QtWidgets.QWidget()
        self.badge_row = QtWidgets.QHBoxLayout(self.badge_container)
        self.badge_row.setContentsMargins(0, 0, 0, 0)
        self.badge_row.setSpacing(6)
        layout.addWidget(self.badge_container)

        self.list_widget = QtWidgets.QListWidget()
        self.list_widget.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.list_widget.setVerticalScrollMode(QtWidgets.QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.list_widget.itemClicked.connect(self._on_item_activated)
        open_current = QtGui.QShortcut(QtGui.QKeySequence(QtCore.Qt.Key.Key_Return), self.list_widget)
        open_current.setContext(QtCore.Qt.ShortcutContext.WidgetShortcut)
        open_current.activated.connect(self._open_current_item)
        layout.addWidget(self.list_widget, 1)

        self.bookmarks.changed.connect(self.refresh)
        self.refresh()

    def apply_theme(self, tokens: dict) -> None:
        self._colors = dict(tokens.get("colors", {}))
        self.refresh()

    def set_sort(self, option: SortOption) -> None:
        if option is self.query.sort:
            return
        self._set_query(self.query.with_sort(option))
        self.sort_changed.emit(option)

    def set_filters(self, filters: FilterSet) -> None:
        self._set_query(self.query.with_filters(filters))

    def reset_query(self) -> None:
        sort_was_default = self.query.sort is SortOption.ATOMIC_NUMBER
        self._set_query(self.query.reset())
        if not sort_was_default:
            self.sort_changed.emit(self.query.sort)

    def focus_search(self) -> None:
        self.search_edit.setFocus(QtCore.Qt.FocusReason.ShortcutFocusReason)
        self.search_edit.selectAll()

    def _set_query(self, query: ElementQuery) -> None:
        logger.debug("Element query changed: %s", query)
        self.query = query
        self.refresh()

    def _on_text_changed(self, text: str) -> None:
        self._set_query(self.query.with_text(text))

    def _on_search_submitted(self) -> None:
        if len(self.results) == 1:
            self.element_activated.emit(self.results[0].number)

    def _open_current_item(self) -> None:
        item = self.list_widget.currentItem()
        if item is not None:
            self._on_item_activated(item)

    def _on_item_activated(self, item: QtWidgets.QListWidgetItem) -> None:
        number = item.data(NUMBER_ROLE)
        if number is not None:
            self.element_activated.emit(int(number))

    def _populate_filter_menu(self) -> None:
        menu = self.filter_menu
        menu.clear()
        menu.addSection("General")
        reset = menu.addAction(qta.icon("fa5s.undo"), "Reset All Filters")
        reset.setEnabled(not self.query.is_default)
        reset.triggered.connect(self.reset_query)
        values = {
            "category": self.catalogue.categories(),
            "phase": self.catalogue.phases(),
            "block": self.catalogue.blocks(),
            "period": self.catalogue.periods(),
            "group": self.catalogue.groups(),
        }
        current = self.query.filters
        for title, name, template in _FILTER_SECTIONS:
            menu.addSection(title)
            for value in values[name]:
                action = menu.addAction(template.format(value))
                action.setCheckable(True)
                action.setChecked(getattr(current, name) == value)
                action.triggered.connect(lambda checked, n=name, v=value: self._toggle_filter(n, v, checked))

    def _toggle_filter(self, name: str, value, checked: bool) -> None:
        filters = self.query.filters
        if checked:
            # one value per field; picking another replaces the current one
            filters = replace(filters, **{name: value})
        else:
            filters = filters.without(name)
        self.set_filters(filters)

    def _rebuild_badges(self) -> None:
        while self.badge_row.count():
            item = self.badge_row.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        if self.query.is_default:
            self.badge_container.setVisible(False)
            return
        self.badge_container.setVisible(True)
        self.badge_row.addWidget(self._badge("Reset All", "fa5s.undo", self.reset_query))
        for name, text in self.query.filters.active():
            self.badge_row.addWidget(
                self._badge(text, "fa5s.times", lambda n=name: self.set_filters(self.query.filters.without(n)))
            )
        if self.query.sort is not SortOption.ATOMIC_NUMBER:
            self.badge_row.addWidget(
                self._badge(f"Sort: {self.query.sort.label}", "fa5s.times", lambda: self.set_sort(SortOption.ATOMIC_NUMBER))
            )
        self.badge_row.addStretch()

    def _badge(self, text: str, icon: str, on_click) -> QtWidgets.QToolButton:
        badge = QtWidgets.QToolButton()
        badge.setObjectName("filterBadge")
        badge.setText(text)
        badge.setIcon(qta.icon(icon, color=self._colors.get("badgeText", "#dbeafe")))
        badge.setToolButtonStyle(QtCore.Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        badge.setLayoutDirection(QtCore.Qt.LayoutDirection.RightToLeft)
        badge.clicked.connect(lambda: on_click())
        return badge

    def _add_header(self, text: str) -> None:
        item = QtWidgets.QListWidgetItem()
        item.setFlags(QtCore.Qt.ItemFlag.NoItemFlags)
        label = QtWidgets.QLabel(text)
        label.setObjectName("sectionHeader")
        item.setSizeHint(label.sizeHint())
        self.list_widget.addItem(item)
        self.list_widget.setItemWidget(item, label)

    def _add_row(self, record: ElementRecord, bookmarked: bool) -> None:
        item = QtWidgets.QListWidgetItem()
        item.setData(NUMBER_ROLE, record.number)
        item.setData(QtCore.Qt.ItemDataRole.AccessibleTextRole, f"{record.name}, {record.symbol}, {record.number}")
        row = ElementRowWidget(record, bookmarked, self._colors)
        # queued: the toggle rebuilds the list and deletes this row
        row.bookmark_toggled.connect(self.bookmarks.toggle, QtCore.Qt.ConnectionType.QueuedConnection)
        item.setSizeHint(row.sizeHint())
        self.list_widget.addItem(item)
        self.list_widget.setItemWidget(item, row)

    def refresh(self) -> None:
        self.results = self.query.run(self.catalogue)
        for option, action in self._sort_actions.items():
            action.setChecked(option is self.query.sort)
        self.sort_button.setText(f"Sort: {self.query.sort.label}")
        self.filter_button.setText(
            "Filter" if self.query.filters.is_empty else f"Filter ({len(self.query.filters.active())})"
        )
        self.reset_button.setEnabled(not self.query.is_default)
        self._rebuild_badges()

        scroll = self.list_widget.verticalScrollBar().value()
        self.list_widget.clear()
        marked = self.bookmarks.numbers()
        bookmarked = self.bookmarks.elements()
        if bookmarked:
            self._add_header("Bookmarked Elements")
            for record in bookmarked:
                self._add_row(record, True)
        self._add_header(f"All Elements ({len(self.results)})")
        for record in self.results:
            self._add_row(record, record.number in marked)
        self.list_widget.verticalScrollBar().setValue(scroll)
