# ui/widgets/sidebar/location_list_widget.py

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFrame, QLabel, QLineEdit,
    QToolButton, QCheckBox, QScrollArea
)

from core.intents import SearchChanged, Select, ToggleCategory, ToggleItem
from core.search import MatchMode, SearchState
from core.signals import signals
from game.catalog import Category
from ui.widgets.sidebar.list_builder import (
    NO_RESULTS_TEXT, UNAVAILABLE_TEXT, SidebarModel, SidebarSection, SidebarItem
)

VISIBLE_GLYPH   = "👁"
HIDDEN_GLYPH    = "👁‍🗨"
EXPANDED_GLYPH  = "▼"
COLLAPSED_GLYPH = "▶"

_STYLE = """
    QFrame#locationItem { padding: 2px 4px; border-bottom: 1px solid #2c2c2c; }
    QFrame#locationItem[active="true"] { background-color: #3d4a5c; }
    QFrame#sectionHeader { background-color: #2a2a2a; padding: 4px; }
    QToolButton#visibilityToggle { border: none; font-size: 14px; }
    QLabel#message { color: gray; padding: 8px; }
    QLabel#error { color: red; padding: 8px; }
"""


def _style_eye(button: QToolButton, visible: bool, show_tip: str, hide_tip: str):
    button.setText(VISIBLE_GLYPH if visible else HIDDEN_GLYPH)
    button.setToolTip(hide_tip if visible else show_tip)
    button.setStyleSheet("" if visible else "color: rgba(255, 255, 255, 128);")
    button.setProperty("shown", visible)


class LocationItemWidget(QFrame):
    def __init__(self, item: SidebarItem, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setObjectName("locationItem")
        self.location_id = item.location.id
        self.setProperty("active", False)
        self.setCursor(Qt.PointingHandCursor)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 2, 2)

        self.name_label = QLabel(item.location.name)
        self.name_label.setTextFormat(Qt.PlainText)
        self.name_label.setWordWrap(True)
        layout.addWidget(self.name_label, 1)

        self.toggle_button = QToolButton()
        self.toggle_button.setObjectName("visibilityToggle")
        self.toggle_button.clicked.connect(self._on_toggle)
        layout.addWidget(self.toggle_button)

        self.set_visible_state(item.visible)

    def set_visible_state(self, visible: bool):
        _style_eye(self.toggle_button, visible, "Toggle visibility", "Toggle visibility")

    def is_shown(self) -> bool:
        return bool(self.toggle_button.property("shown"))

    def set_active(self, on: bool):
        self.setProperty("active", on)
        self.style().unpolish(self)
        self.style().polish(self)

    def is_active(self) -> bool:
        return bool(self.property("active"))

    def _on_toggle(self):
        signals.intent.emit(ToggleItem(self.location_id))

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            signals.intent.emit(Select(self.location_id, focus=True))
        super().mouseReleaseEvent(event)


class _SectionHeader(QFrame):
    clicked = Signal()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)


class SectionWidget(QFrame):
    expandedChanged = Signal(object, bool)

    def __init__(self, section: SidebarSection, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.category = section.category
        self.location_ids = section.location_ids
        self.items: dict[str, LocationItemWidget] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 4)
        layout.setSpacing(0)

        # Header: category eye, title with count, expand arrow
        self.header = _SectionHeader()
        self.header.setObjectName("sectionHeader")
        self.header.setCursor(Qt.PointingHandCursor)
        header_layout = QHBoxLayout(self.header)
        header_layout.setContentsMargins(4, 2, 4, 2)

        self.category_button = QToolButton()
        self.category_button.setObjectName("visibilityToggle")
        self.category_button.clicked.connect(self._on_category_toggle)
        header_layout.addWidget(self.category_button)

        title = QLabel(f"<b>{section.title}</b> <span style='color: gray;'>({len(section.items)})</span>")
        header_layout.addWidget(title, 1)

        self.arrow = QLabel()
        header_layout.addWidget(self.arrow)
        layout.addWidget(self.header)

        # Content
        self.content = QWidget()
        content_layout = QVBoxLayout(self.content)
        content_layout.setContentsMargins(0, 0, 0, 0)
        content_layout.setSpacing(0)
        for item in section.items:
            widget = LocationItemWidget(item)
            content_layout.addWidget(widget)
            self.items[item.location.id] = widget
        layout.addWidget(self.content)

        self.header.clicked.connect(self.toggle_expanded)
        self.set_category_visible(section.category_visible)
        self.set_expanded(section.expanded)

    def set_category_visible(self, visible: bool):
        _style_eye(self.category_button, visible, "Show all in category", "Hide all in category")

    def set_expanded(self, expanded: bool):
        self._expanded = expanded
        self.content.setVisible(expanded)
        self.arrow.setText(EXPANDED_GLYPH if expanded else COLLAPSED_GLYPH)

    def is_expanded(self) -> bool:
        return self._expanded

    def toggle_expanded(self):
        self.set_expanded(not self._expanded)
        self.expandedChanged.emit(self.category, self._expanded)

    def _on_category_toggle(self):
        signals.intent.emit(ToggleCategory(self.category, self.location_ids))


class LocationListWidget(QWidget):
    """
    Search box plus grouped, collapsible location list.  Renders a SidebarModel
    and turns clicks into intents; it never writes visibility state itself.
    """

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setStyleSheet(_STYLE)

        self._sections: dict[Category, SectionWidget] = {}
        self._items: dict[str, LocationItemWidget] = {}
        self._expanded: dict[Category, bool] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        # Search row
        search_row = QHBoxLayout()
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search locations...")
        self.search_edit.textChanged.connect(self._on_query_changed)
        search_row.addWidget(self.search_edit, 1)

        self.clear_button = QToolButton()
        self.clear_button.setText("✕")
        self.clear_button.setToolTip("Clear search")
        self.clear_button.setVisible(False)
        self.clear_button.clicked.connect(self.search_edit.clear)
        search_row.addWidget(self.clear_button)
        layout.addLayout(search_row)

        self.search_all_check = QCheckBox("Search descriptions")
        self.search_all_check.toggled.connect(self._on_match_mode_changed)
        layout.addWidget(self.search_all_check)

        # List
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QScrollArea.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        layout.addWidget(self.scroll, 1)

        self._container = None
        self._list_layout = None
        self.message_label: Optional[QLabel] = None
        self._reset_container()

        signals.item_visibility_changed.connect(self._on_item_visibility_changed)
        signals.category_visibility_changed.connect(self._on_category_visibility_changed)

    # ——— Search ————————————————————————————————————

    def search_state(self) -> SearchState:
        mode = MatchMode.NAME_AND_DESCRIPTION if self.search_all_check.isChecked() else MatchMode.NAME_ONLY
        return SearchState(self.search_edit.text(), mode)

    def _on_query_changed(self, text: str):
        self.clear_button.setVisible(bool(text))
        state = self.search_state()
        signals.intent.emit(SearchChanged(state.query, state.match_mode))

    def _on_match_mode_changed(self, _checked: bool):
        state = self.search_state()
        if state.query:
            signals.intent.emit(SearchChanged(state.query, state.match_mode))

    # ——— Rendering ——————————————————————————————————

    def render(self, model: SidebarModel, reset_expanded: bool = False):
        if reset_expanded:
            self._expanded.clear()
        self._reset_container()

        if model.unavailable:
            self._add_message(UNAVAILABLE_TEXT, "error")
            return
        if model.no_results:
            self._add_message(NO_RESULTS_TEXT, "message")
            return

        for section in model.sections:
            widget = SectionWidget(section)
            widget.expandedChanged.connect(self._on_expanded_changed)
            self._list_layout.insertWidget(self._list_layout.count() - 1, widget)
            self._sections[section.category] = widget
            self._items.update(widget.items)
            self._expanded[section.category] = section.expanded

    def _reset_container(self):
        self._sections.clear()
        self._items.clear()
        self.message_label = None

        old = self.scroll.takeWidget()
        if old is not None:
            old.deleteLater()

        self._container = QWidget()
        self._list_layout = QVBoxLayout(self._container)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(0)
        self._list_layout.addStretch()
        self.scroll.setWidget(self._container)

    def _add_message(self, text: str, kind: str):
        label = QLabel(text)
        label.setObjectName(kind)
        label.setWordWrap(True)
        self._list_layout.insertWidget(0, label)
        self.message_label = label

    def _on_expanded_changed(self, category: Category, expanded: bool):
        self._expanded[category] = expanded

    # ——— Lookups used by the dispatcher and highlighter ———

    def expanded_state(self) -> dict[Category, bool]:
        return dict(self._expanded)

    def section_widget(self, category: Category) -> Optional[SectionWidget]:
        return self._sections.get(category)

    def item_widget(self, location_id: str) -> Optional[LocationItemWidget]:
        return self._items.get(location_id)

    def scroll_to(self, widget: QWidget):
        self.scroll.ensureWidgetVisible(widget)

    # ——— Signal handlers ————————————————————————————

    def _on_item_visibility_changed(self, location_id: str, visible: bool):
        if item := self._items.get(location_id):
            item.set_visible_state(visible)

    def _on_category_visibility_changed(self, category: Category, visible: bool):
        if section := self._sections.get(category):
            section.set_category_visible(visible)
