# ui/windows/settings_window.py

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QGroupBox, QCheckBox, QPushButton, QHBoxLayout,
    QMessageBox, QLabel
)

from core.intents import ResetPreferences, SectionEnabledChanged
from core.settings import get_setting, save_settings
from core.signals import signals
from game.catalog import Category
from ui.widgets.sidebar.list_builder import ExpandPolicy
from ui.widgets.toast import Toast


class SettingsWindow(QDialog):
    def __init__(self, parent=None, app=None):
        super().__init__(parent)
        self.app = app
        self.setWindowTitle("Settings")
        self.setMinimumSize(360, 300)

        main_layout = QVBoxLayout(self)

        self._init_sections_group(main_layout)
        self._init_sidebar_group(main_layout)
        self._init_data_group(main_layout)

        btn_layout = QHBoxLayout()
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.close)
        btn_layout.addStretch()
        btn_layout.addWidget(close_btn)
        main_layout.addLayout(btn_layout)

    def _init_sections_group(self, layout):
        group = QGroupBox("Locations")
        vbox = QVBoxLayout(group)

        self.section_checks: dict[Category, QCheckBox] = {}
        for category, text in (
            (Category.HIDDEN,           "Show hidden locations"),
            (Category.LAST_LISTENER,    "Show Last Listener locations"),
            (Category.CAVES,            "Show caves"),
        ):
            check = QCheckBox(text)
            check.toggled.connect(lambda on, c=category: signals.intent.emit(SectionEnabledChanged(c, on)))
            vbox.addWidget(check)
            self.section_checks[category] = check

        layout.addWidget(group)

    def _init_sidebar_group(self, layout):
        group = QGroupBox("Sidebar")
        vbox = QVBoxLayout(group)
        self.preserve_check = QCheckBox("Keep sections open while searching")
        self.preserve_check.toggled.connect(self._save_expand_policy)
        vbox.addWidget(self.preserve_check)
        layout.addWidget(group)

    def _init_data_group(self, layout):
        group = QGroupBox("Local data")
        vbox = QVBoxLayout(group)
        hint = QLabel("Resets every visibility preference and section setting.")
        hint.setStyleSheet("color: gray; font-style: italic;")
        hint.setWordWrap(True)
        vbox.addWidget(hint)
        clear_btn = QPushButton("Clear local data")
        clear_btn.clicked.connect(self._clear_local_data)
        vbox.addWidget(clear_btn)
        layout.addWidget(group)

    def load_state(self):
        """Sync the controls with the stored preferences without re-emitting intents."""
        for category, check in self.section_checks.items():
            check.blockSignals(True)
            check.setChecked(self.app.store.get_section_enabled(category))
            check.blockSignals(False)

        policy = ExpandPolicy.from_setting(get_setting(self.app.settings, "sidebar", "expand_policy"))
        self.preserve_check.blockSignals(True)
        self.preserve_check.setChecked(policy == ExpandPolicy.PRESERVE)
        self.preserve_check.blockSignals(False)

    def _save_expand_policy(self, preserve: bool):
        policy = ExpandPolicy.PRESERVE if preserve else ExpandPolicy.RESET
        self.app.settings.setdefault("sidebar", {})["expand_policy"] = policy.value
        save_settings(self.app.profile_path, self.app.settings)
        if self.app.dispatcher:
            self.app.dispatcher.policy = policy
        Toast("Settings saved", 2000, parent=self).show()

    def _clear_local_data(self):
        answer = QMessageBox.question(
            self, "Clear local data",
            "Are you sure you want to clear all local data? "
            "This will reset all visibility preferences."
        )
        if answer != QMessageBox.Yes:
            return
        signals.intent.emit(ResetPreferences())
        self.load_state()

    def showEvent(self, e):
        self.load_state()
        super().showEvent(e)
