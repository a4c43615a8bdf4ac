# ui/windows/main_window.py

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QSplitter, QFrame,
    QVBoxLayout, QHBoxLayout, QStatusBar
)

from PySide6.QtCore import Qt
from PySide6.QtGui  import QIcon, QAction

from core.signals import signals
from ui.widgets.atlas.graphics.location_marker import LocationMarker
from ui.widgets.atlas.map_view import MapView
from ui.widgets.sidebar.location_list_widget import LocationListWidget
from ui.widgets.toast import Toast
from ui.windows.settings_window import SettingsWindow


class MainWindow(QMainWindow):
    def __init__(self, app):
        super().__init__()

        # Reference to core App
        self.app = app

        # Window setup
        self.setWindowTitle("Lodestar Map")
        self.setWindowIcon(QIcon("assets/lodestar_icon.png"))
        self.setMinimumSize(800, 600)

        # Menus and Status Bar
        self._create_menu()
        self._create_status_bar()

        # Central layout
        central = QWidget()
        layout = QHBoxLayout(central)
        layout.setContentsMargins(3, 0, 3, 0)
        layout.setSpacing(5)
        self.setCentralWidget(central)

        # Splitter: sidebar, map
        splitter = QSplitter(Qt.Horizontal)
        splitter.setHandleWidth(5)
        splitter.setStyleSheet("QSplitter::handle { background-color: #444; }")
        layout.addWidget(splitter)

        # Left panel with location list
        self.left_panel = QFrame()
        self.left_panel.setFrameShape(QFrame.StyledPanel)
        self.left_panel.setStyleSheet("background-color: #1e1e1e; color: #ddd;")
        left_layout = QVBoxLayout(self.left_panel)
        left_layout.setContentsMargins(0, 0, 0, 0)
        self.sidebar = LocationListWidget()
        left_layout.addWidget(self.sidebar)
        splitter.addWidget(self.left_panel)

        # Map
        self.map_view = MapView()
        splitter.addWidget(self.map_view)

        splitter.setSizes([280, 920])
        splitter.setStretchFactor(1, 1)

        signals.preference_write_failed.connect(self._on_preference_write_failed)
        signals.catalog_unavailable.connect(self._on_catalog_unavailable)
        signals.render_refreshed.connect(self._on_render_refreshed)

    def _create_menu(self):
        menu = self.menuBar()

        client_menu = menu.addMenu("&Client")
        settings_action = QAction("&Settings...", self)
        settings_action.triggered.connect(self._open_settings_window)
        client_menu.addAction(settings_action)

        client_menu.addSeparator()
        exit_action = QAction("E&xit", self)
        exit_action.triggered.connect(self.close)
        client_menu.addAction(exit_action)

    def _create_status_bar(self):
        status = QStatusBar()
        self.setStatusBar(status)
        status.showMessage("Ready")

    def _open_settings_window(self):
        # Instantiate once, then reuse
        if not hasattr(self, "settings_window"):
            self.settings_window = SettingsWindow(parent=self, app=self.app)
        self.settings_window.show()
        self.settings_window.raise_()
        self.settings_window.activateWindow()

    def _on_preference_write_failed(self, key: str):
        self.statusBar().showMessage(f"Preference failed to persist ({key})", 5000)
        Toast("Preference failed to persist", 3000, parent=self, warning=True).show()

    def _on_render_refreshed(self):
        if self.app.catalog is None:
            return
        shown = sum(isinstance(item, LocationMarker) for item in self.map_view.items_on_surface())
        self.statusBar().showMessage(f"{shown} locations on map")

    def _on_catalog_unavailable(self, message: str):
        self.statusBar().showMessage(message)
