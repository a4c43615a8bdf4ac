# core/app.py

import logging
from pathlib    import Path
from typing     import Optional

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from core.config            import CATALOG_PATH, IMAGE_DIR, PROFILE_BASE_PATH, TYPES_PATH
from core.db                import init_db
from core.dispatcher        import IntentDispatcher
from core.preferences       import PreferenceStore
from core.settings          import get_setting, load_settings
from core.visibility_store  import VisibilityStore
from game.catalog           import Catalog, CatalogUnavailable, load_catalog
from game.location_types    import load_location_types
from ui.widgets.atlas.controller.render_sync import RenderSynchronizer
from ui.widgets.atlas.controller.selection   import SelectionHighlighter
from ui.widgets.atlas.icons                  import IconCache
from ui.widgets.sidebar.list_builder         import ExpandPolicy

from ui.windows.main_window         import MainWindow

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
log = logging.getLogger(__name__)


class App:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if getattr(self, "_initialized", False):
            return
        self._initialized = True

        self.qt_app = QApplication.instance() or QApplication([])

        self.profile_path: Path = PROFILE_BASE_PATH
        self.settings = {}

        self.catalog: Optional[Catalog] = None
        self.store: Optional[VisibilityStore] = None
        self.sync: Optional[RenderSynchronizer] = None
        self.highlighter: Optional[SelectionHighlighter] = None
        self.dispatcher: Optional[IntentDispatcher] = None
        self.main_window: Optional[MainWindow] = None

    def start(self):
        self._init_profile()
        self._load_catalog()
        self._init_main_window()
        self._init_components()
        QTimer.singleShot(0, self.dispatcher.start)
        self.qt_app.exec()

    def _init_profile(self):
        self.profile_path.mkdir(parents=True, exist_ok=True)
        self.settings = load_settings(self.profile_path)
        init_db(self.profile_path / "data.sqlite")
        self.store = VisibilityStore(PreferenceStore())

    def _load_catalog(self):
        try:
            self.catalog = load_catalog(CATALOG_PATH)
        except CatalogUnavailable as e:
            log.error(f"Error loading locations: {e}")
            self.catalog = None

    def _init_main_window(self):
        if self.main_window is None:
            self.main_window = MainWindow(self)
        self.main_window.showMaximized()

    def _init_components(self):
        icons = IconCache(load_location_types(TYPES_PATH), IMAGE_DIR)
        self.sync = RenderSynchronizer(self.main_window.map_view, self.store, icons)
        self.highlighter = SelectionHighlighter(self.catalog, self.sync, self.main_window.sidebar)
        self.highlighter.connect()

        policy = ExpandPolicy.from_setting(get_setting(self.settings, "sidebar", "expand_policy"))
        self.dispatcher = IntentDispatcher(
            self.catalog, self.store, self.sync, self.main_window.sidebar, self.highlighter, policy
        )
        self.dispatcher.connect()

    @classmethod
    def instance(cls):
        return cls()


def begin():
    App.instance().start()


if __name__ == "__main__":
    begin()
