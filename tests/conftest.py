"""Shared fixtures for the Lodestar test suite."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from pony.orm import db_session
from PySide6.QtWidgets import QApplication

from core.db import init_db
from core.preferences import PreferenceStore
from core.signals import signals
from core.visibility_store import VisibilityStore
from data.models import Preference
from game.catalog import Catalog, Category
from tests.factories import make_location
from ui.widgets.atlas.controller.render_sync import RenderSynchronizer
from ui.widgets.atlas.icons import IconCache
from ui.widgets.atlas.map_view import MapView


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(scope="session")
def database():
    init_db(":memory:")
    yield


@pytest.fixture
def prefs(database):
    yield PreferenceStore()
    with db_session:
        Preference.select().delete(bulk=True)


@pytest.fixture
def store(prefs) -> VisibilityStore:
    return VisibilityStore(prefs)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog({
        Category.MAIN: (
            make_location("1", "Harbour Gate", "Main entrance to the port", 10, 20),
            make_location("2", "Cave Entrance", "A dark opening", 30, 40),
            make_location("3", "Signal Tower", "Tall and humming", 50, 60, radar_radius=12),
        ),
        Category.HIDDEN: (
            make_location("h1", "Smuggler's Cache", "Under the pier", 15, 25, type="chest"),
        ),
        Category.LAST_LISTENER: (
            make_location("ll1", "Listening Post", "A quiet hut", 20, 70, type="tower"),
        ),
        Category.CAVES: (
            make_location("c1", "Glowworm Grotto", "Cave lit by glowworms", 33, 18, type="cave"),
        ),
    })


@pytest.fixture
def view(qapp):
    surface = MapView()
    surface.resize(800, 600)
    yield surface
    surface.deleteLater()


@pytest.fixture
def icons(tmp_path) -> IconCache:
    return IconCache({}, tmp_path)


@pytest.fixture
def sync(view, store, icons) -> RenderSynchronizer:
    return RenderSynchronizer(view, store, icons)


@pytest.fixture
def intents():
    """Collect every intent emitted on the app-wide signal during a test."""
    captured = []

    def collect(intent):
        captured.append(intent)

    signals.intent.connect(collect)
    yield captured
    signals.intent.disconnect(collect)
