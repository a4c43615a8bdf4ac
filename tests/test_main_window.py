from types import SimpleNamespace

import pytest

from core.signals import signals
from ui.widgets.atlas.controller.render_sync import RenderSynchronizer
from ui.windows.main_window import MainWindow


@pytest.fixture
def window(catalog):
    win = MainWindow(SimpleNamespace(catalog=catalog))
    yield win
    signals.render_refreshed.disconnect(win._on_render_refreshed)
    signals.preference_write_failed.disconnect(win._on_preference_write_failed)
    signals.catalog_unavailable.disconnect(win._on_catalog_unavailable)
    win.close()


def test_status_bar_counts_shown_locations(window, catalog, store, icons):
    sync = RenderSynchronizer(window.map_view, store, icons)

    sync.full_refresh(catalog)
    assert window.statusBar().currentMessage() == "3 locations on map"

    sync.toggle_item("2")
    sync.full_refresh(catalog)
    assert window.statusBar().currentMessage() == "2 locations on map"


def test_status_bar_shows_unavailable_catalog(window):
    signals.catalog_unavailable.emit("Location catalog unavailable")
    assert window.statusBar().currentMessage() == "Location catalog unavailable"
