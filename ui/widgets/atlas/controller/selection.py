# ui/widgets/atlas/controller/selection.py

import logging
from typing import Optional, TYPE_CHECKING

from core.signals import signals
from game.catalog import Catalog

if TYPE_CHECKING:
    from ui.widgets.atlas.controller.render_sync import RenderSynchronizer
    from ui.widgets.sidebar.location_list_widget import LocationListWidget

log = logging.getLogger(__name__)


class SelectionHighlighter:
    """Tracks the single highlighted location across the map and the sidebar."""

    def __init__(self, catalog: Optional[Catalog], sync: "RenderSynchronizer",
                 sidebar: "LocationListWidget"):
        self.catalog = catalog
        self.sync = sync
        self.sidebar = sidebar
        self.current: Optional[str] = None

    def connect(self):
        signals.item_visibility_changed.connect(self._on_item_visibility_changed)

    def disconnect(self):
        try:
            signals.item_visibility_changed.disconnect(self._on_item_visibility_changed)
        except (RuntimeError, TypeError):
            pass

    def select(self, location_id: str):
        if self.catalog is None or location_id not in self.catalog:
            raise KeyError(location_id)
        if location_id == self.current:
            return

        if self.current is not None:
            self._set_highlight(self.current, False)

        self.current = location_id
        self._set_highlight(location_id, True, scroll=True)
        log.debug(f"Selected {location_id}")

    def reapply(self):
        """Restore the highlight after render objects or list items were rebuilt."""
        if self.current is not None:
            self._set_highlight(self.current, True)

    def _on_item_visibility_changed(self, location_id: str, visible: bool):
        # Markers off the surface are never highlighted
        if visible and location_id == self.current:
            self._set_highlight(location_id, True)

    def _set_highlight(self, location_id: str, on: bool, scroll: bool = False):
        entry = self.sync.entry(location_id)
        if entry is not None and (not on or self.sync.is_on_surface(location_id)):
            entry.marker.set_highlighted(on)

        item = self.sidebar.item_widget(location_id)
        if item is not None:
            item.set_active(on)
            if on and scroll:
                self.sidebar.scroll_to(item)
