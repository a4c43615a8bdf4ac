# ui/widgets/atlas/controller/render_sync.py

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from PySide6.QtWidgets import QGraphicsItem

from core.config import FIT_PADDING, MAP_UNIT
from core.intents import Select
from core.signals import signals
from core.visibility_store import VisibilityStore
from game.catalog import Catalog, Category, Location
from ui.widgets.atlas.constants import RADAR_LAT_OFFSET
from ui.widgets.atlas.graphics.location_label import LocationLabel
from ui.widgets.atlas.graphics.location_marker import LocationMarker
from ui.widgets.atlas.graphics.radar_overlay import RadarOverlay
from ui.widgets.atlas.icons import IconCache
from ui.widgets.atlas.map_view import MapView, RenderCoord

log = logging.getLogger(__name__)


def render_point(location: Location) -> RenderCoord:
    """Stored latitude grows downward on the map, so it is negated for rendering."""
    return -location.latitude, location.longitude


def radar_point(location: Location) -> RenderCoord:
    return -location.latitude + RADAR_LAT_OFFSET, location.longitude


@dataclass
class RenderEntry:
    marker: LocationMarker
    label: LocationLabel
    radar: Optional[RadarOverlay] = None

    def objects(self) -> tuple[QGraphicsItem, ...]:
        if self.radar is None:
            return self.marker, self.label
        return self.marker, self.label, self.radar


class RenderSynchronizer:
    """
    Keeps the map surface in step with the catalog and the visibility store.
    This is the only component that adds items to or removes items from the surface.
    """

    def __init__(self, surface: MapView, store: VisibilityStore, icons: IconCache):
        self.surface = surface
        self.store = store
        self.icons = icons
        self._entries: dict[str, RenderEntry] = {}

    # ——— Queries ————————————————————————————————————

    def entry(self, location_id: str) -> Optional[RenderEntry]:
        return self._entries.get(location_id)

    def is_on_surface(self, location_id: str) -> bool:
        entry = self._entries.get(location_id)
        return bool(entry) and self.surface.contains(entry.marker)

    # ——— Full refresh ———————————————————————————————

    def full_refresh(self, catalog: Optional[Catalog],
                     section_enabled: Optional[Mapping[Category, bool]] = None):
        self._clear()

        if catalog is None:
            log.info("Catalog unavailable; nothing to render")
            signals.render_refreshed.emit()
            return

        if section_enabled is None:
            section_enabled = self.store.section_flags()

        fit_coords: list[RenderCoord] = []
        for category in Category:
            if not (category == Category.MAIN or section_enabled.get(category, False)):
                continue
            for location in catalog.locations(category):
                entry = self._build_entry(location, category)
                self._entries[location.id] = entry
                self._apply(entry, self.store.get_item_visible(location.id))
                fit_coords.append(render_point(location))

        log.debug(f"Rendered {len(self._entries)} locations")
        if fit_coords:
            self.surface.fit_to(fit_coords, FIT_PADDING)
        signals.render_refreshed.emit()

    def _clear(self):
        for entry in self._entries.values():
            for item in entry.objects():
                self.surface.remove_item(item)
        self._entries.clear()

    def _build_entry(self, location: Location, category: Category) -> RenderEntry:
        pixmap = self.icons.get(location.type, category.icon_tag)
        marker = LocationMarker(location, pixmap, on_click=self._on_marker_clicked)
        marker.setPos(self.surface.scene_point(render_point(location)))

        label = LocationLabel(location.name)
        label.setPos(marker.pos())

        radar = None
        if location.radar_radius:
            radar = RadarOverlay(location.radar_radius * MAP_UNIT)
            radar.setPos(self.surface.scene_point(radar_point(location)))

        return RenderEntry(marker, label, radar)

    @staticmethod
    def _on_marker_clicked(location_id: str):
        signals.intent.emit(Select(location_id))

    # ——— Toggles ————————————————————————————————————

    def toggle_item(self, location_id: str) -> bool:
        """Flip one location.  Raises KeyError for ids that were never rendered."""
        entry = self._entries[location_id]
        visible = not self.store.get_item_visible(location_id)
        self.store.set_item_visible(location_id, visible)
        self._apply(entry, visible)
        signals.item_visibility_changed.emit(location_id, visible)
        return visible

    def toggle_category(self, category: Category, location_ids: Iterable[str]) -> bool:
        """
        Force every listed location to the negation of the category's remembered
        flag, overwriting individual choices, then remember the new flag.
        """
        visible = not self.store.get_category_visible(category)

        for location_id in location_ids:
            self.store.set_item_visible(location_id, visible)
            entry = self._entries.get(location_id)
            if entry:
                self._apply(entry, visible)
            signals.item_visibility_changed.emit(location_id, visible)

        self.store.set_category_visible(category, visible)
        signals.category_visibility_changed.emit(category, visible)
        return visible

    def _apply(self, entry: RenderEntry, visible: bool):
        for item in entry.objects():
            if visible:
                self.surface.add_item(item)
            else:
                self.surface.remove_item(item)
