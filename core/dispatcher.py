# core/dispatcher.py

import logging
from typing import Optional, TYPE_CHECKING

from core.config import SELECT_ZOOM
from core.intents import (
    ResetPreferences, SearchChanged, Select, SectionEnabledChanged, ToggleCategory, ToggleItem
)
from core.search import SearchState
from core.signals import signals
from core.visibility_store import VisibilityStore
from game.catalog import Catalog, Category
from ui.widgets.atlas.controller.render_sync import render_point
from ui.widgets.sidebar.list_builder import ExpandPolicy, RebuildReason, build_sidebar

if TYPE_CHECKING:
    from ui.widgets.atlas.controller.render_sync import RenderSynchronizer
    from ui.widgets.atlas.controller.selection import SelectionHighlighter
    from ui.widgets.sidebar.location_list_widget import LocationListWidget

log = logging.getLogger(__name__)


class IntentDispatcher:
    """
    Single consumer of UI intents.  Each intent is handled to completion before
    the next, which is what the Qt event loop gives us anyway.
    """

    def __init__(self, catalog: Optional[Catalog], store: VisibilityStore,
                 sync: "RenderSynchronizer", sidebar: "LocationListWidget",
                 highlighter: "SelectionHighlighter",
                 policy: ExpandPolicy = ExpandPolicy.PRESERVE):
        self.catalog = catalog
        self.store = store
        self.sync = sync
        self.sidebar = sidebar
        self.highlighter = highlighter
        self.policy = policy
        self.search = SearchState()

    def connect(self):
        signals.intent.connect(self.dispatch)

    def disconnect(self):
        try:
            signals.intent.disconnect(self.dispatch)
        except (RuntimeError, TypeError):
            pass

    # ——— Startup / structural ——————————————————————

    def start(self):
        """Initial render.  With no catalog only the error message is shown."""
        if self.catalog is None:
            signals.catalog_unavailable.emit("Location catalog unavailable")
        self.refresh_all()

    def refresh_all(self):
        self.sync.full_refresh(self.catalog, self.store.section_flags())
        self.rebuild_sidebar(RebuildReason.STRUCTURAL)

    def rebuild_sidebar(self, reason: RebuildReason):
        model = build_sidebar(
            self.catalog,
            self.store.section_flags(),
            self.search,
            self.store,
            reason=reason,
            policy=self.policy,
            expanded=self.sidebar.expanded_state(),
        )
        self.sidebar.render(model, reset_expanded=reason == RebuildReason.STRUCTURAL)
        self.highlighter.reapply()

    # ——— Dispatch ———————————————————————————————————

    def dispatch(self, intent):
        if self.catalog is None and not isinstance(intent, SearchChanged):
            log.warning(f"Ignoring {intent!r}: catalog unavailable")
            return

        match intent:
            case ToggleItem(location_id=location_id):
                self.sync.toggle_item(location_id)

            case ToggleCategory(category=category, location_ids=location_ids):
                self.sync.toggle_category(category, location_ids)

            case Select(location_id=location_id, focus=focus):
                self._select(location_id, focus)

            case SearchChanged(query=query, match_mode=match_mode):
                self.search = SearchState(query, match_mode)
                self.rebuild_sidebar(RebuildReason.SEARCH)

            case SectionEnabledChanged(category=category, enabled=enabled):
                self.store.set_section_enabled(category, enabled)
                self.refresh_all()

            case ResetPreferences():
                self.store.clear_all(self.catalog.ids(), list(Category), list(Category))
                self.refresh_all()

            case _:
                log.error(f"Unknown intent: {intent!r}")

    def _select(self, location_id: str, focus: bool):
        location = self.catalog.get(location_id)
        if focus and self.sync.is_on_surface(location_id):
            self.sync.surface.pan_to(render_point(location), SELECT_ZOOM)
            self.sync.surface.show_popup(self.sync.entry(location_id).marker)
        self.highlighter.select(location_id)
