# ui/widgets/sidebar/list_builder.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from core.search import SearchState, filter_locations
from core.visibility_store import VisibilityStore
from game.catalog import Catalog, Category, Location

NO_RESULTS_TEXT     = "No locations found"
UNAVAILABLE_TEXT    = "Error loading locations. Please check the catalog file."


class RebuildReason(Enum):
    STRUCTURAL = 1   # startup, section toggled, preferences reset
    SEARCH = 2       # query or match mode changed


class ExpandPolicy(Enum):
    PRESERVE = "preserve"   # search rebuilds keep the user's open/closed sections
    RESET = "reset"         # every rebuild reverts to the defaults

    @classmethod
    def from_setting(cls, value) -> "ExpandPolicy":
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.PRESERVE


@dataclass(frozen=True)
class SidebarItem:
    location: Location
    visible: bool


@dataclass(frozen=True)
class SidebarSection:
    category: Category
    title: str
    expanded: bool
    category_visible: bool
    items: tuple[SidebarItem, ...]

    @property
    def location_ids(self) -> tuple[str, ...]:
        return tuple(i.location.id for i in self.items)


@dataclass(frozen=True)
class SidebarModel:
    sections: tuple[SidebarSection, ...] = field(default_factory=tuple)
    no_results: bool = False
    unavailable: bool = False


def default_expanded(category: Category) -> bool:
    return category == Category.MAIN


def build_sidebar(catalog: Optional[Catalog],
                  section_enabled: Mapping[Category, bool],
                  search: SearchState,
                  store: VisibilityStore,
                  reason: RebuildReason = RebuildReason.STRUCTURAL,
                  policy: ExpandPolicy = ExpandPolicy.PRESERVE,
                  expanded: Optional[Mapping[Category, bool]] = None) -> SidebarModel:
    if catalog is None:
        return SidebarModel(unavailable=True)

    keep_expanded = reason == RebuildReason.SEARCH and policy == ExpandPolicy.PRESERVE
    expanded = expanded or {}

    filtered: dict[Category, list[Location]] = {}
    for category in Category:
        if category != Category.MAIN and not section_enabled.get(category, False):
            continue
        filtered[category] = filter_locations(catalog.locations(category), search.query, search.match_mode)

    if search.active and not any(filtered.values()):
        return SidebarModel(no_results=True)

    sections = []
    for category, locations in filtered.items():
        if not locations:
            continue
        is_expanded = expanded.get(category, default_expanded(category)) if keep_expanded \
            else default_expanded(category)
        sections.append(SidebarSection(
            category=category,
            title=category.title,
            expanded=is_expanded,
            category_visible=store.get_category_visible(category),
            items=tuple(SidebarItem(loc, store.get_item_visible(loc.id)) for loc in locations),
        ))

    return SidebarModel(sections=tuple(sections))
