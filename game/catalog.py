# game/catalog.py

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

log = logging.getLogger(__name__)


class CatalogUnavailable(Exception):
    """The location catalog could not be loaded; the viewer runs without locations."""


class Category(Enum):
    # value = section id used in persisted keys
    MAIN            = "main-locations"
    HIDDEN          = "hidden-locations"
    LAST_LISTENER   = "last-listener-locations"
    CAVES           = "caves-locations"

    @property
    def section_id(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return _CATEGORY_META[self][0]

    @property
    def catalog_key(self) -> str:
        return _CATEGORY_META[self][1]

    @property
    def icon_tag(self) -> str:
        return _CATEGORY_META[self][2]

    @property
    def setting_key(self) -> Optional[str]:
        """Persisted key gating the section, or None for always-on sections."""
        return _CATEGORY_META[self][3]


#                       title                        json key                   icon tag        section-enabled key
_CATEGORY_META = {
    Category.MAIN:          ("Locations",               "locations",                "regular",      None),
    Category.HIDDEN:        ("Hidden Locations",        "hiddenLocations",          "hidden",       "show-hidden-locations"),
    Category.LAST_LISTENER: ("Last Listener Locations", "lastListenerLocations",    "lastListener", "show-last-listener"),
    Category.CAVES:         ("Caves",                   "caves",                    "caves",        "show-caves"),
}

_REQUIRED_FIELDS = ("id", "name", "latitude", "longitude", "type")


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    description: str
    latitude: float
    longitude: float
    type: str
    image: Optional[str] = None
    radar_radius: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        missing = [f for f in _REQUIRED_FIELDS if data.get(f) is None]
        if missing:
            raise ValueError(f"location {data.get('id', '?')!r} is missing {', '.join(missing)}")

        radar = data.get("radarRadius")
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            description=data.get("description") or "",
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            type=str(data["type"]),
            image=data.get("image") or None,
            radar_radius=float(radar) if radar else None,
        )


@dataclass(frozen=True)
class Catalog:
    """Read-only POI dataset, one location sequence per category."""
    sections: dict[Category, tuple[Location, ...]] = field(default_factory=dict)

    def __post_init__(self):
        self._index()

    def _index(self):
        seen = {}
        for category in Category:
            for loc in self.locations(category):
                if loc.id in seen:
                    raise ValueError(f"duplicate location id {loc.id!r}")
                seen[loc.id] = (loc, category)
        object.__setattr__(self, "_by_id", seen)

    def locations(self, category: Category) -> tuple[Location, ...]:
        return self.sections.get(category, ())

    def all_locations(self) -> Iterator[Location]:
        for category in Category:
            yield from self.locations(category)

    def ids(self) -> list[str]:
        return list(self._by_id)

    def get(self, location_id: str) -> Location:
        """Raises KeyError for ids that are not in the catalog."""
        return self._by_id[location_id][0]

    def category_of(self, location_id: str) -> Category:
        return self._by_id[location_id][1]

    def __contains__(self, location_id) -> bool:
        return location_id in self._by_id

    @classmethod
    def from_dict(cls, data: dict) -> "Catalog":
        sections = {}
        for category in Category:
            raw = data.get(category.catalog_key) or []
            sections[category] = tuple(Location.from_dict(item) for item in raw)
        return cls(sections)


def load_catalog(path: Path) -> Catalog:
    """
    Load the catalog JSON.  Any failure is reported as CatalogUnavailable so
    the app never starts half-initialised with an empty catalog.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogUnavailable(f"Could not read {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogUnavailable(f"{path} does not contain a catalog object")

    try:
        catalog = Catalog.from_dict(data)
    except (AttributeError, TypeError, ValueError) as e:
        raise CatalogUnavailable(f"Invalid catalog {path}: {e}") from e

    log.info(f"Loaded {len(catalog.ids())} locations from {path}")
    return catalog
