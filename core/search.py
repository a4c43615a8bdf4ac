# core/search.py

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from game.catalog import Location


class MatchMode(Enum):
    NAME_ONLY = 1
    NAME_AND_DESCRIPTION = 2


@dataclass(frozen=True)
class SearchState:
    query: str = ""
    match_mode: MatchMode = MatchMode.NAME_ONLY

    @property
    def active(self) -> bool:
        return bool(self.query)


def filter_locations(locations: Iterable[Location], query: str,
                     match_mode: MatchMode = MatchMode.NAME_ONLY) -> list[Location]:
    """Case-insensitive substring filter.  Order is preserved; an empty query matches everything."""
    if not query:
        return list(locations)

    needle = query.lower()

    def matches(loc: Location) -> bool:
        if needle in loc.name.lower():
            return True
        if match_mode == MatchMode.NAME_AND_DESCRIPTION and loc.description:
            return needle in loc.description.lower()
        return False

    return [loc for loc in locations if matches(loc)]
