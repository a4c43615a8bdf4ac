# core/intents.py
# User intents emitted by the UI on `signals.intent` and handled by the IntentDispatcher.

from dataclasses import dataclass

from core.search import MatchMode
from game.catalog import Category


@dataclass(frozen=True)
class ToggleItem:
    location_id: str


@dataclass(frozen=True)
class ToggleCategory:
    category: Category
    location_ids: tuple[str, ...]


@dataclass(frozen=True)
class Select:
    location_id: str
    focus: bool = False  # pan to the marker and open its popup


@dataclass(frozen=True)
class SearchChanged:
    query: str
    match_mode: MatchMode


@dataclass(frozen=True)
class SectionEnabledChanged:
    category: Category
    enabled: bool


@dataclass(frozen=True)
class ResetPreferences:
    pass
