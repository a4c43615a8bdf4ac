"""Test data builders."""

from pony.orm import db_session

from core.preferences import PreferenceStore, PreferenceWriteError
from data.models import Preference
from game.catalog import Location


def make_location(location_id, name=None, description="", latitude=0.0, longitude=0.0,
                  type="town", radar_radius=None) -> Location:
    return Location(
        id=location_id,
        name=name or f"Location {location_id}",
        description=description,
        latitude=latitude,
        longitude=longitude,
        type=type,
        radar_radius=radar_radius,
    )


class FailingPreferenceStore(PreferenceStore):
    """Simulates a full disk / quota error on every write; reads see an empty store."""

    def get(self, key):
        return None

    def set(self, key, value):
        raise PreferenceWriteError(key, OSError("quota exceeded"))

    def delete(self, key):
        raise PreferenceWriteError(key, OSError("quota exceeded"))


def stored_keys() -> list[str]:
    with db_session:
        return sorted(p.key for p in Preference.select())
