# core/visibility_store.py

import logging
from typing import Iterable

from core.preferences import PreferenceStore, PreferenceWriteError
from core.signals import signals
from game.catalog import Category

log = logging.getLogger(__name__)

ITEM_KEY        = "marker-visible-{}"
CATEGORY_KEY    = "category-visible-{}"


def _encode(value: bool) -> str:
    return "true" if value else "false"


class VisibilityStore:
    """
    Typed boolean view over the preference store.

    There is no in-memory cache: every read and write goes to the backing
    store, which is the single source of truth.

    Defaults when a key is absent:
      - item visible:       True
      - category visible:   True
      - section enabled:    True for MAIN, False otherwise
    """

    def __init__(self, prefs: PreferenceStore):
        self._prefs = prefs

    # ——— Items ——————————————————————————————————————

    def get_item_visible(self, location_id: str) -> bool:
        return self._read(ITEM_KEY.format(location_id), default=True)

    def set_item_visible(self, location_id: str, visible: bool) -> None:
        self._write(ITEM_KEY.format(location_id), visible)

    # ——— Categories —————————————————————————————————

    def get_category_visible(self, category: Category) -> bool:
        return self._read(CATEGORY_KEY.format(category.section_id), default=True)

    def set_category_visible(self, category: Category, visible: bool) -> None:
        self._write(CATEGORY_KEY.format(category.section_id), visible)

    # ——— Sections ———————————————————————————————————

    def get_section_enabled(self, category: Category) -> bool:
        if category.setting_key is None:
            return True
        return self._read(category.setting_key, default=False)

    def set_section_enabled(self, category: Category, enabled: bool) -> None:
        if category.setting_key is None:
            log.debug(f"Ignoring section flag for always-enabled {category.name}")
            return
        self._write(category.setting_key, enabled)

    def section_flags(self) -> dict[Category, bool]:
        return {c: self.get_section_enabled(c) for c in Category}

    # ——— Reset ——————————————————————————————————————

    def clear_all(self, location_ids: Iterable[str], categories: Iterable[Category],
                  sections: Iterable[Category]) -> None:
        keys = [ITEM_KEY.format(i) for i in location_ids]
        keys += [CATEGORY_KEY.format(c.section_id) for c in categories]
        keys += [s.setting_key for s in sections if s.setting_key]

        for key in keys:
            try:
                self._prefs.delete(key)
            except PreferenceWriteError as e:
                self._report(e)

        log.info(f"Cleared {len(keys)} preference keys")

    # ——— Encoding ———————————————————————————————————

    def _read(self, key: str, default: bool) -> bool:
        raw = self._prefs.get(key)
        if raw is None:
            return default
        return raw == "true"

    def _write(self, key: str, value: bool) -> None:
        try:
            self._prefs.set(key, _encode(value))
        except PreferenceWriteError as e:
            self._report(e)

    @staticmethod
    def _report(error: PreferenceWriteError):
        log.warning(f"Preference failed to persist: {error}")
        signals.preference_write_failed.emit(error.key)
