# core/preferences.py

import logging
import sqlite3
from typing import Optional

from pony.orm import db_session, DBException, OrmError

from data.models import Preference

log = logging.getLogger(__name__)


class PreferenceWriteError(Exception):
    """Raised when a preference could not be written to (or removed from) disk."""

    def __init__(self, key: str, cause: Exception):
        super().__init__(f"Failed to persist '{key}': {cause}")
        self.key = key
        self.cause = cause


class PreferenceStore:
    """
    Synchronous single-key string store backed by the Preference table.
    Every write runs in its own db_session, so it is committed on return.
    """

    def get(self, key: str) -> Optional[str]:
        with db_session:
            pref = Preference.get(key=key)
            return pref.value if pref else None

    def set(self, key: str, value: str) -> None:
        try:
            with db_session:
                pref = Preference.get(key=key)
                if pref:
                    pref.value = value
                else:
                    Preference(key=key, value=value)
        except (DBException, OrmError, sqlite3.Error) as e:
            raise PreferenceWriteError(key, e) from e

    def delete(self, key: str) -> None:
        try:
            with db_session:
                pref = Preference.get(key=key)
                if pref:
                    pref.delete()
        except (DBException, OrmError, sqlite3.Error) as e:
            raise PreferenceWriteError(key, e) from e
