# data/models.py

from pony.orm import Required

from core.db import db


class Preference(db.Entity):
    """
    A single persisted viewer preference, string-encoded
    (e.g. key="marker-visible-12", value="false").
    """
    key = Required(str, unique=True)
    value = Required(str)
