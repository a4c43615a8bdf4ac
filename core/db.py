# core/db.py

from pathlib import Path

from pony.orm import Database

db = Database()


def init_db(db_path: Path | str):
    """
    1) Bind Pony to the SQLite file (create if needed).
    2) Generate mapping once, creating the preference table if missing.

    Pony only allows a database to be bound once per process, so repeated
    calls are ignored.
    """
    if db.provider is not None:
        return

    # Lazy-import so the entities register on `db` before mapping
    import data.models  # noqa: F401

    filename = str(db_path)
    if filename != ":memory:":
        Path(filename).parent.mkdir(parents=True, exist_ok=True)

    db.bind(provider="sqlite", filename=filename, create_db=True)
    db.generate_mapping(create_tables=True)
