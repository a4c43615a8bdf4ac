# core/settings.py
# Settings are client customisation options (e.g. sidebar behaviour).  Essential app variables like the
# catalog location, default zoom levels, etc. should be set via configs and the .env file.

from pathlib import Path

import yaml

DEFAULT_SETTINGS = {
    "sidebar": {
        "expand_policy": "preserve",
    },
}


def load_settings(profile_path: Path) -> dict:
    settings_file = profile_path / "settings.yaml"
    if not settings_file.exists():
        return {}
    with open(settings_file, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_settings(profile_path: Path, settings: dict) -> None:
    profile_path.mkdir(parents=True, exist_ok=True)
    settings_file = profile_path / "settings.yaml"
    with open(settings_file, "w", encoding="utf-8") as f:
        yaml.safe_dump(settings, f)


def get_setting(settings: dict, section: str, key: str):
    """Look up `section.key`, falling back to DEFAULT_SETTINGS."""
    value = (settings.get(section) or {}).get(key)
    if value is None:
        return DEFAULT_SETTINGS[section][key]
    return value
