# game/location_types.py

import json
import logging
from pathlib import Path

log = logging.getLogger(__name__)

# Placeholder colours keyed by icon tag, used when a type has no image
PLACEHOLDER_COLOURS = {
    "regular":      "#E0B040",
    "hidden":       "#8E8E8E",
    "lastListener": "#CC00CC",
    "caves":        "#6D778F",
}

LAST_LISTENER_TINT = "#CC00CC"
RADAR_COLOUR       = "#CC00CC"


def load_location_types(path: Path) -> dict[str, str]:
    """Map location `type` -> image filename.  A missing table is not fatal."""
    if not path.exists():
        log.warning(f"Location type table {path} not found; using placeholder icons")
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning(f"Could not read location types from {path}: {e}")
        return {}
    return {str(k): str(v) for k, v in (data or {}).items()}
