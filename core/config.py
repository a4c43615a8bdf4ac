# core/config.py
# Configures core app behaviours via the .env file.  These rarely need changing and aren't optional or
# freely customisable.  Client customisation should be done via settings.

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

_ROOT = Path(__file__).resolve().parent.parent

PROFILE_BASE_PATH               =  Path(os.getenv("PROFILE_BASE_PATH",           "~/Lodestar")).expanduser()
CATALOG_PATH                    =  Path(os.getenv("CATALOG_PATH",      _ROOT / "data/locations.json"))
TYPES_PATH                      =  Path(os.getenv("TYPES_PATH",            _ROOT / "data/types.json"))
IMAGE_DIR                       =  Path(os.getenv("IMAGE_DIR",                    _ROOT / "images"))

FIT_PADDING                     =   int(os.getenv("FIT_PADDING",                        50))
SELECT_ZOOM                     = float(os.getenv("SELECT_ZOOM",                         6))
MIN_ZOOM                        = float(os.getenv("MIN_ZOOM",                           -2))
MAX_ZOOM                        = float(os.getenv("MAX_ZOOM",                            6))
MAP_UNIT                        = float(os.getenv("MAP_UNIT",                          1.0))
GRID_SIZE                       =   int(os.getenv("GRID_SIZE",                          64))
