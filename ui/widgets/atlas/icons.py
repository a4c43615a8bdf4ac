# ui/widgets/atlas/icons.py

import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPixmap

from game.location_types import PLACEHOLDER_COLOURS, LAST_LISTENER_TINT
from ui.widgets.atlas.constants import ICON_SIZE

log = logging.getLogger(__name__)


class IconCache:
    """
    Marker pixmaps memoized by (location type, icon tag).  The key space is the
    finite set of type x category combinations, so entries are never evicted.
    """

    def __init__(self, location_types: dict[str, str], image_dir: Path):
        self._types = location_types
        self._image_dir = image_dir
        self._cache: dict[tuple[str, str], QPixmap] = {}

    def __len__(self):
        return len(self._cache)

    def get(self, location_type: str, icon_tag: str = "regular") -> QPixmap:
        key = (location_type, icon_tag)
        if key in self._cache:
            return self._cache[key]

        pixmap = self._load(location_type) or self._placeholder(icon_tag)
        if icon_tag == "lastListener":
            pixmap = self._tint(pixmap, QColor(LAST_LISTENER_TINT))

        self._cache[key] = pixmap
        return pixmap

    def _load(self, location_type: str) -> QPixmap | None:
        filename = self._types.get(location_type)
        if not filename:
            log.debug(f"No icon mapped for location type {location_type!r}")
            return None

        pixmap = QPixmap(str(self._image_dir / filename))
        if pixmap.isNull():
            log.warning(f"Icon {filename} for type {location_type!r} could not be loaded")
            return None
        return pixmap.scaled(ICON_SIZE, ICON_SIZE, Qt.KeepAspectRatio, Qt.SmoothTransformation)

    @staticmethod
    def _placeholder(icon_tag: str) -> QPixmap:
        pixmap = QPixmap(ICON_SIZE, ICON_SIZE)
        pixmap.fill(Qt.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(QPen(QColor("black"), 2))
        painter.setBrush(QColor(PLACEHOLDER_COLOURS.get(icon_tag, "#555")))
        r = ICON_SIZE // 2 - 4
        painter.drawEllipse(ICON_SIZE // 2 - r, ICON_SIZE - 2 * r - 2, 2 * r, 2 * r)
        painter.end()
        return pixmap

    @staticmethod
    def _tint(source: QPixmap, colour: QColor) -> QPixmap:
        pixmap = QPixmap(source)
        colour.setAlpha(110)
        painter = QPainter(pixmap)
        painter.setCompositionMode(QPainter.CompositionMode_SourceAtop)
        painter.fillRect(pixmap.rect(), colour)
        painter.end()
        return pixmap
