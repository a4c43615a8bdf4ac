# ui/widgets/atlas/graphics/radar_overlay.py

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPen
from PySide6.QtWidgets import QGraphicsEllipseItem

from game.location_types import RADAR_COLOUR
from ui.widgets.atlas.constants import Z_RADAR


class RadarOverlay(QGraphicsEllipseItem):
    """Unfilled circle around a location; scales with the map."""

    def __init__(self, radius: float):
        super().__init__(-radius, -radius, radius * 2, radius * 2)
        colour = QColor(RADAR_COLOUR)
        colour.setAlphaF(0.5)
        pen = QPen(colour, 2)
        pen.setCosmetic(True)
        self.setPen(pen)
        self.setBrush(Qt.NoBrush)
        self.setZValue(Z_RADAR)
        self.setAcceptedMouseButtons(Qt.NoButton)
