# ui/widgets/atlas/graphics/location_label.py

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPen, QTransform
from PySide6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from ui.widgets.atlas.constants import LABEL_OFFSET_Y, Z_LABEL


class LocationLabel(QGraphicsSimpleTextItem):
    """Non-interactive name label drawn above a marker."""

    def __init__(self, text: str):
        super().__init__(text)
        font = QFont()
        font.setPointSize(9)
        font.setBold(True)
        self.setFont(font)
        self.setBrush(QBrush(QColor("white")))
        self.setPen(QPen(QColor(0, 0, 0, 200), 0.6))

        # Centre horizontally over the anchor point
        br = self.boundingRect()
        self.setTransform(QTransform.fromTranslate(-br.width() / 2, LABEL_OFFSET_Y))

        self.setZValue(Z_LABEL)
        self.setFlag(QGraphicsItem.ItemIgnoresTransformations, True)
        self.setAcceptedMouseButtons(Qt.NoButton)
        self.setAcceptHoverEvents(False)
