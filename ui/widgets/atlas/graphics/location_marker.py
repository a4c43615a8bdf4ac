# ui/widgets/atlas/graphics/location_marker.py

import html
from typing import Callable, Optional

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QPen, QPixmap
from PySide6.QtWidgets import QGraphicsItem, QGraphicsPixmapItem, QGraphicsRectItem

from game.catalog import Location
from ui.widgets.atlas.constants import ICON_ANCHOR, Z_MARKER, Z_SELECTION


def build_popup_html(location: Location) -> str:
    """Rich-text popup for a marker.  All catalog text is escaped here."""
    name = html.escape(location.name)
    parts = [
        f"<h3>{name}</h3>",
        f"<p>{html.escape(location.description)}</p>",
        f"<p><b>Coordinates:</b> {location.longitude:g} : {location.latitude:g}</p>",
    ]
    if location.image:
        parts.append(f'<img src="{html.escape(location.image, quote=True)}" alt="{name}" width="240">')
    parts.append(f"<p><small>(id: {html.escape(location.id)})</small></p>")
    return "".join(parts)


class LocationMarker(QGraphicsPixmapItem):
    """Clickable location icon with a hidden selection overlay."""

    def __init__(self, location: Location, pixmap: QPixmap,
                 on_click: Optional[Callable[[str], None]] = None):
        super().__init__(pixmap)
        self.location_id = location.id
        self._on_click = on_click

        self.setOffset(-ICON_ANCHOR[0], -ICON_ANCHOR[1])
        self.setZValue(Z_MARKER)
        self.setFlag(QGraphicsItem.ItemIgnoresTransformations, True)
        self.setAcceptedMouseButtons(Qt.LeftButton)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(build_popup_html(location))

        self._create_selection_overlay()

    def _create_selection_overlay(self):
        pad = 3
        size = self.pixmap().size()
        rect = QRectF(self.offset().x(), self.offset().y(), size.width(), size.height()).adjusted(-pad, -pad, pad, pad)
        overlay = QGraphicsRectItem(rect, self)
        overlay.setPen(QPen(Qt.cyan, 2))
        overlay.setBrush(QBrush(QColor(0, 255, 255, 60)))
        overlay.setZValue(Z_SELECTION)
        overlay.setVisible(False)
        overlay.setAcceptedMouseButtons(Qt.NoButton)
        self.overlay = overlay

    @property
    def popup_html(self) -> str:
        return self.toolTip()

    def set_highlighted(self, on: bool):
        self.overlay.setVisible(on)

    def is_highlighted(self) -> bool:
        return self.overlay.isVisible()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self._on_click:
            self._on_click(self.location_id)
            event.accept()
            return
        super().mousePressEvent(event)
