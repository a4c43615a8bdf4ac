# ui/widgets/atlas/map_view.py

import math
from typing import Iterable

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsItem, QGraphicsScene, QGraphicsView, QToolTip

from core.config import GRID_SIZE, MAP_UNIT, MAX_ZOOM, MIN_ZOOM
from ui.widgets.atlas.constants import ANCHOR_DISTANCE, ZOOM_STEP

RenderCoord = tuple[float, float]  # (y, x), y pointing north


class MapView(QGraphicsView):
    """
    The rendering surface.  Owns the scene; callers add and remove items and
    steer the viewport, but never touch the scene directly.
    """

    def __init__(self, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        d = ANCHOR_DISTANCE
        self._scene.setSceneRect(-d, -d, 2 * d, 2 * d)
        self.setScene(self._scene)

        self.setRenderHint(QPainter.Antialiasing)
        self.setRenderHint(QPainter.SmoothPixmapTransform)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.setStyleSheet("""
            QScrollBar:horizontal, QScrollBar:vertical {
                height: 1px;
                width: 1px;
                background: transparent;
            }
        """)

        self._background = QColor("#1b1a17")
        self._grid_pen = QPen(QColor("#333333"), 1)
        self._grid_pen.setCosmetic(True)

    # ——— Items ——————————————————————————————————————

    def add_item(self, item: QGraphicsItem):
        if item.scene() is not self._scene:
            self._scene.addItem(item)

    def remove_item(self, item: QGraphicsItem):
        if item.scene() is self._scene:
            self._scene.removeItem(item)

    def contains(self, item: QGraphicsItem) -> bool:
        return item.scene() is self._scene

    def items_on_surface(self) -> list[QGraphicsItem]:
        """Top-level items only; child overlays belong to their parents."""
        return [it for it in self._scene.items() if it.parentItem() is None]

    # ——— Coordinates ————————————————————————————————

    @staticmethod
    def scene_point(coord: RenderCoord) -> QPointF:
        y, x = coord
        return QPointF(x * MAP_UNIT, -y * MAP_UNIT)

    def zoom_level(self) -> float:
        return math.log2(self.transform().m11())

    # ——— Viewport ———————————————————————————————————

    def pan_to(self, coord: RenderCoord, zoom: float):
        zoom = max(MIN_ZOOM, min(MAX_ZOOM, zoom))
        scale = 2 ** zoom
        self.resetTransform()
        self.scale(scale, scale)
        self.centerOn(self.scene_point(coord))

    def fit_to(self, coords: Iterable[RenderCoord], padding: int = 0):
        points = [self.scene_point(c) for c in coords]
        if not points:
            return

        xs = [p.x() for p in points]
        ys = [p.y() for p in points]
        rect = QRectF(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        if rect.width() < MAP_UNIT or rect.height() < MAP_UNIT:
            rect = rect.adjusted(-MAP_UNIT, -MAP_UNIT, MAP_UNIT, MAP_UNIT)

        self.resetTransform()
        self.fitInView(rect, Qt.KeepAspectRatio)

        # Leave `padding` pixels of margin around the fitted region
        vp = self.viewport().rect()
        if vp.width() > 2 * padding and vp.height() > 2 * padding:
            factor = min((vp.width() - 2 * padding) / vp.width(),
                         (vp.height() - 2 * padding) / vp.height())
            self.scale(factor, factor)

        self._clamp_zoom()
        self.centerOn(rect.center())

    def show_popup(self, item: QGraphicsItem):
        text = item.toolTip()
        if not text:
            return
        pos = self.viewport().mapToGlobal(self.mapFromScene(item.scenePos()))
        QToolTip.showText(pos, text, self)

    def _clamp_zoom(self):
        level = self.zoom_level()
        clamped = max(MIN_ZOOM, min(MAX_ZOOM, level))
        if clamped != level:
            factor = 2 ** (clamped - level)
            self.scale(factor, factor)

    # ——— Qt events ——————————————————————————————————

    def wheelEvent(self, event):
        step = ZOOM_STEP if event.angleDelta().y() > 0 else -ZOOM_STEP
        target = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom_level() + step))
        factor = 2 ** (target - self.zoom_level())
        self.scale(factor, factor)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, self._background)

        # Grid cells stay GRID_SIZE screen pixels wide at every zoom level
        step = GRID_SIZE / self.transform().m11()
        if step <= 0:
            return
        painter.setPen(self._grid_pen)
        left = math.floor(rect.left() / step) * step
        top = math.floor(rect.top() / step) * step

        x = left
        while x <= rect.right():
            painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))
            x += step
        y = top
        while y <= rect.bottom():
            painter.drawLine(QPointF(rect.left(), y), QPointF(rect.right(), y))
            y += step
