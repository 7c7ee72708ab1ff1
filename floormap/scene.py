from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import Qt, QRectF, Signal
from PySide6.QtGui import QBrush, QPainter, QPen, QTransform, QWheelEvent
from PySide6.QtWidgets import (
    QGraphicsScene, QGraphicsView, QGraphicsPixmapItem, QGraphicsRectItem, QApplication
)

from .layout import FloorLayout
from .items import RoomItem
from .hud import DescriptionPanel
from .utils import (BG_COLOR, PLACEHOLDER_COLOR, PLACEHOLDER_BORDER, PLACEHOLDER_ASPECT,
                    MIN_ZOOM, MAX_ZOOM, ZOOM_STEP, resolve_asset, load_pixmap)

logger = logging.getLogger(__name__)


class MapScene(QGraphicsScene):
    room_tapped = Signal(str)

    def __init__(self, asset_root: Union[str, Path] = ".", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.asset_root = Path(asset_root)
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.setBackgroundBrush(BG_COLOR)
        self.current_layout: Optional[FloorLayout] = None
        self._background = None
        self._rooms: List[RoomItem] = []

    def render_layout(self, layout: FloorLayout):
        self.clear()
        self._rooms = []
        self.current_layout = layout

        pm = load_pixmap(resolve_asset(self.asset_root, layout.background), layout.image_width)
        if pm is not None:
            self._background = QGraphicsPixmapItem(pm)
            self._background.setTransformationMode(Qt.SmoothTransformation)
        else:
            w = layout.image_width
            self._background = QGraphicsRectItem(0, 0, w, w * PLACEHOLDER_ASPECT)
            self._background.setBrush(QBrush(PLACEHOLDER_COLOR))
            self._background.setPen(QPen(PLACEHOLDER_BORDER, 1, Qt.DashLine))
        self._background.setZValue(0)
        self.addItem(self._background)

        for overlay in layout.rooms:
            item = RoomItem(overlay, on_tap=self.room_tapped.emit)
            self.addItem(item)
            self._rooms.append(item)

        self.setSceneRect(self.itemsBoundingRect().united(QRectF(0, 0, layout.image_width, 1)))

    def room_items(self) -> List[RoomItem]:
        return list(self._rooms)

    def background_item(self):
        return self._background

    def mousePressEvent(self, event):
        pos = event.scenePos()
        if not isinstance(self.itemAt(pos, QTransform()), RoomItem):
            logger.debug("Tapped at: %.1f, %.1f", pos.x(), pos.y())
        super().mousePressEvent(event)


class MapView(QGraphicsView):
    widthChanged = Signal(float)   # viewport width in px
    scaleChanged = Signal(float)   # current m11()

    def __init__(self, scene: MapScene):
        super().__init__(scene)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setRenderHint(QPainter.SmoothPixmapTransform, True)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setBackgroundBrush(BG_COLOR)

        self.panel = DescriptionPanel(self)

    def zoom(self) -> float:
        return self.transform().m11()

    def set_description(self, text: str):
        self.panel.set_text(text)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.panel.reposition()
        if event.size().width() != event.oldSize().width():
            self.widthChanged.emit(float(self.viewport().width()))

    def wheelEvent(self, event: QWheelEvent):
        if QApplication.keyboardModifiers() & Qt.ControlModifier:
            angle = event.angleDelta().y()
            factor = ZOOM_STEP if angle > 0 else 1.0 / ZOOM_STEP
            self.zoom_by(factor)
            event.accept()
            return
        super().wheelEvent(event)

    def zoom_by(self, factor: float):
        current = self.zoom()
        target = min(max(current * factor, MIN_ZOOM), MAX_ZOOM)
        if abs(target - current) < 1e-9:
            return
        f = target / current
        self.scale(f, f)
        self.scaleChanged.emit(self.zoom())
