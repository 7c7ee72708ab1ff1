from __future__ import annotations
from typing import Callable, Optional
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QFont, QPainter, QPen
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsItem
from .layout import RoomOverlay
from .utils import ROOM_COLOR, ROOM_SELECTED_COLOR, ROOM_LABEL_COLOR


class RoomItem(QGraphicsRectItem):
    """Clickable room rectangle. Geometry arrives already scaled."""

    def __init__(self, overlay: RoomOverlay, on_tap: Optional[Callable[[str], None]] = None):
        super().__init__(QRectF(0, 0, overlay.width, overlay.height))
        self.overlay = overlay
        self._on_tap = on_tap
        self.setPos(overlay.x, overlay.y)
        self.setAcceptHoverEvents(True)
        self.setFlag(QGraphicsItem.ItemIsSelectable, False)
        self.setFlag(QGraphicsItem.ItemIsMovable, False)
        self.setCursor(Qt.PointingHandCursor)
        self.setPen(QPen(Qt.NoPen))
        self.setBrush(QBrush(ROOM_SELECTED_COLOR if overlay.selected else ROOM_COLOR))
        self.setToolTip(overlay.label)
        self.setZValue(1)

    @property
    def room_id(self) -> str:
        return self.overlay.room_id

    @property
    def selected(self) -> bool:
        return self.overlay.selected

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            if self._on_tap:
                self._on_tap(self.overlay.room_id)
            e.accept()
            return
        super().mousePressEvent(e)

    def paint(self, painter: QPainter, option, widget=None):
        r = self.rect()
        painter.setPen(Qt.NoPen)
        painter.setBrush(self.brush())
        painter.drawRect(r)
        if not self.overlay.label:
            return
        font = QFont()
        # QFont rejects sizes <= 0
        font.setPixelSize(max(1, round(self.overlay.font_size)))
        painter.setFont(font)
        painter.setPen(ROOM_LABEL_COLOR)
        painter.drawText(r, Qt.AlignCenter, self.overlay.label)
