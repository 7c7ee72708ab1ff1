from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPixmap

logger = logging.getLogger(__name__)

# ===== Room overlay colors =====
ROOM_COLOR = QColor(158, 158, 158, 153)        # grey, 0.6
ROOM_SELECTED_COLOR = QColor(244, 67, 54, 153)  # red, 0.6
ROOM_LABEL_COLOR = QColor(0, 0, 0)

# ===== Background =====
BG_COLOR = QColor("#FFFFFF")
PLACEHOLDER_COLOR = QColor("#E5E7EB")
PLACEHOLDER_BORDER = QColor("#9CA3AF")
PLACEHOLDER_ASPECT = 0.75   # h / w when the artwork is missing

# ===== Description panel =====
PANEL_MARGIN = 20
PANEL_PADDING = 10
PANEL_FONT_PX = 16
PANEL_BG = "rgba(0, 0, 0, 0.7)"

# ===== Zoom =====
MIN_ZOOM = 0.5
MAX_ZOOM = 4.0
ZOOM_STEP = 1.15


def resolve_asset(root: Union[str, Path], ref: str) -> Path:
    p = Path(ref)
    return p if p.is_absolute() else Path(root) / p


def load_pixmap(path: Union[str, Path], width: float) -> Optional[QPixmap]:
    """Pixmap scaled to ``width`` keeping aspect ratio, or None if unreadable."""
    if not Path(path).exists():
        logger.warning("Map image not found: %s", path)
        return None
    pm = QPixmap(str(path))
    if pm.isNull():
        logger.warning("Map image could not be decoded: %s", path)
        return None
    if width <= 0:
        return pm
    return pm.scaledToWidth(max(1, round(width)), Qt.SmoothTransformation)
