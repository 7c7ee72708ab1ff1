"""Overlay geometry for one floor, independent of Qt.

One scale factor (screen width / artwork width) is applied to x, y, width,
height and label size alike. Screen height is not considered, so rooms only
line up with the artwork when the image keeps its natural aspect ratio.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Tuple

from .state import ViewState, current_floor

logger = logging.getLogger(__name__)

REFERENCE_WIDTH = 792.0          # design width of the map artwork
BASE_LABEL_FONT = 12.0
DEFAULT_BACKGROUND = "assets/map-1F.png"


@dataclass(frozen=True)
class RoomOverlay:
    room_id: str
    label: str
    x: float
    y: float
    width: float
    height: float
    font_size: float
    selected: bool = False


@dataclass(frozen=True)
class FloorLayout:
    background: str
    image_width: float
    scale: float
    rooms: Tuple[RoomOverlay, ...] = ()
    description: str = ""

    @property
    def show_description(self) -> bool:
        return bool(self.description)


def scale_factor(screen_width: float, reference_width: float = REFERENCE_WIDTH) -> float:
    if reference_width <= 0:
        raise ValueError(f"reference width must be positive, got {reference_width}")
    return screen_width / reference_width


def layout_floor(state: ViewState, screen_width: float,
                 reference_width: float = REFERENCE_WIDTH) -> FloorLayout:
    k = scale_factor(screen_width, reference_width)
    floor = current_floor(state)
    if floor is None:
        if state.building is not None:
            logger.info("Floor %s has no map data, showing default background", state.floor)
        return FloorLayout(DEFAULT_BACKGROUND, screen_width, k, (), state.description)

    overlays = tuple(
        RoomOverlay(
            room_id=r.id,
            label=r.label,
            x=r.x * k, y=r.y * k,
            width=r.width * k, height=r.height * k,
            font_size=BASE_LABEL_FONT * k,
            selected=(r.id == state.selected_room_id),
        )
        for r in floor.rooms
    )
    return FloorLayout(floor.map_image, screen_width, k, overlays, state.description)
