from .models import Room, Floor, Building, LoadStatus, FLOOR_NAMES, DEFAULT_FLOOR, NO_DESCRIPTION
from .loader import ParseError, parse_building, load_building, dump_building
from .state import (ViewState, BuildingLoaded, LoadFailed, FloorSelected, RoomTapped,
                    reduce, current_floor, is_ready)
from .layout import (RoomOverlay, FloorLayout, scale_factor, layout_floor,
                     REFERENCE_WIDTH, DEFAULT_BACKGROUND)
from .config import MapConfig, configure_logging
# Qt widgets (floormap.scene, .items, .hud) are imported directly so the
# model/state/layout layer loads without a display stack.

__all__ = [
    "Room", "Floor", "Building", "LoadStatus", "FLOOR_NAMES", "DEFAULT_FLOOR", "NO_DESCRIPTION",
    "ParseError", "parse_building", "load_building", "dump_building",
    "ViewState", "BuildingLoaded", "LoadFailed", "FloorSelected", "RoomTapped",
    "reduce", "current_floor", "is_ready",
    "RoomOverlay", "FloorLayout", "scale_factor", "layout_floor",
    "REFERENCE_WIDTH", "DEFAULT_BACKGROUND",
    "MapConfig", "configure_logging",
]
