from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from .models import Building, Floor, LoadStatus, DEFAULT_FLOOR, NO_DESCRIPTION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewState:
    status: str = LoadStatus.LOADING
    building: Optional[Building] = None
    floor: str = DEFAULT_FLOOR
    selected_room_id: Optional[str] = None
    description: str = ""
    error: str = ""


# ---- events ----
@dataclass(frozen=True)
class BuildingLoaded:
    building: Building


@dataclass(frozen=True)
class LoadFailed:
    reason: str


@dataclass(frozen=True)
class FloorSelected:
    floor: str


@dataclass(frozen=True)
class RoomTapped:
    room_id: str


Event = Union[BuildingLoaded, LoadFailed, FloorSelected, RoomTapped]


def is_ready(state: ViewState) -> bool:
    return state.status == LoadStatus.READY and state.building is not None


def current_floor(state: ViewState) -> Optional[Floor]:
    if state.building is None:
        return None
    return state.building.floor(state.floor)


def reduce(state: ViewState, event: Event) -> ViewState:
    """Return the state after ``event``. Events that make no sense in the
    current status (a second load, taps before the data arrived, anything
    after a failure) give back ``state`` itself."""
    if isinstance(event, BuildingLoaded):
        if state.status != LoadStatus.LOADING:
            return state
        return replace(state, status=LoadStatus.READY, building=event.building)

    if isinstance(event, LoadFailed):
        if state.status != LoadStatus.LOADING:
            return state
        return replace(state, status=LoadStatus.FAILED, error=event.reason)

    if not is_ready(state):
        return state

    if isinstance(event, FloorSelected):
        logger.debug("Floor %s -> %s", state.floor, event.floor)
        return replace(state, floor=event.floor, selected_room_id=None, description="")

    if isinstance(event, RoomTapped):
        if state.selected_room_id == event.room_id:
            return replace(state, selected_room_id=None, description="")
        floor = current_floor(state)
        room = floor.find_room(event.room_id) if floor is not None else None
        if room is None:
            logger.debug("Room %r not found on %s", event.room_id, state.floor)
            description = NO_DESCRIPTION
        else:
            description = room.description
        return replace(state, selected_room_id=event.room_id, description=description)

    raise TypeError(f"unknown event: {event!r}")
