from __future__ import annotations
import math
from typing import Annotated, Dict, Optional, Tuple, Union
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

FLOOR_NAMES: Tuple[str, ...] = ("1F", "2F", "3F", "4F", "5F", "6F")
DEFAULT_FLOOR = "1F"
NO_DESCRIPTION = "no description available"


def _finite(v) -> float:
    try:
        f = float(v)
    except OverflowError:
        raise ValueError("number is too large") from None
    if not math.isfinite(f):
        raise ValueError("must be a finite number")
    return f


# JSON numbers only: ints are widened, strings/bools/NaN/Infinity are rejected
Coord = Annotated[Union[StrictFloat, StrictInt], AfterValidator(_finite)]


class LoadStatus:
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Room(_Record):
    id: StrictStr
    label: StrictStr
    description: StrictStr
    x: Coord          # top-left, source image pixels
    y: Coord
    width: Coord
    height: Coord


class Floor(_Record):
    map_image: StrictStr = Field(alias="mapImage")
    rooms: Tuple[Room, ...]

    def find_room(self, room_id: str) -> Optional[Room]:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None


class Building(_Record):
    floors: Dict[StrictStr, Floor]

    def floor(self, name: str) -> Optional[Floor]:
        return self.floors.get(name)

    def to_dict(self) -> Dict:
        """Back to the on-disk shape (``mapImage`` etc.)."""
        return self.model_dump(by_alias=True, mode="json")
