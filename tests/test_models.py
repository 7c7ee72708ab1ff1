from __future__ import annotations

import pytest
from pydantic import ValidationError

from floormap.models import Building, Floor, Room


def _room(**overrides):
    data = {"id": "r1", "label": "101", "description": "Room 101", "x": 10, "y": 20, "width": 30, "height": 40}
    data.update(overrides)
    return data


def test_integer_coordinates_become_floats() -> None:
    room = Room.model_validate(_room())
    assert room.x == 10.0 and isinstance(room.x, float)
    assert isinstance(room.height, float)


def test_numeric_strings_are_rejected() -> None:
    with pytest.raises(ValidationError):
        Room.model_validate(_room(x="10"))


def test_booleans_are_not_coordinates() -> None:
    with pytest.raises(ValidationError):
        Room.model_validate(_room(width=True))


def test_label_must_be_a_string() -> None:
    with pytest.raises(ValidationError):
        Room.model_validate(_room(label=101))


def test_room_is_immutable() -> None:
    room = Room.model_validate(_room())
    with pytest.raises(ValidationError):
        room.x = 99.0


def test_floor_reads_map_image_alias() -> None:
    floor = Floor.model_validate({"mapImage": "map-1F.png", "rooms": [_room()]})
    assert floor.map_image == "map-1F.png"
    assert isinstance(floor.rooms, tuple)


def test_find_room_returns_none_for_unknown_id() -> None:
    floor = Floor.model_validate({"mapImage": "m.png", "rooms": [_room()]})
    assert floor.find_room("r1").description == "Room 101"
    assert floor.find_room("nope") is None


def test_building_floor_lookup_and_to_dict() -> None:
    b = Building.model_validate({"floors": {"1F": {"mapImage": "m.png", "rooms": []}}})
    assert b.floor("1F") is not None
    assert b.floor("9F") is None
    assert b.to_dict() == {"floors": {"1F": {"mapImage": "m.png", "rooms": []}}}


def test_unknown_keys_are_ignored() -> None:
    room = Room.model_validate(_room(color="#fff"))
    assert not hasattr(room, "color")
