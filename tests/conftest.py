from __future__ import annotations

import json

import pytest

from floormap.loader import parse_building
from floormap.state import BuildingLoaded, ViewState, reduce

SCENARIO_JSON = (
    '{"floors":{"1F":{"mapImage":"map-1F.png","rooms":[{"id":"r1","label":"101",'
    '"description":"Room 101","x":10,"y":20,"width":30,"height":40}]}}}'
)

TWO_FLOORS = {
    "floors": {
        "1F": {
            "mapImage": "assets/map-1F.png",
            "rooms": [
                {"id": "r1", "label": "101", "description": "Room 101", "x": 10, "y": 20, "width": 30, "height": 40},
                {"id": "r2", "label": "102", "description": "Room 102", "x": 50.5, "y": 20, "width": 30, "height": 40},
            ],
        },
        "2F": {
            "mapImage": "assets/map-2F.png",
            "rooms": [
                {"id": "r201", "label": "201", "description": "Music room", "x": 0, "y": 0, "width": 100, "height": 50},
            ],
        },
    }
}


@pytest.fixture
def scenario_building():
    return parse_building(SCENARIO_JSON)


@pytest.fixture
def building():
    return parse_building(json.dumps(TWO_FLOORS))


@pytest.fixture
def ready_state(building) -> ViewState:
    return reduce(ViewState(), BuildingLoaded(building))


@pytest.fixture
def scenario_json() -> str:
    return SCENARIO_JSON


@pytest.fixture
def two_floors_data() -> dict:
    return json.loads(json.dumps(TWO_FLOORS))


@pytest.fixture
def two_floors_json() -> str:
    return json.dumps(TWO_FLOORS)
