from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .models import Building, FLOOR_NAMES

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Map data could not be read or does not match the schema."""

    def __init__(self, reason: str, path: Optional[Union[str, Path]] = None):
        self.reason = reason
        self.path = str(path) if path is not None else None
        super().__init__(f"{self.path}: {reason}" if self.path else reason)


def _describe(err: ValidationError) -> str:
    lines = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "<root>"
        lines.append(f"{loc}: {e['msg']}")
    return "\n".join(lines)


def _warn_on_suspicious_data(building: Building):
    for name, floor in building.floors.items():
        if name not in FLOOR_NAMES:
            logger.warning("Floor %r is not in the floor selector and cannot be shown", name)
        seen = set()
        for room in floor.rooms:
            if room.id in seen:
                logger.warning("Floor %s: duplicate room id %r, selection will be ambiguous", name, room.id)
            seen.add(room.id)


def parse_building(text: str, path: Optional[Union[str, Path]] = None) -> Building:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise ParseError(f"malformed JSON: {e}", path) from e
    try:
        building = Building.model_validate(data)
    except ValidationError as e:
        raise ParseError(_describe(e), path) from e
    _warn_on_suspicious_data(building)
    return building


def load_building(path: Union[str, Path]) -> Building:
    path = Path(path)
    logger.info("Loading map data from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"cannot read file: {e}", path) from e
    building = parse_building(text, path)
    logger.info("Loaded %d floor(s): %s", len(building.floors), ", ".join(building.floors))
    return building


def dump_building(building: Building) -> str:
    return json.dumps(building.to_dict(), ensure_ascii=False, indent=2)
