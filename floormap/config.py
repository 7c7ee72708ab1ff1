from __future__ import annotations
import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .layout import REFERENCE_WIDTH

logger = logging.getLogger(__name__)

DATA_PATH = "assets/room_data.json"
THEME_PATH = "map_theme.qss"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class MapConfig:
    data_path: Path = field(default_factory=lambda: Path(DATA_PATH))
    asset_root: Path = field(default_factory=lambda: Path("."))
    theme_path: Path = field(default_factory=lambda: Path(THEME_PATH))
    log_level: str = "INFO"
    reference_width: float = REFERENCE_WIDTH

    @classmethod
    def from_env(cls) -> "MapConfig":
        """Read FLOORMAP_* / LOG_LEVEL from the environment (and ``.env``)."""
        load_dotenv(find_dotenv(usecwd=True))
        raw_width = os.getenv("FLOORMAP_REFERENCE_WIDTH")
        width = REFERENCE_WIDTH
        if raw_width:
            try:
                width = float(raw_width)
            except ValueError:
                width = -1.0
            if not (width > 0 and math.isfinite(width)):
                logger.warning("Ignoring FLOORMAP_REFERENCE_WIDTH=%r, using %s", raw_width, REFERENCE_WIDTH)
                width = REFERENCE_WIDTH
        return cls(
            data_path=Path(os.getenv("FLOORMAP_DATA", DATA_PATH)),
            asset_root=Path(os.getenv("FLOORMAP_ASSETS", ".")),
            theme_path=Path(os.getenv("FLOORMAP_THEME", THEME_PATH)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            reference_width=width,
        )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
