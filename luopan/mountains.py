"""
Luo Pan 24 Mountains (二十四山) and compass heading lookup.

Handles:
- The eight compass octants plus the center palace
- Octant display names, base angles and Bagua trigrams
- The 24 mountains, each a 15° arc, with sitting (opposite) mountain
- Heading -> mountain resolution, including the arc that wraps past 0°

Headings are compass degrees: 0 = North, 90 = East, clockwise.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


# ============================================================
# DIRECTIONS
# ============================================================

class Direction(Enum):
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    C = "C"

    @property
    def chinese(self) -> str:
        return DIRECTION_NAMES[self]

    @property
    def angle(self) -> int:
        return DIRECTION_ANGLES[self]

    @property
    def trigram(self) -> str:
        return DIRECTION_TRIGRAMS[self]


DIRECTION_NAMES = {
    Direction.N: "正北",
    Direction.NE: "東北",
    Direction.E: "正東",
    Direction.SE: "東南",
    Direction.S: "正南",
    Direction.SW: "西南",
    Direction.W: "正西",
    Direction.NW: "西北",
    Direction.C: "中宮",
}

# Center has no bearing of its own; 0 keeps it neutral.
DIRECTION_ANGLES = {
    Direction.N: 0,
    Direction.NE: 45,
    Direction.E: 90,
    Direction.SE: 135,
    Direction.S: 180,
    Direction.SW: 225,
    Direction.W: 270,
    Direction.NW: 315,
    Direction.C: 0,
}

# Later Heaven (後天) Bagua arrangement
DIRECTION_TRIGRAMS = {
    Direction.N: "坎",
    Direction.NE: "艮",
    Direction.E: "震",
    Direction.SE: "巽",
    Direction.S: "離",
    Direction.SW: "坤",
    Direction.W: "兌",
    Direction.NW: "乾",
    Direction.C: "中",
}


# ============================================================
# THE 24 MOUNTAINS
# ============================================================

MOUNTAIN_ARC = 15.0
HALF_ARC = MOUNTAIN_ARC / 2


@dataclass(frozen=True)
class Mountain:
    name: str
    index: int  # 0-23, clockwise from 子
    center_angle: float
    start_angle: float
    end_angle: float
    direction: Direction
    sitting: str  # name of the mountain 180° away

    @property
    def trigram(self) -> str:
        return self.direction.trigram

    @property
    def wraps(self) -> bool:
        """True for the one arc that crosses 0°."""
        return self.start_angle > self.end_angle

    def contains(self, heading: float) -> bool:
        """Check a heading already normalized into [0, 360)."""
        if self.wraps:
            return heading >= self.start_angle or heading < self.end_angle
        return self.start_angle <= heading < self.end_angle

    def __str__(self):
        return f"{self.name} ({self.direction.chinese} {self.center_angle:g}°)"

    def to_dict(self):
        return {
            "name": self.name,
            "index": self.index,
            "angle": self.center_angle,
            "start": self.start_angle,
            "end": self.end_angle,
            "direction": self.direction.value,
            "direction_name": self.direction.chinese,
            "sitting": self.sitting,
            "trigram": self.trigram,
            "label": facing_label(self),
        }


# (name, principal octant), clockwise starting at North center
_RAW_MOUNTAINS = [
    ("子", Direction.N), ("癸", Direction.N),
    ("丑", Direction.NE), ("艮", Direction.NE), ("寅", Direction.NE),
    ("甲", Direction.E), ("卯", Direction.E), ("乙", Direction.E),
    ("辰", Direction.SE), ("巽", Direction.SE), ("巳", Direction.SE),
    ("丙", Direction.S), ("午", Direction.S), ("丁", Direction.S),
    ("未", Direction.SW), ("坤", Direction.SW), ("申", Direction.SW),
    ("庚", Direction.W), ("酉", Direction.W), ("辛", Direction.W),
    ("戌", Direction.NW), ("乾", Direction.NW), ("亥", Direction.NW),
    ("壬", Direction.N),
]


def _build_mountains() -> list[Mountain]:
    mountains = []
    count = len(_RAW_MOUNTAINS)
    for index, (name, direction) in enumerate(_RAW_MOUNTAINS):
        center = index * MOUNTAIN_ARC
        start = (center - HALF_ARC) % 360.0
        end = (center + HALF_ARC) % 360.0
        sitting = _RAW_MOUNTAINS[(index + count // 2) % count][0]
        mountains.append(Mountain(
            name=name,
            index=index,
            center_angle=center,
            start_angle=start,
            end_angle=end,
            direction=direction,
            sitting=sitting,
        ))
    return mountains


MOUNTAINS = _build_mountains()

MOUNTAIN_BY_NAME = {m.name: m for m in MOUNTAINS}

# Fallback for a heading no arc claims
NORTH_MOUNTAIN = MOUNTAIN_BY_NAME["子"]


# ============================================================
# HEADING RESOLUTION
# ============================================================

def normalize_heading(heading: float) -> float:
    """Fold any real heading into [0, 360)."""
    normalized = ((heading % 360.0) + 360.0) % 360.0
    # -1e-17 % 360 rounds up to exactly 360.0
    return 0.0 if normalized >= 360.0 else normalized


def find_mountain(heading: float) -> Optional[Mountain]:
    """Return the mountain whose arc contains the heading, or None."""
    normalized = normalize_heading(heading)
    for mountain in MOUNTAINS:
        if mountain.contains(normalized):
            return mountain
    return None


def resolve_mountain(heading: float) -> Mountain:
    """
    Resolve a compass heading to its enclosing mountain.

    Any real heading is accepted (negative, or beyond 360). The 24 arcs
    tile the circle, so a match always exists; should it not, the North
    mountain 子 is returned instead of raising.

    Args:
        heading: compass bearing in degrees, 0 = North, clockwise

    Returns:
        The Mountain: facing name, sitting name, octant and trigram
    """
    found = find_mountain(heading)
    if found is None:
        logger.warning("No mountain arc matched heading %r; using %s",
                       heading, NORTH_MOUNTAIN.name)
        return NORTH_MOUNTAIN
    return found


def mountain_by_name(name: str) -> Mountain:
    """Look up a mountain by its glyph, e.g. '子'."""
    try:
        return MOUNTAIN_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Unknown mountain {name!r}") from None


def facing_label(mountain: Mountain) -> str:
    """Traditional 坐X向Y label for a facing mountain."""
    return f"坐{mountain.sitting}向{mountain.name}"
