"""
Annual flying star (九宮飛星) computation.

Handles:
- Center star for a year (the Lo Shu nine-year cycle)
- Distribution of the nine stars over the nine palaces
- The traditional South-on-top 3x3 reading order
- Rotation of the drawn grid to match a physical heading

Design principle: the Direction -> star mapping depends on the year only.
Heading affects how the grid is drawn, never which star sits where.
"""

from dataclasses import dataclass

from luopan.mountains import Direction
from luopan.stars import star_info


# ============================================================
# CONSTANTS
# ============================================================

# Lo Shu flight path (洛書軌跡): the order stars fly through the palaces
LO_SHU_PATH = [
    Direction.C,
    Direction.NW,
    Direction.W,
    Direction.NE,
    Direction.S,
    Direction.N,
    Direction.SW,
    Direction.E,
    Direction.SE,
]

# Display rows, South on top
GRID_LAYOUT = [
    [Direction.SE, Direction.S, Direction.SW],
    [Direction.E, Direction.C, Direction.W],
    [Direction.NE, Direction.N, Direction.NW],
]

# Bearing drawn at the top of an unrotated grid
GRID_TOP_ANGLE = 180


# ============================================================
# STAR DISTRIBUTION
# ============================================================

def _fold(number: int) -> int:
    """Fold an integer into the 1-9 star range."""
    while number > 9:
        number -= 9
    while number < 1:
        number += 9
    return number


def center_star(year: int) -> int:
    """
    Compute the annual center star.

    raw = (11 - (year mod 9)) mod 9, with 0 standing in for 9.
    Python's % is already non-negative for a positive modulus, so
    negative years follow the same cycle.
    """
    raw = (11 - (year % 9)) % 9
    return 9 if raw == 0 else raw


def flying_star_grid(center: int) -> dict[Direction, int]:
    """
    Distribute the nine stars starting from the center star.

    The i-th palace on the Lo Shu path receives center + i, folded
    into 1-9, so the result is always a permutation of 1..9.

    Args:
        center: the star in the center palace (folded if outside 1-9)

    Returns:
        Mapping of all nine Directions to star numbers
    """
    return {
        direction: _fold(center + offset)
        for offset, direction in enumerate(LO_SHU_PATH)
    }


def yearly_grid(year: int) -> dict[Direction, int]:
    """Flying star grid for a year."""
    return flying_star_grid(center_star(year))


def grid_layout() -> list[Direction]:
    """The nine positions in display order, row by row."""
    return [direction for row in GRID_LAYOUT for direction in row]


# ============================================================
# PRESENTATION
# ============================================================

def grid_rotation(heading: float, align_compass: bool = True) -> float:
    """
    Degrees to rotate the drawn grid so the faced bearing is on top.

    The unrotated grid has South (180°) at the top, so facing South
    needs no rotation and facing North needs a half turn.
    """
    if not align_compass:
        return 0.0
    return heading - GRID_TOP_ANGLE


def label_rotation(heading: float, align_compass: bool = True) -> float:
    """Counter-rotation that keeps cell labels upright."""
    return -grid_rotation(heading, align_compass)


@dataclass(frozen=True)
class GridCell:
    direction: Direction
    star: int

    @property
    def direction_name(self) -> str:
        return self.direction.chinese

    @property
    def base_angle(self) -> int:
        return self.direction.angle

    @property
    def is_center(self) -> bool:
        return self.direction is Direction.C

    def to_dict(self):
        info = star_info(self.star)
        return {
            "direction": self.direction.value,
            "direction_name": self.direction_name,
            "base_angle": self.base_angle,
            "star": self.star,
            "star_name": info.name,
            "element": info.element.value,
            "element_chinese": info.element.chinese,
            "auspicious": info.auspicious,
        }


def grid_cells(year: int) -> list[GridCell]:
    """The year's nine annotated cells in display order."""
    grid = yearly_grid(year)
    return [GridCell(direction, grid[direction]) for direction in grid_layout()]


def grid_rows(year: int) -> list[list[GridCell]]:
    """Same as grid_cells, split into the three display rows."""
    grid = yearly_grid(year)
    return [[GridCell(direction, grid[direction]) for direction in row]
            for row in GRID_LAYOUT]
