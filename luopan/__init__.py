"""Flying star compass and Tai Sui calculations.

The core operations:

* ``resolve_mountain`` – compass heading to one of the 24 mountains.
* ``center_star`` – the year's center star in the nine-year cycle.
* ``flying_star_grid`` – the nine stars distributed over the nine palaces.
* ``tai_sui`` – the year's zodiac sign and the signs in conflict with it.
* ``affected_birth_years`` – birth years of a sign, looking back 90 years.

All of them are pure functions over static tables. ``astro_calendar``
(Li Chun year boundary), ``reading``, ``records`` and the ``run`` CLI
build on top of them.
"""

from .mountains import Direction, Mountain, MOUNTAINS, resolve_mountain
from .stars import Element, Star, STARS, star_info
from .flying_stars import center_star, flying_star_grid, yearly_grid
from .tai_sui import (
    ZODIACS, ConflictKind, ZodiacSign, affected_birth_years, tai_sui,
)

__all__ = [
    "Direction",
    "Mountain",
    "MOUNTAINS",
    "resolve_mountain",
    "Element",
    "Star",
    "STARS",
    "star_info",
    "center_star",
    "flying_star_grid",
    "yearly_grid",
    "ZODIACS",
    "ConflictKind",
    "ZodiacSign",
    "tai_sui",
    "affected_birth_years",
]
