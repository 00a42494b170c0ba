"""
Assemble the reading context for a year and a compass heading.

This is the entry point that pulls the mountain lookup, the flying star
grid and the Tai Sui table into a single JSON-ready payload: the data a
report renderer or an AI prompt assembler works from.

Usage:
    from luopan.reading import compose_reading
    context = compose_reading(2025, heading=172.0, align_compass=True)
"""

import logging
import math

from luopan.flying_stars import (
    center_star, grid_rows, grid_rotation, label_rotation,
)
from luopan.mountains import facing_label, normalize_heading, resolve_mountain
from luopan.stars import star_info
from luopan.tai_sui import affected_birth_years, tai_sui

logger = logging.getLogger(__name__)


def compose_reading(year: int, heading: float, align_compass: bool = False) -> dict:
    """
    Build the full context for one reading.

    Args:
        year: feng-shui year (see astro_calendar.fengshui_year)
        heading: compass heading faced, in degrees
        align_compass: rotate the drawn grid to match the heading

    Returns:
        dict with year, mountain, orientation, grid and tai_sui sections
    """
    mountain = resolve_mountain(heading)
    if not math.isfinite(heading):
        heading = mountain.center_angle
    center = center_star(year)

    rows = []
    for row in grid_rows(year):
        cells = []
        for cell in row:
            entry = cell.to_dict()
            entry["is_center"] = cell.is_center
            cells.append(entry)
        rows.append(cells)

    stars_in_play = sorted({cell["star"] for row in rows for cell in row})

    ts = tai_sui(year)
    conflicts = []
    for conflict in ts.conflicts:
        entry = conflict.to_dict()
        entry["birth_years"] = affected_birth_years(conflict.sign, year)
        conflicts.append(entry)

    logger.debug("Composed reading for %d facing %s", year, mountain.name)

    return {
        "year": year,
        "title": f"{year}年 九宮飛星風水佈局報告",
        "mountain": {
            "heading": round(normalize_heading(heading)) % 360,
            "facing": mountain.name,
            "sitting": mountain.sitting,
            "label": facing_label(mountain),
            "direction": mountain.direction.value,
            "direction_name": mountain.direction.chinese,
            "trigram": mountain.trigram,
        },
        "orientation": {
            "align_compass": align_compass,
            "grid_rotation": grid_rotation(heading, align_compass),
            "label_rotation": label_rotation(heading, align_compass),
        },
        "center_star": center,
        "grid": rows,
        "stars": {str(n): star_info(n).to_dict() for n in stars_in_play},
        "tai_sui": {
            "year_sign": ts.year_sign.chinese,
            "year_animal": ts.year_sign.animal,
            "conflicts": conflicts,
        },
    }


def format_reading(context: dict) -> str:
    """Render a composed reading as a plain-text report."""
    mountain = context["mountain"]
    lines = [
        "=" * 60,
        context["title"],
        f"{mountain['label']}  羅盤度數: {mountain['heading']}°  "
        f"({mountain['direction_name']} {mountain['trigram']})",
        "=" * 60,
        "",
        f"中宮: {context['center_star']}",
    ]

    for row in context["grid"]:
        lines.append("  ".join(
            f"{cell['direction_name']}:{cell['star']}" for cell in row
        ))

    lines.append("")
    lines.append("全方位佈局建議:")
    for row in context["grid"]:
        for cell in row:
            star = context["stars"][str(cell["star"])]
            nature = "吉星" if star["auspicious"] else "凶星"
            lines.append(f"  {cell['direction_name']} {star['number']} {star['name']} "
                         f"({nature} / 五行{star['element_chinese']})")
            lines.append(f"    {star['description']}")
            for rec in star["recommendations"]:
                lines.append(f"    + {rec['item']}: {rec['reason']}")
            if star["taboos"]:
                lines.append(f"    - 忌: {'、'.join(star['taboos'])}")

    tai = context["tai_sui"]
    lines.append("")
    lines.append(f"犯太歲提醒 ({tai['year_sign']}年):")
    for conflict in tai["conflicts"]:
        years = ", ".join(str(y) for y in conflict["birth_years"])
        lines.append(f"  {conflict['sign']} {conflict['type']}: {conflict['description']}")
        lines.append(f"    化解: {conflict['remedy']}")
        lines.append(f"    出生年份: {years}")

    return "\n".join(lines)
