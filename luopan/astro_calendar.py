"""
Calendar utilities for the feng-shui year.

The flying star and Tai Sui year does not turn over on January 1st but
at Li Chun (立春), the moment the Sun reaches ecliptic longitude 315°,
usually February 3-5. Swiss Ephemeris swe.solcross_ut() finds that
crossing exactly.

Handles:
- Li Chun moment for a Gregorian year
- Feng-shui year of an arbitrary moment
- Local clock time -> UTC from coordinates (historical DST aware)
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo

import swisseph as swe
from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

# Point Swiss Ephemeris to data files; without them it falls back to
# the built-in Moshier ephemeris, which is plenty for a solar term.
_ephe_path = str(Path(__file__).parent.parent / "ephe")
swe.set_ephe_path(_ephe_path)

LI_CHUN_LONGITUDE = 315.0

_tf = None


def _timezone_finder() -> TimezoneFinder:
    global _tf
    if _tf is None:
        _tf = TimezoneFinder()
    return _tf


# ============================================================
# SOLAR TERMS
# ============================================================

def _jd_to_datetime(jd: float) -> datetime:
    """Convert a UT Julian Day to an aware UTC datetime."""
    y, m, d, h = swe.revjul(jd)
    hour = int(h)
    minutes_total = (h - hour) * 60
    minute = int(minutes_total)
    second = int(round((minutes_total - minute) * 60))
    if second == 60:
        second = 59
    return datetime(y, m, d, hour, minute, second, tzinfo=timezone.utc)


@lru_cache(maxsize=256)
def li_chun_jd(year: int) -> float:
    """Julian Day (UT) of Li Chun in the given Gregorian year."""
    jd_year_start = swe.julday(year, 1, 1, 0)
    jd = swe.solcross_ut(LI_CHUN_LONGITUDE, jd_year_start, 0)
    logger.debug("Li Chun %d at JD %.5f", year, jd)
    return jd


def li_chun(year: int) -> datetime:
    """
    Moment of Li Chun for a Gregorian year.

    Returns:
        aware datetime in UTC
    """
    return _jd_to_datetime(li_chun_jd(year))


def _to_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def fengshui_year(moment: datetime) -> int:
    """
    Feng-shui (solar) year of a moment.

    Before that year's Li Chun the previous year's stars and Tai Sui
    are still in force.

    Args:
        moment: datetime; naive values are taken as UTC

    Returns:
        The year to pass to center_star() and tai_sui()
    """
    utc = _to_utc(moment)
    jd = swe.julday(utc.year, utc.month, utc.day,
                    utc.hour + utc.minute / 60.0 + utc.second / 3600.0)
    if jd < li_chun_jd(utc.year):
        return utc.year - 1
    return utc.year


# ============================================================
# LOCAL TIME
# ============================================================

def timezone_name_for(latitude: float, longitude: float) -> str:
    """IANA timezone name at a location."""
    tz_name = _timezone_finder().timezone_at(lat=latitude, lng=longitude)
    if tz_name is None:
        raise ValueError(f"Could not determine timezone for ({latitude}, {longitude})")
    return tz_name


def local_to_utc(local: datetime, latitude: float, longitude: float) -> datetime:
    """
    Interpret a naive clock time at a location and convert it to UTC.

    The zone comes from the coordinates, so historical DST (e.g. China
    1986-1991) is applied as the clock actually showed it. A datetime that
    already carries an offset is converted as is; the coordinates are
    not consulted.
    """
    if local.tzinfo is not None:
        return local.astimezone(timezone.utc)
    tz_name = timezone_name_for(latitude, longitude)
    aware = local.replace(tzinfo=ZoneInfo(tz_name))
    return aware.astimezone(timezone.utc)
