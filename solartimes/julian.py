"""Calendar dates, Julian Days and Julian century time.

Dates from 1582-10-15 onward are read in the Gregorian calendar, earlier
ones in the proleptic Julian calendar. Years use astronomical numbering.
The day argument is a real number whose fractional part is the time of day.
"""

from __future__ import annotations

import math
from typing import Tuple

from .angles import CenturyTime, JulianDate

__all__ = [
    "J2000_JULIAN_DAY",
    "DAYS_IN_CENTURY",
    "MINUTES_PER_DAY",
    "is_leap_year",
    "is_gregorian_date",
    "julian_day",
    "julian_day_from_ymdhms",
    "julian_century_from_julian_day",
    "julian_day_from_julian_century",
    "calendar_date_from_julian_day",
    "day_of_year_from_julian_day",
]

J2000_JULIAN_DAY = 2451545.0  # 2000-01-01 12:00 UTC
DAYS_IN_CENTURY = 36525.0
MINUTES_PER_DAY = 1440.0

# First Julian Day number of the Gregorian calendar (1582-10-15).
_GREGORIAN_CUTOVER_DAY_NUMBER = 2299161


def is_leap_year(year: int) -> bool:
    """Return ``True`` when *year* is a Gregorian leap year."""

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_gregorian_date(year: int, month: int, day_fraction: float) -> bool:
    """Return ``True`` when the date falls on or after 1582-10-15 00:00."""

    if year != 1582:
        return year > 1582
    if month != 10:
        return month > 10
    return day_fraction >= 15.0


def julian_day(year: int, month: int, day_fraction: float) -> float:
    """Return the Julian Day of a calendar date.

    No validation is done: out-of-range months or days give the value the
    arithmetic produces.

    >>> julian_day(2000, 1, 1.5)
    2451545.0
    """

    gregorian = is_gregorian_date(year, month, day_fraction)
    if month <= 2:
        year -= 1
        month += 12
    if gregorian:
        a = year // 100
        b = 2 - a + a // 4
    else:
        b = 0
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day_fraction
        + b
        - 1524.5
    )


def julian_day_from_ymdhms(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> float:
    """Return the Julian Day of a calendar date and UTC time of day."""

    day_fraction = day + hour / 24.0 + minute / MINUTES_PER_DAY + second / (MINUTES_PER_DAY * 60.0)
    return julian_day(year, month, day_fraction)


def julian_century_from_julian_day(jd: JulianDate) -> CenturyTime:
    """Centuries elapsed since J2000.0."""

    return (jd - J2000_JULIAN_DAY) / DAYS_IN_CENTURY


def julian_day_from_julian_century(century_time: CenturyTime) -> JulianDate:
    """Inverse of :func:`julian_century_from_julian_day`."""

    return century_time * DAYS_IN_CENTURY + J2000_JULIAN_DAY


def calendar_date_from_julian_day(jd: float) -> Tuple[int, int, float]:
    """Return ``(year, month, day_fraction)`` for a Julian Day.

    Julian Days before 2299160.5 give dates in the Julian calendar.
    """

    z = math.floor(jd + 0.5)
    f = (jd + 0.5) - z
    b = z + 1524
    if z >= _GREGORIAN_CUTOVER_DAY_NUMBER:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        b += 1 + alpha - alpha // 4
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def day_of_year_from_julian_day(jd: float) -> float:
    """Ordinal day of the year, 1.0 for January 1st 00:00.

    The fractional part of the day is kept. Leap years follow the Gregorian rule.
    """

    year, month, day = calendar_date_from_julian_day(jd)
    k = 1 if is_leap_year(year) else 2
    return math.floor(275 * month / 9) - k * math.floor((month + 9) / 12) + day - 30
