"""Sunrise, sunset and twilight times from the solar hour angle."""

from __future__ import annotations

import math
from typing import Dict, Optional, Union

import numpy as np

from .angles import Degrees, JulianDate, Radians
from .ephemeris import MINUTES_PER_DEGREE, equation_of_time, sun_declination_rad
from .julian import MINUTES_PER_DAY, julian_century_from_julian_day

__all__ = [
    "RISE_OR_SET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "ZENITH_ANGLES",
    "cos_local_hour_angle",
    "local_hour_angle_sun_rad",
    "utc_for_solar_angle",
    "compute_sun_times",
]

RISE_OR_SET = 90.833  # 90 deg 50': refraction plus the solar semi-diameter.
CIVIL_TWILIGHT = 96.0
NAUTICAL_TWILIGHT = 102.0
ASTRONOMICAL_TWILIGHT = 108.0

ZENITH_ANGLES: Dict[str, float] = {
    "official": RISE_OR_SET,
    "civil": CIVIL_TWILIGHT,
    "nautical": NAUTICAL_TWILIGHT,
    "astronomical": ASTRONOMICAL_TWILIGHT,
}

SOLAR_NOON_MINUTES = 720.0


def cos_local_hour_angle(
    latitude_rad: Radians, declination_rad: Radians, zenith_rad: Radians
) -> Union[float, np.ndarray]:
    """Cosine of the hour angle at which the Sun sits at *zenith_rad*.

    Values above 1 mean the Sun never gets that high; values below -1 mean it
    never sinks that low.
    """

    return (np.cos(zenith_rad) - np.sin(latitude_rad) * np.sin(declination_rad)) / (
        np.cos(latitude_rad) * np.cos(declination_rad)
    )


def local_hour_angle_sun_rad(
    latitude_rad: Radians, declination_rad: Radians, zenith_rad: Radians
) -> Radians:
    """Hour angle in ``[0, pi]``, or NaN when the Sun does not cross *zenith_rad*."""

    cos_ha = cos_local_hour_angle(latitude_rad, declination_rad, zenith_rad)
    with np.errstate(invalid="ignore"):
        return np.arccos(cos_ha)


def _utc_for_solar_angle_at(
    is_rise: bool, jd: JulianDate, latitude_rad: Radians, zenith_rad: Radians
) -> Union[float, np.ndarray]:
    century_time = julian_century_from_julian_day(jd)
    eot = equation_of_time(century_time)
    hour_angle = local_hour_angle_sun_rad(
        latitude_rad, sun_declination_rad(century_time), zenith_rad
    )
    if not is_rise:
        hour_angle = -hour_angle
    return SOLAR_NOON_MINUTES - MINUTES_PER_DEGREE * np.degrees(hour_angle) - eot


def utc_for_solar_angle(
    is_rise: bool, jd: JulianDate, latitude: Degrees, zenith_angle: Degrees
) -> Union[float, np.ndarray]:
    """Minutes after 0h UTC of the day of *jd* at which the Sun reaches *zenith_angle*.

    The first pass uses the solar position at *jd*; the second repeats the
    computation at the instant found by the first. The result may fall outside
    ``[0, 1440)``. It is NaN when the Sun does not cross the angle that day
    (polar day or polar night); NaN is never reported as an error.
    """

    latitude_rad = np.radians(latitude)
    zenith_rad = np.radians(zenith_angle)

    first = _utc_for_solar_angle_at(is_rise, jd, latitude_rad, zenith_rad)
    return _utc_for_solar_angle_at(
        is_rise, jd + first / MINUTES_PER_DAY, latitude_rad, zenith_rad
    )


def _twilight_zenith_degrees(twilight: str) -> float:
    try:
        return ZENITH_ANGLES[twilight]
    except KeyError as exc:
        raise ValueError(f"Unsupported twilight selector: {twilight}") from exc


def _cos_hour_angle_at(jd: float, latitude_rad: float, zenith_rad: float) -> float:
    declination = sun_declination_rad(julian_century_from_julian_day(jd))
    return float(cos_local_hour_angle(latitude_rad, declination, zenith_rad))


def _optional_minutes(value) -> Optional[float]:
    value = float(value)
    return None if math.isnan(value) else value


def compute_sun_times(jd: float, latitude: float, twilight: str = "official") -> Dict[str, object]:
    """Compute the rise and set times for one latitude.

    Parameters
    ----------
    jd:
        Julian Day, normally 0h UTC of the date of interest.
    latitude:
        Geographic latitude in degrees, north positive.
    twilight:
        Key of :data:`ZENITH_ANGLES`.

    Returns
    -------
    dict
        ``rise`` and ``set`` in minutes after 0h UTC (``None`` when the event
        does not occur) and ``status``: ``"ok"``, ``"polar_day"`` or
        ``"polar_night"``.
    """

    zenith = _twilight_zenith_degrees(twilight)
    rise = _optional_minutes(utc_for_solar_angle(True, jd, latitude, zenith))
    set_ = _optional_minutes(utc_for_solar_angle(False, jd, latitude, zenith))

    if rise is not None or set_ is not None:
        status = "ok"
    else:
        latitude_rad = float(np.radians(latitude))
        zenith_rad = float(np.radians(zenith))
        cos_ha = _cos_hour_angle_at(jd, latitude_rad, zenith_rad)
        if -1.0 <= cos_ha <= 1.0:
            # the first pass crossed but neither refined instant did; classify
            # by the Sun at the rise-side refined instant
            first = float(_utc_for_solar_angle_at(True, jd, latitude_rad, zenith_rad))
            cos_ha = _cos_hour_angle_at(jd + first / MINUTES_PER_DAY, latitude_rad, zenith_rad)
        status = "polar_day" if cos_ha < -1.0 else "polar_night"

    return {"rise": rise, "set": set_, "status": status}
