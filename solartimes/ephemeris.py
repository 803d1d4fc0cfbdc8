"""Low-precision solar ephemeris after Meeus, *Astronomical Algorithms* (1998).

Every quantity is a function of the Julian century time ``T`` (see
:func:`solartimes.julian.julian_century_from_julian_day`). The functions accept
Python floats or numpy arrays. Angles in degrees are not reduced into
``[0, 360)``; use :func:`solartimes.angles.normalize_degrees` where that matters.

The ``*_from_*`` variants take an intermediate that the caller already holds.
It must have been computed from the same ``T``; the plain variants derive it
internally.
"""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from .angles import CenturyTime, Degrees, Radians

__all__ = [
    "MINUTES_PER_DEGREE",
    "mean_obliquity_ecliptic",
    "geometric_mean_longitude_sun",
    "geometric_mean_anomaly_sun",
    "eccentricity_earth_orbit",
    "equation_of_center_sun_from_anomaly",
    "equation_of_center_sun",
    "true_longitude_sun",
    "true_anomaly_sun",
    "omega",
    "omega_rad",
    "apparent_longitude_sun_from_omega",
    "apparent_longitude_sun",
    "obliquity_correction_from_omega",
    "obliquity_correction",
    "sun_right_ascension_rad",
    "sun_right_ascension",
    "sun_declination_rad",
    "sun_declination",
    "equation_of_time",
]

# 360 degrees of hour angle take 1440 minutes.
MINUTES_PER_DEGREE = 4.0


def mean_obliquity_ecliptic(century_time: CenturyTime) -> Degrees:
    """Mean obliquity of the ecliptic (Meeus 22.2)."""

    arc_seconds = 21.448 - century_time * (
        46.8150 + century_time * (0.00059 - century_time * 0.001813)
    )
    return 23.0 + (26.0 + arc_seconds / 60.0) / 60.0


def geometric_mean_longitude_sun(century_time: CenturyTime) -> Degrees:
    """Geometric mean longitude of the Sun, referred to the mean equinox of date (25.2)."""

    return 280.46646 + century_time * (36000.76983 + century_time * 0.0003032)


def geometric_mean_anomaly_sun(century_time: CenturyTime) -> Degrees:
    """Mean anomaly of the Sun (25.3)."""

    return 357.52911 + century_time * (35999.05029 - century_time * 0.0001537)


def eccentricity_earth_orbit(century_time: CenturyTime) -> Union[float, np.ndarray]:
    """Eccentricity of the Earth's orbit, dimensionless (25.4)."""

    return 0.016708634 - century_time * (0.000042037 + century_time * 0.0000001267)


def equation_of_center_sun_from_anomaly(century_time: CenturyTime, mean_anomaly: Degrees) -> Degrees:
    """Equation of center for a mean anomaly already evaluated at *century_time*."""

    m_rad = np.radians(mean_anomaly)
    return (
        (1.914602 - century_time * (0.004817 + century_time * 0.000014)) * np.sin(m_rad)
        + (0.019993 - 0.000101 * century_time) * np.sin(2.0 * m_rad)
        + 0.000289 * np.sin(3.0 * m_rad)
    )


def equation_of_center_sun(century_time: CenturyTime) -> Degrees:
    """Equation of center of the Sun."""

    return equation_of_center_sun_from_anomaly(
        century_time, geometric_mean_anomaly_sun(century_time)
    )


def true_longitude_sun(century_time: CenturyTime) -> Degrees:
    """True geometric longitude of the Sun."""

    return geometric_mean_longitude_sun(century_time) + equation_of_center_sun(century_time)


def true_anomaly_sun(century_time: CenturyTime) -> Degrees:
    """True anomaly of the Sun."""

    mean_anomaly = geometric_mean_anomaly_sun(century_time)
    return mean_anomaly + equation_of_center_sun_from_anomaly(century_time, mean_anomaly)


def omega(century_time: CenturyTime) -> Degrees:
    """Longitude of the ascending node of the Moon's mean orbit."""

    return 125.04 - 1934.136 * century_time


def omega_rad(century_time: CenturyTime) -> Radians:
    """:func:`omega` in radians."""

    return np.radians(omega(century_time))


def apparent_longitude_sun_from_omega(century_time: CenturyTime, omega_radians: Radians) -> Degrees:
    """Apparent longitude of the Sun, corrected for nutation and aberration."""

    return true_longitude_sun(century_time) - 0.000569 - 0.00478 * np.sin(omega_radians)


def apparent_longitude_sun(century_time: CenturyTime) -> Degrees:
    """Apparent longitude of the Sun."""

    return apparent_longitude_sun_from_omega(century_time, omega_rad(century_time))


def obliquity_correction_from_omega(century_time: CenturyTime, omega_radians: Radians) -> Degrees:
    """Obliquity corrected for the apparent position of the Sun (25.8)."""

    return mean_obliquity_ecliptic(century_time) + 0.00256 * np.cos(omega_radians)


def obliquity_correction(century_time: CenturyTime) -> Degrees:
    """Corrected obliquity of the ecliptic."""

    return obliquity_correction_from_omega(century_time, omega_rad(century_time))


def _obliquity_and_apparent_longitude_rad(
    century_time: CenturyTime,
) -> Tuple[Radians, Radians]:
    node = omega_rad(century_time)
    obliquity = np.radians(obliquity_correction_from_omega(century_time, node))
    longitude = np.radians(apparent_longitude_sun_from_omega(century_time, node))
    return obliquity, longitude


def sun_right_ascension_rad(century_time: CenturyTime) -> Radians:
    """Apparent right ascension of the Sun in ``(-pi, pi]`` (25.6)."""

    obliquity, longitude = _obliquity_and_apparent_longitude_rad(century_time)
    return np.arctan2(np.cos(obliquity) * np.sin(longitude), np.cos(longitude))


def sun_right_ascension(century_time: CenturyTime) -> Degrees:
    """Apparent right ascension of the Sun in degrees, in ``(-180, 180]``."""

    return np.degrees(sun_right_ascension_rad(century_time))


def sun_declination_rad(century_time: CenturyTime) -> Radians:
    """Apparent declination of the Sun (25.7)."""

    obliquity, longitude = _obliquity_and_apparent_longitude_rad(century_time)
    return np.arcsin(np.sin(obliquity) * np.sin(longitude))


def sun_declination(century_time: CenturyTime) -> Degrees:
    """Apparent declination of the Sun in degrees."""

    return np.degrees(sun_declination_rad(century_time))


def equation_of_time(century_time: CenturyTime) -> Union[float, np.ndarray]:
    """Apparent minus mean solar time, in minutes (Meeus 28.3)."""

    y = np.tan(np.radians(obliquity_correction(century_time)) / 2.0)
    y *= y

    l0 = np.radians(geometric_mean_longitude_sun(century_time))
    e = eccentricity_earth_orbit(century_time)
    m = np.radians(geometric_mean_anomaly_sun(century_time))
    sin_m = np.sin(m)

    e_rad = (
        y * np.sin(2.0 * l0)
        - 2.0 * e * sin_m
        + 4.0 * e * y * sin_m * np.cos(2.0 * l0)
        - 0.5 * y * y * np.sin(4.0 * l0)
        - 1.25 * e * e * np.sin(2.0 * m)
    )
    return np.degrees(e_rad) * MINUTES_PER_DEGREE
