"""Low-precision sunrise, sunset and twilight times."""

from .almanac import build_almanac, sun_times
from .angles import DMS, degrees_to_dms, normalize_degrees
from .astro import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    RISE_OR_SET,
    ZENITH_ANGLES,
    compute_sun_times,
    utc_for_solar_angle,
)
from .julian import (
    julian_century_from_julian_day,
    julian_day,
    julian_day_from_julian_century,
    julian_day_from_ymdhms,
)

__all__ = [
    "ASTRONOMICAL_TWILIGHT",
    "CIVIL_TWILIGHT",
    "DMS",
    "NAUTICAL_TWILIGHT",
    "RISE_OR_SET",
    "ZENITH_ANGLES",
    "build_almanac",
    "compute_sun_times",
    "degrees_to_dms",
    "julian_century_from_julian_day",
    "julian_day",
    "julian_day_from_julian_century",
    "julian_day_from_ymdhms",
    "normalize_degrees",
    "sun_times",
    "utc_for_solar_angle",
]
