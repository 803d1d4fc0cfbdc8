"""Angle and time units, and angle formatting helpers."""

from __future__ import annotations

import math
from typing import NamedTuple, Union

import numpy as np

__all__ = [
    "Degrees",
    "Radians",
    "JulianDate",
    "CenturyTime",
    "DMS",
    "normalize_degrees",
    "degrees_to_dms",
]

# Every angle crossing a function boundary is annotated with one of these and
# functions returning radians carry a ``_rad`` suffix.
Degrees = Union[float, np.ndarray]
Radians = Union[float, np.ndarray]
JulianDate = Union[float, np.ndarray]
CenturyTime = Union[float, np.ndarray]


class DMS(NamedTuple):
    """Sexagesimal decomposition of an angle."""

    degrees: int
    minutes: int
    seconds: float


def normalize_degrees(degrees: Degrees) -> Degrees:
    """Reduce *degrees* into ``[0, 360)``."""

    result = np.mod(degrees, 360.0)
    # mod of a tiny negative value rounds up to exactly 360.0
    return np.where(result >= 360.0, 0.0, result)[()]


def degrees_to_dms(degrees: float) -> DMS:
    """Split decimal degrees into whole degrees, minutes and seconds.

    The whole-degree part is truncated toward zero. The remainder is counted in
    whole milliseconds of arc before being split, so ``121.135`` gives exactly
    ``(121, 8, 6.0)``.
    """

    whole = math.trunc(degrees)
    milliseconds = int((degrees - whole) * 3600 * 1000)
    minutes = int(milliseconds / (60 * 1000))
    milliseconds -= minutes * 60 * 1000
    return DMS(whole, minutes, milliseconds / 1000.0)
