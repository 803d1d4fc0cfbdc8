"""Answering sun-time queries and tabulating almanac pages."""

from __future__ import annotations

import json
import logging
import math
import time
from typing import Optional

import numpy as np

from .astro import (
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    RISE_OR_SET,
    compute_sun_times,
    utc_for_solar_angle,
)
from .julian import julian_day
from .models import Almanac, AlmanacConfig, AlmanacRow, SunQuery, SunTimes

__all__ = ["sun_times", "build_almanac"]

LOGGER = logging.getLogger(__name__)

# Column order of the Nautical Almanac sunrise/twilight page.
_ALMANAC_COLUMNS = (
    ("nautical_rise", True, NAUTICAL_TWILIGHT),
    ("civil_rise", True, CIVIL_TWILIGHT),
    ("sunrise", True, RISE_OR_SET),
    ("sunset", False, RISE_OR_SET),
    ("civil_set", False, CIVIL_TWILIGHT),
    ("nautical_set", False, NAUTICAL_TWILIGHT),
)


def sun_times(query: SunQuery) -> SunTimes:
    """Rise and set times for a validated query."""

    start_time = time.perf_counter()
    jd = julian_day(query.year, query.month, query.day)
    result = compute_sun_times(jd, query.latitude, query.twilight.value)
    duration_ms = (time.perf_counter() - start_time) * 1000.0

    response = SunTimes(
        status=result["status"],
        julian_day=jd,
        latitude=query.latitude,
        twilight=query.twilight,
        rise_minutes=result["rise"],
        set_minutes=result["set"],
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "sun",
                "jd": jd,
                "lat": query.latitude,
                "twilight": query.twilight.value,
                "status": response.status,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response


def _column(values: np.ndarray, index: int) -> Optional[float]:
    value = float(values[index])
    return None if math.isnan(value) else value


def build_almanac(jd: float, config: Optional[AlmanacConfig] = None) -> Almanac:
    """Tabulate the six daily events for every latitude of *config*.

    Each column is evaluated over the whole latitude table at once. Events
    that do not occur are ``None``.
    """

    if config is None:
        config = AlmanacConfig()

    start_time = time.perf_counter()
    latitudes = np.asarray(config.latitudes, dtype=float)
    columns = {
        name: utc_for_solar_angle(is_rise, jd, latitudes, zenith)
        for name, is_rise, zenith in _ALMANAC_COLUMNS
    }
    rows = [
        AlmanacRow(
            latitude=float(latitude),
            **{name: _column(values, index) for name, values in columns.items()},
        )
        for index, latitude in enumerate(latitudes)
    ]
    duration_ms = (time.perf_counter() - start_time) * 1000.0

    LOGGER.info(
        json.dumps(
            {
                "event": "almanac_built",
                "jd": jd,
                "rows": len(rows),
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return Almanac(julian_day=jd, rows=rows)
