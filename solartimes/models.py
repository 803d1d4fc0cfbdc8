"""Pydantic models for queries, results and almanac tables."""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

NAUTICAL_ALMANAC_LATITUDES: Tuple[float, ...] = (
    72.0, 70.0, 68.0, 66.0, 64.0, 62.0, 60.0, 58.0, 56.0, 54.0, 52.0,
    50.0, 45.0, 40.0, 35.0, 30.0, 20.0, 10.0, 0.0, -10.0, -20.0, -30.0,
    -35.0, -40.0, -45.0, -50.0, -52.0, -54.0, -56.0, -58.0, -60.0,
)


class Twilight(str, Enum):
    """Enumeration of supported twilight definitions."""

    official = "official"
    civil = "civil"
    nautical = "nautical"
    astronomical = "astronomical"


class SunQuery(BaseModel):
    """Validated request for the rise and set times at one latitude."""

    year: int = Field(..., description="Astronomical year number")
    month: int = Field(..., ge=1, le=12, description="Calendar month")
    day: float = Field(
        ..., ge=0.0, description="Day of month; the fraction is the UTC time of day"
    )
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    twilight: Twilight = Field(Twilight.official, description="Twilight definition")


class SunTimes(BaseModel):
    """Rise and set times for a :class:`SunQuery`."""

    ok: bool = True
    status: Literal["ok", "polar_day", "polar_night"]
    julian_day: float = Field(..., description="Julian Day of the query date")
    latitude: float = Field(..., description="Latitude in degrees")
    twilight: Twilight = Field(..., description="Applied twilight definition")
    rise_minutes: Optional[float] = Field(
        None, description="Rise in minutes after 0h UTC, absent when it does not occur"
    )
    set_minutes: Optional[float] = Field(
        None, description="Set in minutes after 0h UTC, absent when it does not occur"
    )


class AlmanacRow(BaseModel):
    """The six daily events at one latitude, in minutes after 0h UTC."""

    latitude: float
    nautical_rise: Optional[float] = None
    civil_rise: Optional[float] = None
    sunrise: Optional[float] = None
    sunset: Optional[float] = None
    civil_set: Optional[float] = None
    nautical_set: Optional[float] = None


class Almanac(BaseModel):
    """One day of the six-column event table, a row per latitude."""

    julian_day: float
    rows: List[AlmanacRow]


class AlmanacConfig(BaseModel):
    """Latitude table used when tabulating an almanac."""

    latitudes: List[float] = Field(
        default_factory=lambda: list(NAUTICAL_ALMANAC_LATITUDES),
        min_length=1,
        description="Latitudes in degrees, tabulated in the given order",
    )

    @field_validator("latitudes")
    @classmethod
    def validate_latitudes(cls, value: List[float]) -> List[float]:
        for latitude in value:
            if not -90.0 <= latitude <= 90.0:
                raise ValueError(f"latitude {latitude} must be within ±90 degrees")
        return value
