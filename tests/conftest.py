from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from solartimes.julian import julian_day


@pytest.fixture(scope="session")
def almanac_jd() -> float:
    """0h UTC on 1994-05-08, a date printed in the 1994 Nautical Almanac."""

    return julian_day(1994, 5, 8.0)
