from __future__ import annotations

import numpy as np
import pytest

from solartimes.angles import DMS, degrees_to_dms, normalize_degrees


def test_degrees_to_dms_reference_value():
    result = degrees_to_dms(121.1350000)
    assert result == (121, 8, 6.0)
    assert isinstance(result, DMS)
    assert result.minutes == 8


def test_degrees_to_dms_truncates_toward_zero():
    assert degrees_to_dms(-121.135) == (-121, -8, -6.0)
    assert degrees_to_dms(0.5) == (0, 30, 0.0)
    assert degrees_to_dms(45.0) == (45, 0, 0.0)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, 0.0),
        (45.0, 45.0),
        (360.0, 0.0),
        (361.0, 1.0),
        (-1.0, 359.0),
        (-90.0, 270.0),
        (720.0, 0.0),
        (-450.0, 270.0),
        (-1754.4014, 45.5986),
    ],
)
def test_normalize_degrees(angle, expected):
    assert normalize_degrees(angle) == pytest.approx(expected, abs=1e-9)


def test_normalize_degrees_never_returns_360():
    result = normalize_degrees(-1e-20)
    assert 0.0 <= result < 360.0


def test_normalize_degrees_accepts_arrays():
    result = normalize_degrees(np.array([-10.0, 370.0, 180.0]))
    np.testing.assert_allclose(result, [350.0, 10.0, 180.0])
