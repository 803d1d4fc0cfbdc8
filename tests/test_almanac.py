from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from solartimes.almanac import build_almanac, sun_times
from solartimes.config import CONFIG_ENV_VAR, ConfigError, load_almanac_config
from solartimes.models import NAUTICAL_ALMANAC_LATITUDES, AlmanacConfig, SunQuery, Twilight


def test_sun_times_for_query():
    response = sun_times(SunQuery(year=1994, month=5, day=8.0, latitude=50.0))
    assert response.ok is True
    assert response.status == "ok"
    assert response.julian_day == 2449480.5
    assert response.twilight is Twilight.official
    assert response.rise_minutes == pytest.approx(265.0, abs=1.0)
    assert response.set_minutes == pytest.approx(1169.0, abs=1.0)


def test_sun_times_polar_night_has_no_times():
    query = SunQuery(year=2025, month=12, day=21.0, latitude=78.2232, twilight="civil")
    response = sun_times(query)
    assert response.status == "polar_night"
    assert response.rise_minutes is None
    assert response.set_minutes is None


def test_sun_times_polar_day_near_the_pole_after_equinox():
    response = sun_times(SunQuery(year=1990, month=3, day=22.0, latitude=88.718))
    assert response.status == "polar_day"
    assert response.rise_minutes is None
    assert response.set_minutes is None


def test_sun_times_logs_event(caplog):
    with caplog.at_level(logging.INFO, logger="solartimes.almanac"):
        sun_times(SunQuery(year=2000, month=1, day=1.0, latitude=0.0, twilight="nautical"))
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "sun"
    assert payload["twilight"] == "nautical"
    assert payload["status"] == "ok"
    assert "duration_ms" in payload


@pytest.mark.parametrize(
    "fields",
    [
        {"latitude": 95.0},
        {"latitude": -90.5},
        {"month": 13},
        {"month": 0},
        {"day": -1.0},
        {"twilight": "golden"},
    ],
)
def test_query_validation(fields):
    params = {"year": 2025, "month": 10, "day": 21.0, "latitude": 39.9}
    params.update(fields)
    with pytest.raises(ValidationError):
        SunQuery(**params)


def test_build_almanac_default_latitudes(almanac_jd):
    almanac = build_almanac(almanac_jd)
    assert almanac.julian_day == almanac_jd
    assert [row.latitude for row in almanac.rows] == list(NAUTICAL_ALMANAC_LATITUDES)

    rows = {row.latitude: row for row in almanac.rows}
    assert rows[72.0].sunrise is not None
    assert rows[72.0].civil_rise is None
    assert rows[72.0].nautical_set is None
    assert rows[60.0].nautical_rise is not None
    assert rows[62.0].nautical_rise is None
    for row in almanac.rows:
        if row.latitude < 72.0:
            assert row.sunrise < row.sunset


def test_build_almanac_matches_single_queries(almanac_jd):
    config = AlmanacConfig(latitudes=[0.0, -50.0])
    almanac = build_almanac(almanac_jd, config)
    for row in almanac.rows:
        result = sun_times(SunQuery(year=1994, month=5, day=8.0, latitude=row.latitude))
        assert row.sunrise == pytest.approx(result.rise_minutes, abs=1e-9)
        assert row.sunset == pytest.approx(result.set_minutes, abs=1e-9)


def test_build_almanac_logs_event(almanac_jd, caplog):
    with caplog.at_level(logging.INFO, logger="solartimes.almanac"):
        build_almanac(almanac_jd, AlmanacConfig(latitudes=[10.0]))
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "almanac_built"
    assert payload["rows"] == 1


def test_config_defaults_without_file(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_almanac_config()
    assert config.latitudes == list(NAUTICAL_ALMANAC_LATITUDES)


def test_config_from_path(tmp_path: Path):
    path = tmp_path / "almanac.json"
    path.write_text(json.dumps({"latitudes": [60.0, 0.0, -60.0]}), encoding="utf-8")
    assert load_almanac_config(path).latitudes == [60.0, 0.0, -60.0]


def test_config_from_environment(tmp_path: Path, monkeypatch):
    path = tmp_path / "almanac.json"
    path.write_text(json.dumps({"latitudes": [45.0]}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_almanac_config().latitudes == [45.0]


def test_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_almanac_config(tmp_path / "missing.json")


def test_config_invalid_json(tmp_path: Path):
    path = tmp_path / "almanac.json"
    path.write_text("{latitudes: ", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to read"):
        load_almanac_config(path)


@pytest.mark.parametrize("payload", [{"latitudes": [91.0]}, {"latitudes": []}, {"latitudes": "north"}])
def test_config_invalid_values(tmp_path: Path, payload):
    path = tmp_path / "almanac.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid configuration") as excinfo:
        load_almanac_config(path)
    assert isinstance(excinfo.value.__cause__, ValidationError)
