"""Effective temperature derivation."""

import pytest

from logic.effective_temperature import effective_temperature, humidity_effect, wind_chill
from models.activity import Activity
from models.weather import Precipitation, WeatherObservation


def _weather(**overrides: object) -> WeatherObservation:
    values = dict(
        temperature=15,
        feels_like=15,
        humidity=50,
        wind_speed=10,
        precipitation=Precipitation.NONE,
        description="clear sky",
        icon="01d",
    )
    values.update(overrides)
    return WeatherObservation(**values)


def test_wind_at_threshold_adds_no_chill() -> None:
    assert wind_chill(10) == 0
    assert effective_temperature(_weather(wind_speed=10), Activity.WALKING) == 15 + 3


def test_wind_above_threshold_cools_linearly() -> None:
    assert wind_chill(20) == pytest.approx(4.0)
    assert effective_temperature(_weather(wind_speed=35), Activity.RUNNING) == pytest.approx(15 + 10 - 10)


def test_negative_and_zero_wind_are_tolerated() -> None:
    assert wind_chill(0) == 0
    assert wind_chill(-5) == 0


def test_humid_heat_raises_effective_temperature() -> None:
    assert humidity_effect(80, 25) == -2
    assert effective_temperature(_weather(temperature=25, feels_like=25, humidity=80), Activity.WALKING) == 30


def test_humid_cold_lowers_effective_temperature() -> None:
    assert humidity_effect(80, 20) == 1
    assert effective_temperature(_weather(temperature=5, feels_like=5, humidity=71), Activity.HIKING) == 11


def test_humidity_boundary_is_exclusive() -> None:
    assert humidity_effect(70, 30) == 0
    assert humidity_effect(100, 20.0) == 1


@pytest.mark.parametrize(
    "activity, expected",
    [
        (Activity.RUNNING, 10),
        (Activity.CYCLING, 5),
        (Activity.SKIING, 5),
        (Activity.HIKING, 7),
        (Activity.WALKING, 3),
    ],
)
def test_activity_exertion_offsets(activity: Activity, expected: int) -> None:
    assert effective_temperature(_weather(feels_like=0, wind_speed=0), activity) == expected


def test_extreme_values_do_not_raise() -> None:
    value = effective_temperature(_weather(temperature=-60, feels_like=-80, wind_speed=250, humidity=100), Activity.SKIING)
    assert value < -100
