"""Derive the single "felt while moving" temperature used by every selector."""

from __future__ import annotations

from models.activity import Activity, get_activity_profile
from models.weather import WeatherObservation

WIND_CHILL_THRESHOLD_KMH = 10
WIND_CHILL_FACTOR = 0.4
HIGH_HUMIDITY_THRESHOLD = 70
WARM_TEMP_THRESHOLD = 20
HUMIDITY_HEAT_ADJUSTMENT = -2
HUMIDITY_COLD_ADJUSTMENT = 1


def wind_chill(wind_speed: float) -> float:
    """Degrees lost to wind above the calm threshold (km/h)."""

    if wind_speed > WIND_CHILL_THRESHOLD_KMH:
        return (wind_speed - WIND_CHILL_THRESHOLD_KMH) * WIND_CHILL_FACTOR
    return 0.0


def humidity_effect(humidity: float, temperature: float) -> float:
    """Humid heat feels hotter and humid cold feels colder."""

    if humidity > HIGH_HUMIDITY_THRESHOLD:
        if temperature > WARM_TEMP_THRESHOLD:
            return HUMIDITY_HEAT_ADJUSTMENT
        return HUMIDITY_COLD_ADJUSTMENT
    return 0


def effective_temperature(weather: WeatherObservation, activity: Activity) -> float:
    """Return the temperature the athlete effectively dresses for."""

    profile = get_activity_profile(activity)
    return (
        weather.feels_like
        + profile.temp_adjustment
        - wind_chill(weather.wind_speed)
        - humidity_effect(weather.humidity, weather.temperature)
    )


__all__ = [
    "HIGH_HUMIDITY_THRESHOLD",
    "HUMIDITY_COLD_ADJUSTMENT",
    "HUMIDITY_HEAT_ADJUSTMENT",
    "WARM_TEMP_THRESHOLD",
    "WIND_CHILL_FACTOR",
    "WIND_CHILL_THRESHOLD_KMH",
    "effective_temperature",
    "humidity_effect",
    "wind_chill",
]
