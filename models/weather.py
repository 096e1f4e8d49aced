"""Current weather observation consumed by the recommendation engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Precipitation(str, Enum):
    NONE = "none"
    RAIN = "rain"
    SNOW = "snow"


@dataclass(frozen=True)
class WeatherObservation:
    """Metric weather snapshot (degrees Celsius, km/h, percent humidity).

    ``icon`` follows the OpenWeatherMap convention where a trailing ``d`` or
    ``n`` marks day or night, e.g. ``01d``.
    """

    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    precipitation: Precipitation = Precipitation.NONE
    description: str = ""
    icon: Optional[str] = "01d"

    def __post_init__(self) -> None:
        object.__setattr__(self, "precipitation", Precipitation(self.precipitation))

    @property
    def is_daytime(self) -> bool:
        # Missing or empty icons are treated as daytime.
        if not self.icon:
            return True
        return "d" in self.icon

    @property
    def is_precipitating(self) -> bool:
        return self.precipitation is not Precipitation.NONE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "feelsLike": self.feels_like,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "precipitation": self.precipitation.value,
            "description": self.description,
            "icon": self.icon,
        }


__all__ = ["Precipitation", "WeatherObservation"]
