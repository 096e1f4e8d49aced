"""Weather provider abstractions and implementations."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import List

import requests
from pydantic import BaseModel, ValidationError

from advisor_app.config import DEFAULT_WEATHER_BASE_URL, is_usable_api_key
from advisor_app.logging_config import get_logger, log_event
from models.weather import Precipitation, WeatherObservation
from tools.observability import instrument_tool

LOGGER = get_logger(__name__)

MS_TO_KMH = 3.6
_RAIN_KEYWORDS = ("rain", "drizzle", "thunderstorm")
_SNOW_KEYWORDS = ("snow", "sleet")


class WeatherServiceError(RuntimeError):
    """Base error for weather lookups."""


class WeatherServiceNotConfiguredError(WeatherServiceError):
    """Raised when no usable API key is configured."""


class WeatherServiceUnavailableError(WeatherServiceError):
    """Raised when the upstream provider fails or returns an unusable payload."""


class _WeatherCondition(BaseModel):
    main: str = ""
    description: str = "Unknown"
    icon: str = "01d"


class _Wind(BaseModel):
    speed: float = 0.0


class _Main(BaseModel):
    temp: float
    feels_like: float
    humidity: float


class _CurrentWeatherResponse(BaseModel):
    main: _Main
    wind: _Wind = _Wind()
    weather: List[_WeatherCondition] = []


def round_half_up(value: float) -> int:
    """Round to the nearest whole number with ties going up (2.5 -> 3, -0.5 -> 0)."""

    return math.floor(value + 0.5)


def classify_precipitation(keyword: str | None) -> Precipitation:
    """Map a provider condition keyword (e.g. ``Drizzle``) onto a precipitation kind."""

    lowered = (keyword or "").lower()
    if any(token in lowered for token in _RAIN_KEYWORDS):
        return Precipitation.RAIN
    if any(token in lowered for token in _SNOW_KEYWORDS):
        return Precipitation.SNOW
    return Precipitation.NONE


class WeatherProvider(ABC):
    """Abstract weather provider interface."""

    @abstractmethod
    def get_current_weather(self, lat: float, lon: float) -> WeatherObservation:
        """Return the current observation at the given coordinates."""


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap current-weather provider with schema validation.

    Failures are raised, not masked: the caller decides how to surface a
    missing key versus an upstream outage.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_WEATHER_BASE_URL,
        timeout_seconds: float = 5.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds

    @property
    def configured(self) -> bool:
        return is_usable_api_key(self.api_key)

    @staticmethod
    def _to_observation(parsed: _CurrentWeatherResponse) -> WeatherObservation:
        condition = parsed.weather[0] if parsed.weather else _WeatherCondition()
        return WeatherObservation(
            temperature=round_half_up(parsed.main.temp),
            feels_like=round_half_up(parsed.main.feels_like),
            humidity=parsed.main.humidity,
            wind_speed=round_half_up(parsed.wind.speed * MS_TO_KMH),
            precipitation=classify_precipitation(condition.main),
            description=condition.description or "Unknown",
            icon=condition.icon or "01d",
        )

    @instrument_tool("get_current_weather")
    def get_current_weather(self, lat: float, lon: float) -> WeatherObservation:
        if not self.configured:
            log_event(LOGGER, logging.ERROR, "weather_provider_not_configured")
            raise WeatherServiceNotConfiguredError("OpenWeatherMap API key not configured")

        log_event(LOGGER, logging.INFO, "weather_fetch_started", lat=lat, lon=lon)
        params = {
            "lat": lat,
            "lon": lon,
            "units": "metric",
            "appid": self.api_key,
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            parsed = _CurrentWeatherResponse.model_validate(response.json())
        except requests.RequestException as exc:
            log_event(LOGGER, logging.ERROR, "weather_fetch_failed", reason="request_error", exc_info=exc)
            raise WeatherServiceUnavailableError(f"Weather API request failed: {exc}") from exc
        except (ValidationError, ValueError) as exc:
            log_event(LOGGER, logging.ERROR, "weather_fetch_failed", reason="schema_validation", exc_info=exc)
            raise WeatherServiceUnavailableError("Weather API returned an unexpected payload") from exc

        observation = self._to_observation(parsed)
        log_event(
            LOGGER,
            logging.INFO,
            "weather_fetch_completed",
            precipitation=observation.precipitation.value,
            icon=observation.icon,
        )
        return observation


class MockWeatherProvider(WeatherProvider):
    """Offline deterministic weather provider for tests."""

    def __init__(self, observation: WeatherObservation | None = None) -> None:
        self.observation = observation or WeatherObservation(
            temperature=15,
            feels_like=15,
            humidity=50,
            wind_speed=10,
            precipitation=Precipitation.NONE,
            description="clear sky",
            icon="01d",
        )

    def get_current_weather(self, lat: float, lon: float) -> WeatherObservation:
        LOGGER.info("Returning mock observation")
        return self.observation


__all__ = [
    "MockWeatherProvider",
    "OpenWeatherProvider",
    "WeatherProvider",
    "WeatherServiceError",
    "WeatherServiceNotConfiguredError",
    "WeatherServiceUnavailableError",
    "classify_precipitation",
    "round_half_up",
]
