"""Pydantic schemas validating recommendation requests before they reach the engine."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, ValidationError, field_validator

from models.activity import Activity
from models.weather import Precipitation, WeatherObservation

ACTIVITY_ERROR = "Invalid or missing activity"
WEATHER_ERROR = "Invalid or missing weather data"


class WeatherPayload(BaseModel):
    """Wire shape of a weather observation; only ``temperature`` is required.

    Every numeric field accepts JSON numbers only, never strings or booleans.
    """

    model_config = ConfigDict(populate_by_name=True)

    temperature: StrictFloat
    feels_like: Optional[StrictFloat] = Field(None, alias="feelsLike")
    humidity: StrictFloat = Field(50, ge=0, le=100)
    wind_speed: StrictFloat = Field(0, ge=0, alias="windSpeed")
    precipitation: Precipitation = Precipitation.NONE
    description: str = ""
    icon: Optional[str] = "01d"

    def to_observation(self) -> WeatherObservation:
        return WeatherObservation(
            temperature=self.temperature,
            feels_like=self.temperature if self.feels_like is None else self.feels_like,
            humidity=self.humidity,
            wind_speed=self.wind_speed,
            precipitation=self.precipitation,
            description=self.description,
            icon=self.icon,
        )


class ActivityPayload(BaseModel):
    """Activity name as sent by clients; matching is exact and case-sensitive."""

    activity: Activity

    @field_validator("activity", mode="before")
    @classmethod
    def _exact_activity(cls, value: Any) -> Any:
        if not isinstance(value, str) or value not in {member.value for member in Activity}:
            raise ValueError(f"activity must be one of {[member.value for member in Activity]}")
        return value


class ValidationResult(BaseModel):
    """Client error payload returned when a request is rejected."""

    status: Literal["invalid"] = "invalid"
    error: str
    details: List[Dict[str, Any]] = []


def validation_failure(message: str, exc: ValidationError | None = None) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent client error payload."""

    details = exc.errors(include_url=False, include_context=False) if exc else []
    return ValidationResult(error=message, details=details).model_dump(exclude={"status"})


class RequestValidationFailed(ValueError):
    """A request was rejected before invoking the engine."""

    def __init__(self, message: str, exc: ValidationError | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.validation_error = exc

    def to_payload(self) -> Dict[str, Any]:
        return validation_failure(self.message, self.validation_error)


def parse_recommendation_request(body: Any) -> tuple[Activity, WeatherObservation]:
    """Validate a raw ``{activity, weather}`` body.

    Raises :class:`RequestValidationFailed` carrying the client-facing message.
    """

    if not isinstance(body, dict):
        raise RequestValidationFailed(ACTIVITY_ERROR)
    try:
        activity = ActivityPayload.model_validate({"activity": body.get("activity")}).activity
    except ValidationError as exc:
        raise RequestValidationFailed(ACTIVITY_ERROR, exc) from exc

    weather = body.get("weather")
    if not isinstance(weather, dict):
        raise RequestValidationFailed(WEATHER_ERROR)
    try:
        observation = WeatherPayload.model_validate(weather).to_observation()
    except ValidationError as exc:
        raise RequestValidationFailed(WEATHER_ERROR, exc) from exc
    return activity, observation


__all__ = [
    "ACTIVITY_ERROR",
    "ActivityPayload",
    "RequestValidationFailed",
    "ValidationResult",
    "WEATHER_ERROR",
    "WeatherPayload",
    "parse_recommendation_request",
    "validation_failure",
]
