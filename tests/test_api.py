"""HTTP boundary validation and error mapping."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from advisor_app.app import ActivityAdvisorApp
from advisor_app.config import AdvisorConfig
from models.weather import Precipitation, WeatherObservation
from server.api import create_app
from tools.weather_provider import (
    MockWeatherProvider,
    OpenWeatherProvider,
    WeatherProvider,
    WeatherServiceUnavailableError,
)


class _FailingProvider(WeatherProvider):
    def get_current_weather(self, lat: float, lon: float) -> WeatherObservation:
        raise WeatherServiceUnavailableError("upstream down")


def _client(provider: WeatherProvider | None = None, **config: object) -> TestClient:
    advisor = ActivityAdvisorApp(
        config=AdvisorConfig(**config),
        weather_provider=provider or MockWeatherProvider(),
    )
    return TestClient(create_app(advisor))


def test_healthcheck_reports_weather_configuration() -> None:
    client = _client(OpenWeatherProvider(api_key=None))
    body = client.get("/healthz").json()
    assert body["status"] == "ok"
    assert body["weather_configured"] is False


def test_weather_requires_coordinates() -> None:
    response = _client().get("/weather", params={"lat": 1})
    assert response.status_code == 400
    assert response.json() == {"error": "Missing lat or lon query parameters"}


def test_weather_returns_observation_with_cache_header() -> None:
    observation = WeatherObservation(
        temperature=4,
        feels_like=1,
        humidity=90,
        wind_speed=22,
        precipitation=Precipitation.SNOW,
        description="light snow",
        icon="13n",
    )
    response = _client(MockWeatherProvider(observation), weather_cache_max_age=600).get(
        "/weather", params={"lat": 60.1, "lon": 24.9}
    )
    assert response.status_code == 200
    assert response.headers["cache-control"] == "public, max-age=600"
    assert response.json() == {
        "temperature": 4,
        "feelsLike": 1,
        "humidity": 90,
        "windSpeed": 22,
        "precipitation": "snow",
        "description": "light snow",
        "icon": "13n",
    }


def test_weather_not_configured_is_reported_distinctly() -> None:
    response = _client(OpenWeatherProvider(api_key="your_api_key_here")).get("/weather", params={"lat": 1, "lon": 2})
    assert response.status_code == 500
    assert response.json() == {"error": "Weather service not configured"}


def test_weather_upstream_failure() -> None:
    response = _client(_FailingProvider()).get("/weather", params={"lat": 1, "lon": 2})
    assert response.status_code == 502
    assert response.json() == {"error": "Failed to fetch weather data"}


def test_recommendations_happy_path() -> None:
    response = _client().post(
        "/recommendations",
        json={
            "activity": "skiing",
            "weather": {
                "temperature": -5,
                "feelsLike": -10,
                "humidity": 50,
                "windSpeed": 10,
                "precipitation": "snow",
                "description": "light snow",
                "icon": "01d",
            },
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert "Helmet" in body["accessories"]
    assert any(layer["type"] == "outer" and "ski" in layer["item"].lower() for layer in body["layers"])
    assert len(body["tips"]) <= 4


def test_recommendations_fill_optional_weather_fields() -> None:
    response = _client().post("/recommendations", json={"activity": "walking", "weather": {"temperature": 20}})
    assert response.status_code == 200
    assert len(response.json()["layers"]) >= 2


@pytest.mark.parametrize("activity", [None, "Running", "swimming", 3])
def test_recommendations_reject_invalid_activity(activity: object) -> None:
    response = _client().post("/recommendations", json={"activity": activity, "weather": {"temperature": 10}})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or missing activity"


@pytest.mark.parametrize(
    "weather",
    [None, {}, {"temperature": "cold"}, {"temperature": True}, {"temperature": 10, "humidity": 140}],
)
def test_recommendations_reject_invalid_weather(weather: object) -> None:
    response = _client().post("/recommendations", json={"activity": "running", "weather": weather})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or missing weather data"


def test_recommendations_reject_non_json_body() -> None:
    response = _client().post("/recommendations", content=b"not json", headers={"content-type": "application/json"})
    assert response.status_code == 400


@pytest.mark.parametrize(
    "weather",
    [
        {"temperature": "10"},
        {"temperature": 10, "feelsLike": "12"},
        {"temperature": 10, "humidity": "60"},
        {"temperature": 10, "windSpeed": False},
    ],
)
def test_recommendations_require_json_numbers_for_every_numeric_field(weather: object) -> None:
    response = _client().post("/recommendations", json={"activity": "hiking", "weather": weather})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or missing weather data"


def test_recommendations_accept_integer_and_float_numbers() -> None:
    response = _client().post(
        "/recommendations",
        json={"activity": "hiking", "weather": {"temperature": 10, "feelsLike": 8.5, "humidity": 60, "windSpeed": 12.0}},
    )
    assert response.status_code == 200
