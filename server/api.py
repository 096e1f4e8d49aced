"""FastAPI server exposing weather and recommendation endpoints."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from advisor_app.app import ActivityAdvisorApp
from advisor_app.logging_config import get_logger, log_event
from logic.validation import RequestValidationFailed, parse_recommendation_request
from tools.weather_provider import WeatherServiceNotConfiguredError, WeatherServiceUnavailableError

LOGGER = get_logger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(advisor_app: ActivityAdvisorApp | None = None) -> FastAPI:
    """Build the FastAPI application around an :class:`ActivityAdvisorApp`."""

    advisor = advisor_app or ActivityAdvisorApp()
    app = FastAPI(title="Activity Clothing Advisor", version="0.1.0")
    app.state.advisor = advisor

    @app.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "activity-clothing-advisor",
            "environment": advisor.config.environment or "local",
            "weather_configured": advisor.weather_configured,
        }

    @app.get("/weather")
    def current_weather(lat: float | None = Query(None), lon: float | None = Query(None)):
        """Return the normalized current weather at the given coordinates."""

        if lat is None or lon is None:
            return _error(400, "Missing lat or lon query parameters")
        try:
            observation = advisor.fetch_weather(lat, lon)
        except WeatherServiceNotConfiguredError:
            return _error(500, "Weather service not configured")
        except WeatherServiceUnavailableError:
            return _error(502, "Failed to fetch weather data")
        return JSONResponse(
            content=observation.to_dict(),
            headers={"Cache-Control": f"public, max-age={advisor.config.weather_cache_max_age}"},
        )

    @app.post("/recommendations")
    async def recommendations(request: Request):
        """Validate ``{activity, weather}`` and return the engine's recommendation."""

        try:
            body = await request.json()
        except ValueError:
            body = None
        try:
            activity, weather = parse_recommendation_request(body)
        except RequestValidationFailed as exc:
            log_event(LOGGER, logging.WARNING, "request_validation_failed", error=exc.message)
            return JSONResponse(status_code=400, content=exc.to_payload())

        try:
            recommendation = advisor.recommend(activity, weather)
        except Exception:
            log_event(LOGGER, logging.ERROR, "recommendation_failed", activity=activity.value, exc_info=True)
            return _error(500, "Failed to generate recommendations")
        return recommendation.to_dict()

    return app


app = create_app()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int(os.getenv("PORT", "8080")), reload=False)
