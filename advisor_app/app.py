"""Advisor app bootstrap."""

from __future__ import annotations

import logging

from advisor_app.config import AdvisorConfig
from advisor_app.logging_config import configure_logging, get_logger, log_event, operation_context
from logic.recommendation_engine import get_recommendation
from models.activity import Activity
from models.recommendation import Recommendation
from models.weather import WeatherObservation
from tools.weather_provider import OpenWeatherProvider, WeatherProvider


LOGGER = get_logger(__name__)


class ActivityAdvisorApp:
    """Wires together configuration, logging, the weather provider and the engine."""

    def __init__(
        self,
        config: AdvisorConfig | None = None,
        weather_provider: WeatherProvider | None = None,
    ) -> None:
        self.config = config or AdvisorConfig.from_env()
        configure_logging(self.config.log_level)
        self.weather_provider = weather_provider or OpenWeatherProvider(
            api_key=self.config.weather_api_key,
            base_url=self.config.weather_base_url,
            timeout_seconds=self.config.weather_timeout_seconds,
        )

    @property
    def weather_configured(self) -> bool:
        if isinstance(self.weather_provider, OpenWeatherProvider):
            return self.weather_provider.configured
        return True

    def fetch_weather(self, lat: float, lon: float) -> WeatherObservation:
        """Fetch the current observation; provider errors propagate to the caller."""

        with operation_context("app.fetch_weather"):
            return self.weather_provider.get_current_weather(lat, lon)

    def recommend(self, activity: Activity | str, weather: WeatherObservation) -> Recommendation:
        """Run the recommendation engine under a correlation-scoped operation."""

        activity = Activity(activity)
        with operation_context("app.recommend", activity=activity.value):
            recommendation = get_recommendation(activity, weather)
            log_event(
                LOGGER,
                logging.INFO,
                "recommendation_generated",
                activity=activity.value,
                precipitation=weather.precipitation.value,
                layers=[layer.item for layer in recommendation.layers],
            )
            return recommendation

    def recommend_for_location(self, activity: Activity | str, lat: float, lon: float) -> Recommendation:
        """Fetch weather for the coordinates and recommend clothing for it."""

        return self.recommend(activity, self.fetch_weather(lat, lon))


__all__ = ["ActivityAdvisorApp"]
