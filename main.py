"""Command line entrypoint printing a recommendation for given conditions."""

from __future__ import annotations

import argparse
import json
from typing import List, Optional

from advisor_app.app import ActivityAdvisorApp
from advisor_app.config import AdvisorConfig
from logic.presentation import render_text
from models.activity import Activity
from models.weather import Precipitation, WeatherObservation
from tools.weather_provider import MockWeatherProvider


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Recommend clothing for an outdoor activity")
    parser.add_argument("activity", choices=[activity.value for activity in Activity])
    parser.add_argument("--temperature", type=float, required=True, help="Air temperature in Celsius.")
    parser.add_argument("--feels-like", type=float, default=None, help="Defaults to the air temperature.")
    parser.add_argument("--humidity", type=float, default=50)
    parser.add_argument("--wind-speed", type=float, default=0, help="Wind speed in km/h.")
    parser.add_argument(
        "--precipitation",
        choices=[kind.value for kind in Precipitation],
        default=Precipitation.NONE.value,
    )
    parser.add_argument("--icon", default="01d", help="Provider icon code; 'n' marks night.")
    parser.add_argument("--format", choices=["json", "text"], default="json")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    observation = WeatherObservation(
        temperature=args.temperature,
        feels_like=args.temperature if args.feels_like is None else args.feels_like,
        humidity=args.humidity,
        wind_speed=args.wind_speed,
        precipitation=Precipitation(args.precipitation),
        icon=args.icon,
    )
    app = ActivityAdvisorApp(
        config=AdvisorConfig.from_env(),
        weather_provider=MockWeatherProvider(observation),
    )
    recommendation = app.recommend_for_location(args.activity, lat=0.0, lon=0.0)
    if args.format == "text":
        print(render_text(recommendation))
    else:
        print(json.dumps(recommendation.to_dict(), indent=2))


if __name__ == "__main__":
    main()
