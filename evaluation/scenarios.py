"""Evaluation scenarios exercising activities across weather patterns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from models.activity import Activity
from models.weather import Precipitation, WeatherObservation


@dataclass
class EvaluationScenario:
    name: str
    description: str
    activity: Activity
    weather: WeatherObservation
    expectations: Dict[str, List[str]] = field(default_factory=dict)


def _weather(**overrides: object) -> WeatherObservation:
    values: Dict[str, object] = {
        "temperature": 15,
        "feels_like": 15,
        "humidity": 50,
        "wind_speed": 10,
        "precipitation": Precipitation.NONE,
        "description": "clear sky",
        "icon": "01d",
    }
    values.update(overrides)
    return WeatherObservation(**values)  # type: ignore[arg-type]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="powder_day",
        description="Cold snowy ski day needs goggles, helmet and a ski shell.",
        activity=Activity.SKIING,
        weather=_weather(
            temperature=-5,
            feels_like=-10,
            wind_speed=10,
            precipitation=Precipitation.SNOW,
            description="light snow",
        ),
        expectations={
            "accessory_contains": ["goggles", "helmet"],
            "outer_contains_any": ["ski", "waterproof"],
        },
    ),
    EvaluationScenario(
        name="hot_run",
        description="Sunny hot run surfaces hydration advice and sunscreen.",
        activity=Activity.RUNNING,
        weather=_weather(temperature=30, feels_like=32),
        expectations={
            "tip_contains": ["hydrate"],
            "accessory_contains": ["sunscreen"],
        },
    ),
    EvaluationScenario(
        name="rainy_run",
        description="Rain always produces a waterproof shell.",
        activity=Activity.RUNNING,
        weather=_weather(temperature=12, feels_like=10, precipitation=Precipitation.RAIN, description="light rain", icon="10d"),
        expectations={
            "outer_contains_any": ["rain", "waterproof"],
            "accessory_contains": ["phone pouch"],
        },
    ),
    EvaluationScenario(
        name="windy_ride",
        description="Gale-force wind on a mild day calls for a windproof jacket.",
        activity=Activity.CYCLING,
        weather=_weather(temperature=16, feels_like=16, wind_speed=35),
        expectations={
            "outer_contains_any": ["wind"],
            "tip_contains": ["wind"],
        },
    ),
    EvaluationScenario(
        name="night_run",
        description="Running after dark needs visibility gear.",
        activity=Activity.RUNNING,
        weather=_weather(icon="01n", description="clear sky"),
        expectations={
            "accessory_contains": ["reflective", "headlamp"],
        },
    ),
    EvaluationScenario(
        name="summer_hike",
        description="Warm humid hike still reminds hikers to pack a layer.",
        activity=Activity.HIKING,
        weather=_weather(temperature=26, feels_like=27, humidity=85),
        expectations={
            "tip_contains": ["hydrate"],
            "accessory_contains": ["sunscreen"],
        },
    ),
]
