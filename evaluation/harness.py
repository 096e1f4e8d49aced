"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from advisor_app.app import ActivityAdvisorApp
from advisor_app.config import AdvisorConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from models.recommendation import Recommendation, Zone
from tools.weather_provider import MockWeatherProvider


def _any_contains(values: List[str], needle: str) -> bool:
    return any(needle.lower() in value.lower() for value in values)


def _evaluate_expectations(expectations: Dict[str, List[str]], recommendation: Recommendation) -> Dict[str, bool]:
    checks: Dict[str, bool] = {}
    for needle in expectations.get("accessory_contains", []):
        checks[f"accessory:{needle}"] = _any_contains(list(recommendation.accessories), needle)
    for needle in expectations.get("tip_contains", []):
        checks[f"tip:{needle}"] = _any_contains(list(recommendation.tips), needle)
    outer_needles = expectations.get("outer_contains_any", [])
    if outer_needles:
        outer_items = [layer.item for layer in recommendation.layers if layer.zone is Zone.OUTER]
        checks["outer"] = any(_any_contains(outer_items, needle) for needle in outer_needles)
    checks["base_layers_present"] = len(recommendation.layers) >= 2
    checks["tips_capped"] = len(recommendation.tips) <= 4
    return checks


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    app = ActivityAdvisorApp(config=AdvisorConfig(), weather_provider=MockWeatherProvider(scenario.weather))
    recommendation = app.recommend_for_location(scenario.activity, lat=0.0, lon=0.0)
    checks = _evaluate_expectations(scenario.expectations, recommendation)
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "layer_count": len(recommendation.layers),
        "response": recommendation.to_dict(),
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
