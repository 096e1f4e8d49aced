"""Compose the full clothing recommendation for an activity and weather snapshot."""

from __future__ import annotations

import logging

from advisor_app.logging_config import get_logger, log_event
from logic.accessory_selection import select_accessories
from logic.effective_temperature import effective_temperature
from logic.layer_selection import select_base_layer, select_bottom_layer, select_mid_layer, select_outer_layer
from logic.tip_generation import generate_tips
from models.activity import Activity
from models.recommendation import Recommendation
from models.weather import WeatherObservation

LOGGER = get_logger(__name__)


def get_recommendation(activity: Activity, weather: WeatherObservation) -> Recommendation:
    """Return layers, accessories and tips for ``activity`` in ``weather``.

    The effective temperature is computed once and shared by every selector.
    Layers are ordered base top, mid, outer, bottom.
    """

    activity = Activity(activity)
    effective_temp = effective_temperature(weather, activity)

    candidates = (
        select_base_layer(effective_temp, activity, weather),
        select_mid_layer(effective_temp, activity, weather),
        select_outer_layer(effective_temp, weather, activity),
        select_bottom_layer(effective_temp, activity),
    )
    recommendation = Recommendation(
        layers=tuple(layer for layer in candidates if layer is not None),
        accessories=tuple(select_accessories(effective_temp, weather, activity)),
        tips=tuple(generate_tips(effective_temp, weather, activity)),
    )
    log_event(
        LOGGER,
        logging.DEBUG,
        "recommendation_composed",
        activity=activity.value,
        effective_temp=round(effective_temp, 1),
        layer_count=len(recommendation.layers),
        accessory_count=len(recommendation.accessories),
        tip_count=len(recommendation.tips),
    )
    return recommendation


__all__ = ["get_recommendation"]
