"""Accessory rules grouped by body area and situation.

Every group is evaluated in a fixed order and appends at most one string per
rule, so the result never contains duplicates.
"""

from __future__ import annotations

from typing import List

from models.activity import Activity, ExposureLevel, get_activity_profile
from models.weather import Precipitation, WeatherObservation


def _head(effective_temp: float, weather: WeatherObservation, activity: Activity) -> List[str]:
    exposure = get_activity_profile(activity).exposure_level
    if effective_temp < -5:
        return ["Balaclava or thermal face mask"]
    if effective_temp < 5:
        return ["Warm beanie or ear warmers"]
    if effective_temp < 12 and weather.wind_speed > 15:
        return ["Lightweight beanie or headband"]
    if weather.is_daytime and effective_temp > 18 and exposure is not ExposureLevel.LOW:
        return ["Breathable cap or visor for sun protection"]
    return []


def _hands(effective_temp: float, activity: Activity) -> List[str]:
    cycling = activity is Activity.CYCLING
    if effective_temp < -10:
        return ["Insulated mittens or heavy gloves"]
    if effective_temp < 0:
        return ["Thermal cycling gloves" if cycling else "Insulated gloves"]
    if effective_temp < 8:
        return ["Windproof cycling gloves" if cycling else "Light gloves"]
    if cycling and effective_temp < 15:
        return ["Light cycling gloves"]
    return []


def _eyes(weather: WeatherObservation, activity: Activity) -> List[str]:
    if activity is Activity.SKIING:
        return ["Ski goggles"]
    if activity is Activity.CYCLING:
        return ["Cycling glasses or sunglasses"]
    exposure = get_activity_profile(activity).exposure_level
    if weather.is_daytime and exposure is ExposureLevel.HIGH and weather.precipitation is Precipitation.NONE:
        return ["Sunglasses"]
    return []


def _neck(effective_temp: float, activity: Activity) -> List[str]:
    if effective_temp < 0:
        return ["Neck gaiter or buff"]
    if effective_temp < 8 and activity in (Activity.RUNNING, Activity.CYCLING):
        return ["Lightweight neck buff"]
    return []


def _activity_gear(effective_temp: float, weather: WeatherObservation, activity: Activity) -> List[str]:
    gear: List[str] = []
    if activity is Activity.CYCLING:
        if effective_temp < 10:
            gear.append("Toe covers or overshoes")
        if weather.is_precipitating:
            gear.append("Clear lens glasses for visibility")
    if activity is Activity.SKIING:
        gear.append("Helmet")
        if effective_temp < 0:
            gear.append("Hand warmers")
    return gear


def _sun(weather: WeatherObservation, activity: Activity) -> List[str]:
    exposure = get_activity_profile(activity).exposure_level
    if weather.is_daytime and exposure is not ExposureLevel.LOW and not weather.is_precipitating:
        return ["Sunscreen SPF 30+"]
    return []


def _precipitation(weather: WeatherObservation, activity: Activity) -> List[str]:
    if not weather.is_precipitating:
        return []
    gear = ["Waterproof phone pouch"]
    if activity in (Activity.RUNNING, Activity.HIKING):
        gear.append("Waterproof waist pack")
    return gear


def _low_light(weather: WeatherObservation, activity: Activity) -> List[str]:
    if weather.is_daytime or activity not in (Activity.RUNNING, Activity.CYCLING):
        return []
    gear = ["Reflective gear or vest"]
    if activity is Activity.RUNNING:
        gear.append("Headlamp or clip light")
    else:
        gear.append("Front and rear bike lights")
    return gear


def select_accessories(effective_temp: float, weather: WeatherObservation, activity: Activity) -> List[str]:
    """Return accessories in head, hands, eyes, neck, gear, sun, rain, light order."""

    accessories: List[str] = []
    accessories += _head(effective_temp, weather, activity)
    accessories += _hands(effective_temp, activity)
    accessories += _eyes(weather, activity)
    accessories += _neck(effective_temp, activity)
    accessories += _activity_gear(effective_temp, weather, activity)
    accessories += _sun(weather, activity)
    accessories += _precipitation(weather, activity)
    accessories += _low_light(weather, activity)
    return accessories


__all__ = ["select_accessories"]
