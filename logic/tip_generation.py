"""Advisory tips ranked so that safety guidance survives truncation."""

from __future__ import annotations

from typing import List

from models.activity import Activity, Intensity, get_activity_profile
from models.weather import Precipitation, WeatherObservation

MAX_TIPS = 4


def _warm_up_tips(effective_temp: float, activity: Activity) -> List[str]:
    tips: List[str] = []
    if get_activity_profile(activity).intensity is Intensity.HIGH and effective_temp < 15:
        tips.append("Start slightly cold - you'll warm up within 10 minutes of activity")
    if effective_temp < 0:
        tips.append("Warm up indoors before heading out to prevent cold muscles")
    return tips


def _heat_tips(effective_temp: float) -> List[str]:
    if effective_temp > 28:
        return [
            "Hydrate before, during, and after - aim for 500ml per 30 minutes",
            "Consider early morning or evening to avoid peak heat",
        ]
    if effective_temp > 22:
        return ["Hydrate frequently and take breaks in shade"]
    return []


def _precipitation_tips(weather: WeatherObservation, activity: Activity) -> List[str]:
    tips: List[str] = []
    if weather.precipitation is Precipitation.RAIN:
        tips.append("Consider water-resistant footwear")
        tips.append("Bring a small towel or extra socks")
        if activity is Activity.CYCLING:
            tips.append("Reduce speed on corners - wet surfaces are slippery")
    elif weather.precipitation is Precipitation.SNOW:
        tips.append("Allow extra time - surfaces may be slippery")
        if activity is not Activity.SKIING:
            tips.append("Consider trail shoes with good grip")
    return tips


def _wind_tips(weather: WeatherObservation, activity: Activity) -> List[str]:
    if weather.wind_speed > 25:
        tips = ["Plan your route to have wind at your back on the return"]
        if activity is Activity.CYCLING:
            tips.append("Be cautious of crosswinds, especially near open areas")
        return tips
    if weather.wind_speed > 15:
        return ["Start into the wind so you have it at your back when tired"]
    return []


def _activity_tips(effective_temp: float, weather: WeatherObservation, activity: Activity) -> List[str]:
    tips: List[str] = []
    if activity is Activity.CYCLING:
        if effective_temp < 10:
            tips.append("Bring an extra layer for descents when you cool down quickly")
        if effective_temp > 25:
            tips.append("Freeze your water bottles for longer-lasting cold hydration")
    elif activity is Activity.SKIING:
        tips.append("Layer to easily adjust as conditions change throughout the day")
        if effective_temp < -10:
            tips.append("Take regular breaks in the lodge to warm up")
    elif activity is Activity.HIKING:
        tips.append("Pack an extra layer - mountain weather can change quickly")
        if weather.is_precipitating or weather.wind_speed > 20:
            tips.append("Check trail conditions before heading out")
    elif activity is Activity.RUNNING:
        if weather.humidity > 70 and effective_temp > 18:
            tips.append("High humidity - reduce pace by 10-15% and listen to your body")
        if effective_temp < 5:
            tips.append("Extend your warm-up routine in cold weather")
    return tips


def _humidity_tips(effective_temp: float, weather: WeatherObservation) -> List[str]:
    if weather.humidity > 80 and effective_temp > 20:
        return ["High humidity reduces sweat evaporation - pace yourself carefully"]
    return []


def _low_light_tips(weather: WeatherObservation, activity: Activity) -> List[str]:
    if not weather.is_daytime and activity in (Activity.RUNNING, Activity.CYCLING, Activity.WALKING):
        return ["Be visible - wear bright colors and reflective gear"]
    return []


def generate_tips(effective_temp: float, weather: WeatherObservation, activity: Activity) -> List[str]:
    """Return at most :data:`MAX_TIPS` tips, highest priority first."""

    candidates = (
        _warm_up_tips(effective_temp, activity)
        + _heat_tips(effective_temp)
        + _precipitation_tips(weather, activity)
        + _wind_tips(weather, activity)
        + _activity_tips(effective_temp, weather, activity)
        + _humidity_tips(effective_temp, weather)
        + _low_light_tips(weather, activity)
    )
    return candidates[:MAX_TIPS]


__all__ = ["MAX_TIPS", "generate_tips"]
