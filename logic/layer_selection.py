"""Per-zone clothing layer rules.

Each selector is an ordered cascade of temperature brackets over the effective
temperature; the first bracket whose upper bound is strictly greater than the
temperature wins. Base top and bottom always produce an item, mid and outer
layers are optional.
"""

from __future__ import annotations

from typing import Optional

from models.activity import Activity, Intensity, get_activity_profile
from models.recommendation import ClothingItem, Zone
from models.weather import Precipitation, WeatherObservation

HIGH_INTENSITY_TEMP_ADJUSTMENT = -3
MOISTURE_WICKING_HUMIDITY = 60


def _needs_moisture_wicking(activity: Activity, weather: WeatherObservation) -> bool:
    return get_activity_profile(activity).sweat_factor > 1.0 or weather.humidity > MOISTURE_WICKING_HUMIDITY


def _is_high_intensity(activity: Activity) -> bool:
    return get_activity_profile(activity).intensity is Intensity.HIGH


def select_base_layer(effective_temp: float, activity: Activity, weather: WeatherObservation) -> ClothingItem:
    """Pick the torso base layer."""

    wicking = _needs_moisture_wicking(activity, weather)

    if effective_temp < -5:
        return ClothingItem(
            Zone.BASE,
            "Heavy-weight merino wool base layer",
            "Maximum insulation and moisture management in extreme cold",
        )
    if effective_temp < 5:
        return ClothingItem(
            Zone.BASE,
            "Ski-specific thermal base layer" if activity is Activity.SKIING else "Thermal base layer",
            "Insulation and moisture management in cold conditions",
        )
    if effective_temp < 12:
        return ClothingItem(
            Zone.BASE,
            "Long-sleeve technical moisture-wicking shirt" if wicking else "Long-sleeve athletic shirt",
            "Temperature regulation and sweat management",
        )
    if effective_temp < 18:
        return ClothingItem(
            Zone.BASE,
            "Short-sleeve moisture-wicking technical shirt" if wicking else "Short-sleeve athletic shirt",
            "Keeps you cool and dry",
        )
    if effective_temp < 25:
        return ClothingItem(
            Zone.BASE,
            "Lightweight cycling jersey" if activity is Activity.CYCLING else "Lightweight breathable tank or tee",
            "Maximum ventilation in warm weather",
        )
    return ClothingItem(
        Zone.BASE,
        "Mesh-panel cycling jersey" if activity is Activity.CYCLING else "Ultra-light mesh tank top",
        "Maximum airflow for hot conditions",
    )


def select_mid_layer(effective_temp: float, activity: Activity, weather: WeatherObservation) -> Optional[ClothingItem]:
    """Pick an insulating mid layer, or ``None`` when it is warm enough without one.

    High-intensity activities generate more heat, so every bracket shifts
    three degrees colder for them.
    """

    offset = HIGH_INTENSITY_TEMP_ADJUSTMENT if _is_high_intensity(activity) else 0

    if effective_temp < -10 + offset:
        return ClothingItem(
            Zone.MID,
            "Insulated ski mid-layer or puffy jacket"
            if activity is Activity.SKIING
            else "Heavy insulated fleece or down jacket",
            "Critical warmth in extreme cold",
        )
    if effective_temp < 0 + offset:
        return ClothingItem(
            Zone.MID,
            "Insulated fleece or lightweight down jacket",
            "Critical warmth in freezing temperatures",
        )
    if effective_temp < 8 + offset:
        return ClothingItem(
            Zone.MID,
            "Running-specific lightweight fleece vest"
            if activity is Activity.RUNNING
            else "Lightweight fleece or softshell",
            "Additional warmth without bulk",
        )
    if effective_temp < 14 + offset and weather.wind_speed > 15:
        return ClothingItem(
            Zone.MID,
            "Thin fleece or quarter-zip pullover",
            "Light insulation layer for windy conditions",
        )
    return None


def select_outer_layer(effective_temp: float, weather: WeatherObservation, activity: Activity) -> Optional[ClothingItem]:
    """Pick a shell for precipitation, wind or cold; precipitation takes precedence."""

    if weather.precipitation is Precipitation.RAIN:
        if _is_high_intensity(activity):
            return ClothingItem(
                Zone.OUTER,
                "Lightweight packable cycling rain jacket"
                if activity is Activity.CYCLING
                else "Breathable waterproof running jacket",
                "Rain protection with ventilation for high-intensity activity",
            )
        return ClothingItem(
            Zone.OUTER,
            "Insulated waterproof jacket" if effective_temp < 10 else "Waterproof rain jacket",
            "Protection from rain",
        )
    if weather.precipitation is Precipitation.SNOW:
        return ClothingItem(
            Zone.OUTER,
            "Ski shell jacket with powder skirt" if activity is Activity.SKIING else "Insulated waterproof jacket",
            "Warmth and snow protection",
        )
    if weather.wind_speed > 30:
        return ClothingItem(Zone.OUTER, "Heavy-duty windproof jacket", "Protection from strong winds")
    if weather.wind_speed > 20:
        return ClothingItem(
            Zone.OUTER,
            "Cycling-specific windbreaker" if activity is Activity.CYCLING else "Windbreaker jacket",
            "Protection from moderate winds",
        )
    if effective_temp < 8 and weather.wind_speed > 12:
        return ClothingItem(Zone.OUTER, "Light windbreaker or wind vest", "Wind protection in cool conditions")
    if effective_temp < 5 and activity is not Activity.RUNNING:
        return ClothingItem(Zone.OUTER, "Light shell jacket", "Extra protection in cold temperatures")
    return None


def _bottom_wording(activity: Activity, cycling: str, hiking: str, skiing: str, default: str) -> str:
    if activity is Activity.CYCLING:
        return cycling
    if activity is Activity.HIKING:
        return hiking
    if activity is Activity.SKIING:
        return skiing
    return default


def select_bottom_layer(effective_temp: float, activity: Activity) -> ClothingItem:
    """Pick legwear; brackets are independent of the torso base layer."""

    if effective_temp < -5:
        return ClothingItem(
            Zone.BASE,
            "Insulated ski pants"
            if activity is Activity.SKIING
            else "Heavy thermal tights with wind-blocking front",
            "Maximum leg warmth in extreme cold",
        )
    if effective_temp < 5:
        return ClothingItem(
            Zone.BASE,
            _bottom_wording(
                activity,
                cycling="Thermal cycling tights",
                hiking="Thermal tights or insulated pants",
                skiing="Ski pants or insulated softshell pants",
                default="Thermal tights or insulated pants",
            ),
            "Leg warmth in cold conditions",
        )
    if effective_temp < 12:
        return ClothingItem(
            Zone.BASE,
            _bottom_wording(
                activity,
                cycling="Cycling tights or knee warmers with shorts",
                hiking="Hiking pants or convertible pants",
                skiing="Ski pants or insulated softshell pants",
                default="Running tights or long pants",
            ),
            "Comfortable for cool temperatures",
        )
    if effective_temp < 18:
        return ClothingItem(
            Zone.BASE,
            _bottom_wording(
                activity,
                cycling="Cycling shorts or 3/4 length bibs",
                hiking="Light hiking pants or shorts",
                skiing="Lightweight ski pants or softshell pants",
                default="Capri tights or light athletic pants",
            ),
            "Versatile for mild temperatures",
        )
    return ClothingItem(
        Zone.BASE,
        _bottom_wording(
            activity,
            cycling="Cycling shorts or bibs",
            hiking="Quick-dry hiking shorts",
            skiing="Lightweight ski pants or softshell pants",
            default="Athletic shorts",
        ),
        "Freedom of movement and breathability",
    )


__all__ = [
    "HIGH_INTENSITY_TEMP_ADJUSTMENT",
    "select_base_layer",
    "select_bottom_layer",
    "select_mid_layer",
    "select_outer_layer",
]
