"""Tip prioritisation and truncation."""

from logic.tip_generation import MAX_TIPS, generate_tips
from models.activity import Activity
from models.weather import Precipitation, WeatherObservation


def _weather(**overrides: object) -> WeatherObservation:
    values = dict(
        temperature=15,
        feels_like=15,
        humidity=50,
        wind_speed=10,
        precipitation=Precipitation.NONE,
        description="clear sky",
        icon="01d",
    )
    values.update(overrides)
    return WeatherObservation(**values)


def test_heat_tips_for_hot_conditions() -> None:
    tips = generate_tips(35, _weather(), Activity.WALKING)
    assert tips[0].startswith("Hydrate before, during, and after")
    assert "Consider early morning or evening to avoid peak heat" in tips


def test_warm_tip_is_single_hydration_hint() -> None:
    assert generate_tips(23, _weather(), Activity.WALKING) == ["Hydrate frequently and take breaks in shade"]


def test_truncates_to_four_keeping_safety_first() -> None:
    weather = _weather(precipitation=Precipitation.RAIN, wind_speed=30, icon="10n")
    tips = generate_tips(-5, weather, Activity.CYCLING)
    assert len(tips) == MAX_TIPS
    assert tips == [
        "Start slightly cold - you'll warm up within 10 minutes of activity",
        "Warm up indoors before heading out to prevent cold muscles",
        "Consider water-resistant footwear",
        "Bring a small towel or extra socks",
    ]


def test_snow_tips_skip_grip_advice_for_skiers() -> None:
    snow = _weather(precipitation=Precipitation.SNOW)
    assert "Consider trail shoes with good grip" in generate_tips(10, snow, Activity.HIKING)
    ski_tips = generate_tips(10, snow, Activity.SKIING)
    assert "Consider trail shoes with good grip" not in ski_tips
    assert "Layer to easily adjust as conditions change throughout the day" in ski_tips


def test_moderate_wind_routing_tip() -> None:
    assert generate_tips(20, _weather(wind_speed=16), Activity.WALKING) == [
        "Start into the wind so you have it at your back when tired"
    ]


def test_hiking_trail_conditions() -> None:
    tips = generate_tips(20, _weather(wind_speed=21), Activity.HIKING)
    assert "Pack an extra layer - mountain weather can change quickly" in tips
    assert "Check trail conditions before heading out" in tips


def test_running_humidity_pacing() -> None:
    tips = generate_tips(19, _weather(humidity=75), Activity.RUNNING)
    assert tips == ["High humidity - reduce pace by 10-15% and listen to your body"]


def test_general_humidity_tip() -> None:
    tips = generate_tips(21, _weather(humidity=85), Activity.WALKING)
    assert tips == ["High humidity reduces sweat evaporation - pace yourself carefully"]


def test_night_visibility_tip_for_walkers_not_skiers() -> None:
    night = _weather(icon="01n")
    assert generate_tips(20, night, Activity.WALKING) == ["Be visible - wear bright colors and reflective gear"]
    assert "Be visible - wear bright colors and reflective gear" not in generate_tips(20, night, Activity.SKIING)


def test_mild_walk_has_no_tips() -> None:
    assert generate_tips(18, _weather(), Activity.WALKING) == []
