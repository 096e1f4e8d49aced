"""Model package exports."""

from models.activity import ACTIVITY_PROFILES, Activity, ActivityProfile, ExposureLevel, Intensity, get_activity_profile
from models.recommendation import ClothingItem, Recommendation, Zone
from models.weather import Precipitation, WeatherObservation

__all__ = [
    "ACTIVITY_PROFILES",
    "Activity",
    "ActivityProfile",
    "ClothingItem",
    "ExposureLevel",
    "Intensity",
    "Precipitation",
    "Recommendation",
    "WeatherObservation",
    "Zone",
    "get_activity_profile",
]
