"""Activity catalogue and the static exertion profile of each activity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Activity(str, Enum):
    """Supported outdoor activities."""

    RUNNING = "running"
    CYCLING = "cycling"
    SKIING = "skiing"
    HIKING = "hiking"
    WALKING = "walking"


class Intensity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ExposureLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ActivityProfile:
    """How an activity changes the way weather is felt.

    ``temp_adjustment`` is the number of degrees Celsius warmer the athlete
    feels from exertion. ``sweat_factor`` above 1.0 means moisture-wicking
    fabrics are preferred.
    """

    intensity: Intensity
    temp_adjustment: float
    sweat_factor: float
    exposure_level: ExposureLevel


ACTIVITY_PROFILES: Mapping[Activity, ActivityProfile] = MappingProxyType(
    {
        Activity.RUNNING: ActivityProfile(
            intensity=Intensity.HIGH, temp_adjustment=10, sweat_factor=1.5, exposure_level=ExposureLevel.HIGH
        ),
        Activity.CYCLING: ActivityProfile(
            intensity=Intensity.HIGH, temp_adjustment=5, sweat_factor=1.3, exposure_level=ExposureLevel.HIGH
        ),
        Activity.SKIING: ActivityProfile(
            intensity=Intensity.MEDIUM, temp_adjustment=5, sweat_factor=1.0, exposure_level=ExposureLevel.HIGH
        ),
        Activity.HIKING: ActivityProfile(
            intensity=Intensity.MEDIUM, temp_adjustment=7, sweat_factor=1.2, exposure_level=ExposureLevel.MEDIUM
        ),
        Activity.WALKING: ActivityProfile(
            intensity=Intensity.LOW, temp_adjustment=3, sweat_factor=0.8, exposure_level=ExposureLevel.LOW
        ),
    }
)


def get_activity_profile(activity: Activity) -> ActivityProfile:
    """Return the :class:`ActivityProfile` for ``activity``."""

    return ACTIVITY_PROFILES[Activity(activity)]


__all__ = [
    "Activity",
    "ActivityProfile",
    "ACTIVITY_PROFILES",
    "ExposureLevel",
    "Intensity",
    "get_activity_profile",
]
