"""Configuration helpers for the activity clothing advisor."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_WEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
PLACEHOLDER_API_KEY = "your_api_key_here"


def is_usable_api_key(api_key: Optional[str]) -> bool:
    """True for a real OpenWeatherMap key; empty and placeholder keys are rejected."""

    return bool(api_key) and api_key != PLACEHOLDER_API_KEY


@dataclass
class AdvisorConfig:
    """Configuration values for the advisor service.

    Only the weather provider needs credentials; the recommendation engine
    itself is configuration free.
    """

    weather_api_key: Optional[str] = None
    weather_base_url: str = DEFAULT_WEATHER_BASE_URL
    weather_timeout_seconds: float = 5.0
    weather_cache_max_age: int = 900
    log_level: str = "INFO"
    environment: str | None = None

    @property
    def weather_configured(self) -> bool:
        """True when a real (non-placeholder) OpenWeatherMap key is present."""

        return is_usable_api_key(self.weather_api_key)

    @classmethod
    def from_env(cls) -> "AdvisorConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables so that the API key
        can be injected by the runtime environment.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("ADVISOR_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        weather_api_key = get_value("openweathermap_api_key")
        base_url = get_value("weather_base_url", DEFAULT_WEATHER_BASE_URL)
        timeout = get_value("weather_timeout_seconds", "5.0")
        cache_max_age = get_value("weather_cache_max_age", "900")
        log_level = get_value("log_level", "INFO")

        return cls(
            weather_api_key=weather_api_key or None,
            weather_base_url=str(base_url or DEFAULT_WEATHER_BASE_URL),
            weather_timeout_seconds=float(timeout or 5.0),
            weather_cache_max_age=int(cache_max_age or 900),
            log_level=str(log_level or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
