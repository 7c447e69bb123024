"""Runtime settings read from the environment (and an optional .env file)."""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except (TypeError, ValueError):
        return float(default)


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    try:
        return max(minimum, int(os.environ.get(name, str(default))))
    except (TypeError, ValueError):
        return int(default)


@dataclass(frozen=True)
class PortalSettings:
    data_url: str = "http://localhost:54321/rest/v1"
    data_key: str = ""
    data_timeout_s: int = 10
    environment: str = "development"
    log_level: str = "INFO"
    grade_scale_max: float = 10.0
    map_center_lat: float = 31.777
    map_center_lng: float = 76.986
    map_zoom: int = 16


def load_settings() -> PortalSettings:
    """Build settings from the current environment"""
    return PortalSettings(
        data_url=os.environ.get("PORTAL_DATA_URL", PortalSettings.data_url).rstrip("/"),
        data_key=os.environ.get("PORTAL_DATA_KEY", ""),
        data_timeout_s=_env_int("PORTAL_DATA_TIMEOUT_S", 10, minimum=1),
        environment=os.environ.get("PORTAL_ENVIRONMENT", "development"),
        log_level=os.environ.get("PORTAL_LOG_LEVEL", "INFO").upper(),
        grade_scale_max=_env_float("PORTAL_GRADE_SCALE_MAX", 10.0),
        map_center_lat=_env_float("PORTAL_MAP_CENTER_LAT", 31.777),
        map_center_lng=_env_float("PORTAL_MAP_CENTER_LNG", 76.986),
        map_zoom=_env_int("PORTAL_MAP_ZOOM", 16, minimum=1),
    )


@lru_cache(maxsize=1)
def get_settings() -> PortalSettings:
    load_dotenv()
    return load_settings()
