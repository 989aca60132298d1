"""
Settings Management for Journey Map

Runtime knobs live in settings.json at the project root. Environment
variables override the file so deployments can tune the API without
editing it.

    JOURNEYMAP_CACHE_SECONDS  - freshness window of the response cache
    JOURNEYMAP_LOG_LEVEL      - log level for the journeymap logger
"""

import json
import logging
import os

from . import paths
from .constants import CACHE_DURATION_SECONDS, DEFAULT_LIMIT

logger = logging.getLogger("journeymap")

# Default settings
DEFAULT_SETTINGS = {
    "cache_duration_seconds": CACHE_DURATION_SECONDS,
    "default_limit": DEFAULT_LIMIT,
    "log_level": "INFO",
}

ENV_OVERRIDES = {
    "JOURNEYMAP_CACHE_SECONDS": ("cache_duration_seconds", float),
    "JOURNEYMAP_LOG_LEVEL": ("log_level", str),
}


def load_settings() -> dict:
    """
    Load settings from settings.json, then apply environment overrides.
    Returns default settings if the file doesn't exist.
    """
    settings = DEFAULT_SETTINGS.copy()

    try:
        if paths.SETTINGS_PATH.exists():
            with open(paths.SETTINGS_PATH, 'r', encoding='utf-8') as f:
                settings.update(json.load(f))
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Could not load settings: {e}")

    for env_name, (key, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw is None or raw == "":
            continue
        try:
            settings[key] = cast(raw)
        except ValueError:
            logger.warning(f"Ignoring invalid {env_name}={raw!r}")

    return settings


def get_cache_duration() -> float:
    """Freshness window of the response cache, in seconds."""
    return float(load_settings()["cache_duration_seconds"])


def get_default_limit() -> int:
    """Default page size for the countries listing."""
    return int(load_settings()["default_limit"])
