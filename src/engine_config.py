"""
Engine configuration.

Module-level constants shared by the grouping, hotspot and metrics modules.
Each value can be overridden from the environment (or a local .env file):

    CIVIC_GROUP_RADIUS_M        merge radius for duplicate reports (25 m)
    CIVIC_HOTSPOT_RADIUS_M      coarser radius used for hotspots (50 m)
    CIVIC_HOTSPOT_MIN_MEMBERS   members besides the representative (2)
    CIVIC_HOTSPOT_TOP_N         hotspots shown in the map sidebar (5)
    CIVIC_HIGH_PRIORITY_FLOOR   priority counted as a high-priority alert (4)
    CIVIC_RESOLVED_WINDOW_DAYS  look-back for "resolved this week" (7)
    CIVIC_LOG_DIR               folder for the daily log file (logs)
"""

import os

from dotenv import load_dotenv

from engine_utils.exceptions import ConfigError

load_dotenv()

# Earth radius used by the haversine formula. Not configurable.
EARTH_RADIUS_M = 6_371_000.0


def _env_number(name: str, default, cast=float):
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f'{name} must be a {cast.__name__}, got {raw!r}')
    if value <= 0:
        raise ConfigError(f'{name} must be positive, got {raw!r}')
    return value


GROUP_RADIUS_M = _env_number('CIVIC_GROUP_RADIUS_M', 25.0)
HOTSPOT_RADIUS_M = _env_number('CIVIC_HOTSPOT_RADIUS_M', 50.0)
HOTSPOT_MIN_MEMBERS = _env_number('CIVIC_HOTSPOT_MIN_MEMBERS', 2, int)
HOTSPOT_TOP_N = _env_number('CIVIC_HOTSPOT_TOP_N', 5, int)
HIGH_PRIORITY_FLOOR = _env_number('CIVIC_HIGH_PRIORITY_FLOOR', 4, int)
RESOLVED_WINDOW_DAYS = _env_number('CIVIC_RESOLVED_WINDOW_DAYS', 7, int)
LOG_DIR = os.getenv('CIVIC_LOG_DIR', 'logs')
