"""Great-circle distance between report locations."""

import numpy as np

from engine_config import EARTH_RADIUS_M
from report_model import Location


def haversine_m(lat1, lng1, lat2, lng2) -> np.ndarray:
    """Haversine distance in metres; broadcasts over scalars or arrays of degrees."""
    a = np.deg2rad(lat1)
    c = np.deg2rad(lat2)
    dlat = c - a
    dlng = np.deg2rad(lng2) - np.deg2rad(lng1)
    sin2 = np.sin(dlat / 2.0) ** 2 + np.cos(a) * np.cos(c) * np.sin(dlng / 2.0) ** 2
    sin2 = np.clip(sin2, 0.0, 1.0)
    return 2.0 * EARTH_RADIUS_M * np.arctan2(np.sqrt(sin2), np.sqrt(1.0 - sin2))


def calculate_distance(point1: Location, point2: Location) -> float:
    return float(haversine_m(point1.lat, point1.lng, point2.lat, point2.lng))
