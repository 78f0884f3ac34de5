"""Great-circle distance helpers.

Location search has no geocoder: every distance is measured from a fixed
reference point in central Jakarta.
"""

from __future__ import annotations

import math
from typing import Tuple

EARTH_RADIUS_KM = 6371.0

REFERENCE_POINT: Tuple[float, float] = (-6.2088, 106.8456)


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two coordinates, in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_from_reference(lat: float, lon: float) -> float:
    return distance_km(REFERENCE_POINT[0], REFERENCE_POINT[1], lat, lon)
