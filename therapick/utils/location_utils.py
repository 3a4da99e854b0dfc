# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Therapick project.
# Licensed under the MIT License - see the LICENSE file for details.


from math import radians, cos, sin, sqrt, atan2
from typing import Optional

EARTH_RADIUS_MILES = 3959


def haversine_distance(lat1, lon1, lat2, lon2, radius=EARTH_RADIUS_MILES):
    """
    Calculate the great-circle distance between two points
    on the Earth surface, in miles by default.
    """
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return radius * c


def coords_of(value) -> Optional[tuple]:
    """(lat, lng) from a {"lat", "lng"} mapping, or None when incomplete."""
    if not value:
        return None
    lat = value.get("lat")
    lng = value.get("lng")
    if lat is None or lng is None:
        return None
    return float(lat), float(lng)


def haversine_miles(origin, destination) -> Optional[float]:
    a = coords_of(origin)
    b = coords_of(destination)
    if a is None or b is None:
        return None
    return haversine_distance(a[0], a[1], b[0], b[1])
