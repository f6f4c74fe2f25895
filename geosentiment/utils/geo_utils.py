"""Geographic utility functions for GeoSentiment.

Coordinate validation and the table of well-known cities used to place
records that arrive without a usable location. No I/O, no external calls.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional, Tuple

from geosentiment.models.records import Location

# (lat, lng, city, country) for major cities with broad geographic spread
_MAJOR_CITIES: List[Tuple[float, float, str, str]] = [
    (40.7128, -74.0060, "New York", "USA"),
    (34.0522, -118.2437, "Los Angeles", "USA"),
    (41.8781, -87.6298, "Chicago", "USA"),
    (51.5074, -0.1278, "London", "UK"),
    (48.8566, 2.3522, "Paris", "France"),
    (52.5200, 13.4050, "Berlin", "Germany"),
    (41.9028, 12.4964, "Rome", "Italy"),
    (40.4168, -3.7038, "Madrid", "Spain"),
    (35.6762, 139.6503, "Tokyo", "Japan"),
    (39.9042, 116.4074, "Beijing", "China"),
    (31.2304, 121.4737, "Shanghai", "China"),
    (19.0760, 72.8777, "Mumbai", "India"),
    (28.6139, 77.2090, "New Delhi", "India"),
    (1.3521, 103.8198, "Singapore", "Singapore"),
    (-33.8688, 151.2093, "Sydney", "Australia"),
    (-37.8136, 144.9631, "Melbourne", "Australia"),
    (55.7558, 37.6176, "Moscow", "Russia"),
    (59.9311, 30.3609, "St. Petersburg", "Russia"),
    (-23.5505, -46.6333, "São Paulo", "Brazil"),
    (-22.9068, -43.1729, "Rio de Janeiro", "Brazil"),
    (19.4326, -99.1332, "Mexico City", "Mexico"),
    (-34.6037, -58.3816, "Buenos Aires", "Argentina"),
    (30.0444, 31.2357, "Cairo", "Egypt"),
    (-26.2041, 28.0473, "Johannesburg", "South Africa"),
    (6.5244, 3.3792, "Lagos", "Nigeria"),
    (25.2048, 55.2708, "Dubai", "UAE"),
    (39.9334, 32.8597, "Ankara", "Turkey"),
    (37.5665, 126.9780, "Seoul", "South Korea"),
    (14.5995, 120.9842, "Manila", "Philippines"),
    (-6.2088, 106.8456, "Jakarta", "Indonesia"),
]


def is_valid_coordinate(lat: Optional[float], lng: Optional[float]) -> bool:
    """Return True if lat/lng are finite numbers within [-90, 90] / [-180, 180]."""
    if lat is None or lng is None:
        return False
    if math.isnan(lat) or math.isnan(lng):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


def known_cities() -> List[Location]:
    """Return the major-city table as fresh Location values."""
    return [Location(lat=lat, lng=lng, city=city, country=country)
            for lat, lng, city, country in _MAJOR_CITIES]


def random_city(rng: Optional[random.Random] = None) -> Location:
    """Pick a random major city as a fallback location.

    Args:
        rng: Random source (a seeded instance makes the result reproducible).
    """
    rng = rng or random.Random()
    lat, lng, city, country = rng.choice(_MAJOR_CITIES)
    return Location(lat=lat, lng=lng, city=city, country=country)
