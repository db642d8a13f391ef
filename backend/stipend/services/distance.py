"""Great-circle distance, distance tiers and the local-trip test."""

import math

from stipend.schemas.location import Coordinates

EARTH_RADIUS_KM = 6371.0

# (upper bound in km, label); the last tier is open-ended
DISTANCE_TIERS: list[tuple[float, str]] = [
    (500.0, "Very Short (<500km)"),
    (1500.0, "Short (500-1500km)"),
    (4000.0, "Medium (1500-4000km)"),
    (8000.0, "Long (4000-8000km)"),
]
LOCAL_TIER = "Local"
UNKNOWN_TIER = "Unknown"
LONGEST_TIER = "Very Long (>8000km)"


def haversine(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance in km."""
    lat1, lng1 = math.radians(a.lat), math.radians(a.lng)
    lat2, lng2 = math.radians(b.lat), math.radians(b.lng)
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def distance_between(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance, or 0.0 when either location failed to resolve."""
    if a.is_sentinel or b.is_sentinel:
        return 0.0
    return haversine(a, b)


def distance_tier(km: float, resolved: bool = True) -> str:
    """Reporting label for a trip distance; `resolved=False` when a side fell back to the sentinel."""
    if not resolved:
        return UNKNOWN_TIER
    if km <= 0:
        return LOCAL_TIER
    for upper, label in DISTANCE_TIERS:
        if km < upper:
            return label
    return LONGEST_TIER


def normalize_location(text: str) -> str:
    return " ".join(text.replace(",", " ").lower().split())


def is_local_trip(
    origin: str,
    destination: str,
    origin_coords: Coordinates,
    destination_coords: Coordinates,
) -> bool:
    if normalize_location(origin) == normalize_location(destination):
        return True
    if origin_coords.is_sentinel or destination_coords.is_sentinel:
        return False
    return origin_coords == destination_coords
