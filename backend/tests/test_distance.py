"""Haversine distance, tiers and local-trip detection."""

from stipend.schemas.location import SENTINEL, Coordinates
from stipend.services.distance import distance_between, distance_tier, haversine, is_local_trip

LONDON = Coordinates(lat=51.5074, lng=-0.1278)
PARIS = Coordinates(lat=48.8566, lng=2.3522)
SEOUL = Coordinates(lat=37.5665, lng=126.9780)
SYDNEY = Coordinates(lat=-33.8688, lng=151.2093)


def test_haversine_known_distance():
    assert 340 < haversine(LONDON, PARIS) < 347


def test_haversine_is_symmetric_and_zero_for_same_point():
    assert haversine(SEOUL, SYDNEY) == haversine(SYDNEY, SEOUL)
    assert haversine(SEOUL, SEOUL) == 0.0


def test_distance_with_sentinel_is_zero():
    assert distance_between(SEOUL, SENTINEL) == 0.0
    assert distance_between(SENTINEL, SEOUL) == 0.0
    assert distance_between(LONDON, PARIS) == haversine(LONDON, PARIS)


def test_distance_tiers():
    assert distance_tier(0) == "Local"
    assert distance_tier(343) == "Very Short (<500km)"
    assert distance_tier(500) == "Short (500-1500km)"
    assert distance_tier(2000) == "Medium (1500-4000km)"
    assert distance_tier(4000) == "Long (4000-8000km)"
    assert distance_tier(8000) == "Very Long (>8000km)"
    assert distance_tier(12000) == "Very Long (>8000km)"


def test_unresolved_trip_tier_is_unknown():
    assert distance_tier(0, resolved=False) == "Unknown"
    assert distance_tier(5000, resolved=False) == "Unknown"
    assert distance_tier(0, resolved=True) == "Local"


def test_local_trip_by_text_or_coordinates():
    assert is_local_trip("Seoul, KR", "seoul  kr", SENTINEL, SENTINEL)
    assert is_local_trip("Seoul", "Seoul, KR", SEOUL, SEOUL)
    assert not is_local_trip("Seoul", "Sydney", SEOUL, SYDNEY)
    # two unresolved places are not the same place
    assert not is_local_trip("Atlantis", "Zzzzqx", SENTINEL, SENTINEL)
