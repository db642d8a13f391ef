"""FlightPriceResolver: strategy order, failure absorption, caching."""

import asyncio
from datetime import timedelta

from stipend.schemas.location import SENTINEL, Coordinates
from stipend.schemas.pricing import FlightDates, FlightQuery, PriceResult
from stipend.services.cache_service import PersistentCache
from stipend.services.flight_pricing import NO_PRICE, DistanceStrategy, FlightPriceResolver


def _query(**overrides) -> FlightQuery:
    fields = dict(
        origin="Singapore",
        destination="Seoul, KR",
        origin_code="SIN",
        destination_code="ICN",
        origin_coordinates=Coordinates(lat=1.3521, lng=103.8198),
        destination_coordinates=Coordinates(lat=37.5665, lng=126.9780),
        distance_km=4670.4,
        dates=FlightDates(outbound="2026-05-07", inbound="2026-05-12"),
    )
    fields.update(overrides)
    return FlightQuery(**fields)


def _resolver(strategies, tmp_path, clock=None):
    cache = PersistentCache("flight_prices", cache_dir=tmp_path, **({"clock": clock} if clock else {}))
    return FlightPriceResolver(strategies, cache, ttl=timedelta(hours=6))


def test_first_successful_strategy_wins(tmp_path, strategy_factory):
    scraper = strategy_factory("google_flights", PriceResult(price=650.0, source="Google Flights"))
    api = strategy_factory("amadeus", PriceResult(price=900.0, source="Amadeus API"))
    result = asyncio.run(_resolver([scraper, api], tmp_path).resolve(_query()))
    assert result == PriceResult(price=650.0, source="Google Flights")
    assert api.queries == []


def test_failures_and_exceptions_fall_through(tmp_path, strategy_factory):
    scraper = strategy_factory("google_flights", error=RuntimeError("blocked"))
    api = strategy_factory("amadeus", None)
    resolver = _resolver([scraper, api, DistanceStrategy(price_per_km=0.2)], tmp_path)
    result = asyncio.run(resolver.resolve(_query()))
    assert result.price == 934.08
    assert result.source == "Distance-based estimate (4670 km)"
    assert len(scraper.queries) == len(api.queries) == 1


def test_all_strategies_failing_still_yields_a_price(tmp_path, strategy_factory):
    strategies = [strategy_factory("a", error=ValueError("x")), strategy_factory("b", None)]
    result = asyncio.run(_resolver(strategies, tmp_path).resolve(_query()))
    assert result == NO_PRICE
    assert result.price == 0.0


def test_cached_result_skips_strategy(tmp_path, strategy_factory):
    scraper = strategy_factory("google_flights", PriceResult(price=650.0, source="Google Flights"))
    resolver = _resolver([scraper], tmp_path)
    asyncio.run(resolver.resolve(_query()))
    again = asyncio.run(resolver.resolve(_query()))
    assert again.price == 650.0
    assert len(scraper.queries) == 1
    # results are flushed to disk right away
    assert (tmp_path / "flight_prices.json").exists()


def test_cache_entries_expire_after_six_hours(tmp_path, clock, strategy_factory):
    scraper = strategy_factory("google_flights", PriceResult(price=650.0, source="Google Flights"))
    resolver = _resolver([scraper], tmp_path, clock)
    asyncio.run(resolver.resolve(_query()))
    clock.advance(hours=6, minutes=1)
    asyncio.run(resolver.resolve(_query()))
    assert len(scraper.queries) == 2


def test_cache_key_depends_on_dates_and_budget(tmp_path, strategy_factory):
    scraper = strategy_factory("google_flights", PriceResult(price=650.0, source="Google Flights"))
    resolver = _resolver([scraper], tmp_path)
    asyncio.run(resolver.resolve(_query()))
    asyncio.run(resolver.resolve(_query(include_budget=True)))
    asyncio.run(resolver.resolve(_query(dates=FlightDates(outbound="2026-05-08", inbound="2026-05-12"))))
    assert len(scraper.queries) == 3


def test_distance_strategy_with_zero_distance():
    query = _query(destination_coordinates=SENTINEL, distance_km=0.0)
    result = asyncio.run(DistanceStrategy(price_per_km=0.2).resolve(query))
    assert result == PriceResult(price=0.0, source="Distance-based estimate (0 km)")
