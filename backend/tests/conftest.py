"""Shared fixtures: isolated cache directory, no real flight sources."""

from datetime import datetime, timedelta, timezone

import pytest

from stipend.config import settings
from stipend.schemas.pricing import FlightQuery, PriceResult
from stipend.services.flight_pricing.base import PriceStrategy
from stipend.services.reference_store import InMemoryReferenceStore


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Point the caches at a temp dir and make sure no real Amadeus credentials leak in."""
    monkeypatch.setattr(settings, "cache_dir", str(tmp_path / "cache"))
    monkeypatch.setattr(settings, "amadeus_client_id", "")
    monkeypatch.setattr(settings, "amadeus_client_secret", "")
    yield


@pytest.fixture
def store():
    return InMemoryReferenceStore()


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


class FakeStrategy(PriceStrategy):
    """Returns a fixed result (or raises) and records every query it sees."""

    def __init__(self, name: str, result: PriceResult | None = None, error: Exception | None = None):
        self.name = name
        self.result = result
        self.error = error
        self.queries: list[FlightQuery] = []

    async def resolve(self, query: FlightQuery) -> PriceResult | None:
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def strategy_factory():
    return FakeStrategy
