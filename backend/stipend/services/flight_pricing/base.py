from abc import ABC, abstractmethod

from stipend.config import settings
from stipend.schemas.pricing import FlightQuery, PriceResult


class PriceStrategy(ABC):
    """One source of a round-trip flight price.

    `resolve` returns None when the source has no answer; exceptions are
    treated the same way by the resolver.
    """

    name: str = "strategy"

    @property
    def cache_version(self) -> str:
        return settings.flight_cache_version

    @abstractmethod
    async def resolve(self, query: FlightQuery) -> PriceResult | None: ...
