"""Flight price resolution: an ordered chain of strategies behind a shared cache."""

import logging
from datetime import timedelta

from pydantic import ValidationError

from stipend.config import settings
from stipend.schemas.pricing import FlightQuery, PriceResult
from stipend.services.cache_service import PersistentCache, make_cache_key
from stipend.services.flight_pricing.base import PriceStrategy

logger = logging.getLogger(__name__)

NO_PRICE = PriceResult(price=0.0, source="No price available")


class FlightPriceResolver:
    """Tries each strategy in order; the first non-null result wins.

    Every strategy result is cached per strategy for `ttl`. A failing or
    raising strategy only moves the chain along, so `resolve` always returns
    a price.
    """

    def __init__(
        self,
        strategies: list[PriceStrategy],
        cache: PersistentCache,
        ttl: timedelta | None = None,
    ):
        self.strategies = strategies
        self.cache = cache
        self.ttl = ttl if ttl is not None else timedelta(hours=settings.flight_cache_ttl_hours)

    @staticmethod
    def cache_key(strategy: PriceStrategy, query: FlightQuery) -> str:
        return make_cache_key(
            strategy.name,
            strategy.cache_version,
            query.origin,
            query.destination,
            query.dates.outbound,
            query.dates.inbound,
            query.include_budget,
        )

    async def resolve(self, query: FlightQuery) -> PriceResult:
        for strategy in self.strategies:
            key = self.cache_key(strategy, query)
            cached = self._cached(key)
            if cached is not None:
                logger.info(f"Flight price cache hit ({strategy.name}) for {query.origin} -> {query.destination}")
                return cached

            try:
                result = await strategy.resolve(query)
            except Exception as e:
                logger.error(f"Flight price strategy {strategy.name} failed for {query.origin} -> {query.destination}: {e}")
                continue

            if result is None:
                logger.info(f"Flight price strategy {strategy.name} had no price for {query.origin} -> {query.destination}")
                continue

            self.cache.set(key, result.model_dump())
            self.cache.save_to_disk()
            return result

        logger.warning(f"No flight price for {query.origin} -> {query.destination}")
        return NO_PRICE

    def _cached(self, key: str) -> PriceResult | None:
        raw = self.cache.get(key, max_age=self.ttl)
        if raw is None:
            return None
        try:
            return PriceResult(**raw)
        except (TypeError, ValidationError) as e:
            logger.warning(f"Ignoring malformed cached flight price: {e}")
            return None
