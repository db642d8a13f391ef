import logging

from stipend.schemas.pricing import FlightQuery, PriceResult
from stipend.services.flight_pricing.base import PriceStrategy
from stipend.services.google_flights_client import GoogleFlightsClient

logger = logging.getLogger(__name__)


class ScraperStrategy(PriceStrategy):
    name = "google_flights"

    def __init__(self, client: GoogleFlightsClient):
        self.client = client

    async def resolve(self, query: FlightQuery) -> PriceResult | None:
        if not query.origin_code or not query.destination_code:
            logger.info(f"No airport codes for {query.origin} -> {query.destination}, skipping scraper")
            return None
        result = await self.client.search(query.origin_code, query.destination_code, query.dates)
        if result.price is None or result.price <= 0:
            return None
        return PriceResult(price=result.price, source=result.source)
