"""Google Flights client using the fast-flights library.

Round-trip economy searches scraped from Google Flights via protobuf, no API
key required. Prices arrive as display strings in whatever currency Google
chose and are normalized to USD before averaging.
"""

import asyncio
import logging
import statistics
from collections.abc import Callable
from typing import Any

from stipend.config import settings
from stipend.data.currency import normalize_to_usd
from stipend.exceptions import CurrencyNormalizationError
from stipend.schemas.pricing import FlightDates, ScrapeResult

logger = logging.getLogger(__name__)

SOURCE = "Google Flights"

# (origin, destination, dates) -> object exposing `.flights`, each with `.price` and `.is_best`
FetchFn = Callable[[str, str, FlightDates], Any]


def fetch_round_trip(origin: str, destination: str, dates: FlightDates) -> Any:
    """Blocking fast-flights round-trip search."""
    from fast_flights import FlightData, Passengers, get_flights

    return get_flights(
        flight_data=[
            FlightData(date=dates.outbound, from_airport=origin, to_airport=destination),
            FlightData(date=dates.inbound, from_airport=destination, to_airport=origin),
        ],
        trip="round-trip",
        seat="economy",
        passengers=Passengers(adults=1),
    )


def average_price(flights: list[Any]) -> float | None:
    """Mean USD price of the flights Google marks as best, or of all flights if none are.

    Raises CurrencyNormalizationError when any considered price cannot be converted.
    """
    best = [f for f in flights if getattr(f, "is_best", False)]
    considered = best or flights
    prices = [normalize_to_usd(f.price) for f in considered if f.price]
    prices = [p for p in prices if p > 0]
    if not prices:
        return None
    return round(statistics.mean(prices), 2)


class GoogleFlightsClient:
    """One scrape at a time, bounded retries with fixed backoff, never raises."""

    def __init__(
        self,
        fetch: FetchFn = fetch_round_trip,
        max_attempts: int | None = None,
        backoff_seconds: float | None = None,
        timeout_seconds: float | None = None,
    ):
        self._fetch = fetch
        self.max_attempts = settings.scraper_max_attempts if max_attempts is None else max_attempts
        self.backoff_seconds = settings.scraper_backoff_seconds if backoff_seconds is None else backoff_seconds
        self.timeout_seconds = settings.scraper_timeout_seconds if timeout_seconds is None else timeout_seconds
        self._lock = asyncio.Lock()

    async def search(self, origin_code: str, destination_code: str, dates: FlightDates) -> ScrapeResult:
        async with self._lock:
            return await self._search_with_retries(origin_code, destination_code, dates)

    async def _search_with_retries(self, origin: str, destination: str, dates: FlightDates) -> ScrapeResult:
        route = f"{origin}-{destination} {dates.outbound}/{dates.inbound}"
        loop = asyncio.get_running_loop()

        for attempt in range(1, self.max_attempts + 1):
            try:
                result = await asyncio.wait_for(
                    loop.run_in_executor(None, self._fetch, origin, destination, dates),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logger.warning(f"Google Flights timed out for {route} (attempt {attempt}/{self.max_attempts})")
            except Exception as e:
                logger.warning(f"Google Flights search failed for {route} (attempt {attempt}/{self.max_attempts}): {e}")
            else:
                flights = list(getattr(result, "flights", None) or [])
                if not flights:
                    logger.info(f"Google Flights returned no flights for {route}")
                    return ScrapeResult(price=None, source=SOURCE)
                try:
                    price = average_price(flights)
                except CurrencyNormalizationError as e:
                    logger.error(f"Google Flights price for {route} could not be normalized to USD: {e}")
                    return ScrapeResult(price=None, source=SOURCE)
                logger.info(f"Google Flights average for {route}: {price}")
                return ScrapeResult(price=price, source=SOURCE)

            if attempt < self.max_attempts:
                await asyncio.sleep(self.backoff_seconds)

        logger.error(f"Google Flights gave up on {route} after {self.max_attempts} attempts")
        return ScrapeResult(price=None, source=SOURCE)
