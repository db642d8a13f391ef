import logging

from stipend.data.rates import TRAVEL_STIPEND
from stipend.services.reference_store import ReferenceStore

logger = logging.getLogger(__name__)


class LocalTransportEstimator:
    """Daily taxi cost at the destination, from city taxi fares when known."""

    def __init__(self, store: ReferenceStore):
        self.store = store

    async def estimate(self, city: str, days: int, col_factor: float) -> float:
        rates = await self.store.taxi_rates(city)
        if rates is None:
            logger.info(f"No taxi data for {city!r}, using the flat daily transport rate")
            return TRAVEL_STIPEND.costs.transport * days * col_factor

        per_trip = rates.base_fare + rates.per_km_rate * rates.typical_trip_km
        return per_trip * TRAVEL_STIPEND.rules.taxi_trips_per_day * days * col_factor
