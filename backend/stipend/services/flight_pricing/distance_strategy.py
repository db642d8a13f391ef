from stipend.config import settings
from stipend.schemas.pricing import FlightQuery, PriceResult
from stipend.services.flight_pricing.base import PriceStrategy


class DistanceStrategy(PriceStrategy):
    """Last resort: a flat USD rate per great-circle km. Never fails."""

    name = "distance"

    def __init__(self, price_per_km: float | None = None):
        self.price_per_km = settings.distance_price_per_km if price_per_km is None else price_per_km

    async def resolve(self, query: FlightQuery) -> PriceResult:
        km = query.distance_km
        return PriceResult(
            price=round(km * self.price_per_km, 2),
            source=f"Distance-based estimate ({km:.0f} km)",
        )
