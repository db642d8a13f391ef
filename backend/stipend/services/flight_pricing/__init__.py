from stipend.services.flight_pricing.amadeus_strategy import AmadeusStrategy
from stipend.services.flight_pricing.base import PriceStrategy
from stipend.services.flight_pricing.distance_strategy import DistanceStrategy
from stipend.services.flight_pricing.resolver import NO_PRICE, FlightPriceResolver
from stipend.services.flight_pricing.scraper_strategy import ScraperStrategy

__all__ = [
    "AmadeusStrategy",
    "DistanceStrategy",
    "FlightPriceResolver",
    "NO_PRICE",
    "PriceStrategy",
    "ScraperStrategy",
]
