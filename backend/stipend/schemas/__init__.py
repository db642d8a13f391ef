from stipend.schemas.location import SENTINEL, Airport, Coordinates, LocationMatch, TaxiRates
from stipend.schemas.pricing import FlightDates, FlightOffer, FlightQuery, PriceResult, ScrapeResult
from stipend.schemas.stipend import StipendBreakdown
from stipend.schemas.trip import TripRequest

__all__ = [
    "SENTINEL",
    "Airport",
    "Coordinates",
    "FlightDates",
    "FlightOffer",
    "FlightQuery",
    "LocationMatch",
    "PriceResult",
    "ScrapeResult",
    "StipendBreakdown",
    "TaxiRates",
    "TripRequest",
]
