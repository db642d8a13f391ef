from pydantic import BaseModel, Field

from stipend.schemas.location import Coordinates


class PriceResult(BaseModel):
    price: float = Field(ge=0.0)
    source: str = Field(min_length=1)


class FlightDates(BaseModel):
    outbound: str  # YYYY-MM-DD
    inbound: str   # YYYY-MM-DD


class FlightQuery(BaseModel):
    """Everything a price strategy may need for one round trip."""
    origin: str
    destination: str
    origin_code: str | None = None
    destination_code: str | None = None
    origin_coordinates: Coordinates
    destination_coordinates: Coordinates
    distance_km: float = Field(ge=0.0)
    dates: FlightDates
    include_budget: bool = False


class ScrapeResult(BaseModel):
    price: float | None = None
    source: str


class FlightOffer(BaseModel):
    total_price: float
    carrier_code: str
    # carrier codes per itinerary (outbound, return), one per segment
    segments: list[list[str]] = []
