import logging
import statistics

from stipend.data.airline_alliances import get_alliance_label, is_major_carrier
from stipend.schemas.pricing import FlightOffer, FlightQuery, PriceResult
from stipend.services.amadeus_client import AmadeusClient
from stipend.services.flight_pricing.base import PriceStrategy

logger = logging.getLogger(__name__)

SOURCE = "Amadeus API"


def is_major_alliance_offer(offer: FlightOffer) -> bool:
    """Validating carrier and every segment flown by a Star Alliance, oneworld or SkyTeam member."""
    if not is_major_carrier(offer.carrier_code):
        return False
    return all(is_major_carrier(code) for itinerary in offer.segments for code in itinerary)


def filter_major_carriers(offers: list[FlightOffer]) -> list[FlightOffer]:
    major = [o for o in offers if is_major_alliance_offer(o)]
    if not major:
        logger.info(f"No alliance carriers among {len(offers)} offers, using all offers")
        return offers
    labels = sorted({get_alliance_label(o.carrier_code) for o in major})
    logger.info(f"Kept {len(major)}/{len(offers)} offers from {', '.join(labels)}")
    return major


class AmadeusStrategy(PriceStrategy):
    name = "amadeus"

    def __init__(self, client: AmadeusClient):
        self.client = client

    async def resolve(self, query: FlightQuery) -> PriceResult | None:
        if not self.client.configured:
            logger.info("Amadeus credentials not configured, skipping")
            return None
        if not query.origin_code or not query.destination_code:
            return None

        offers = await self.client.search_round_trip(
            query.origin_code, query.destination_code, query.dates.outbound, query.dates.inbound
        )
        if not query.include_budget:
            offers = filter_major_carriers(offers)
        prices = [o.total_price for o in offers if o.total_price > 0]
        if not prices:
            return None
        return PriceResult(price=round(statistics.mean(prices), 2), source=SOURCE)
