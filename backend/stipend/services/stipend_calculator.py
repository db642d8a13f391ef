"""Stipend calculator: combines location, flight and cost-of-living data into one breakdown."""

import logging
from collections.abc import Callable
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal

from pydantic import ValidationError

from stipend.config import settings
from stipend.data.currency import parse_ticket_price
from stipend.data.rates import TRAVEL_STIPEND
from stipend.exceptions import InvalidTripRequest
from stipend.schemas.location import SENTINEL
from stipend.schemas.pricing import FlightDates, FlightQuery, PriceResult
from stipend.schemas.stipend import StipendBreakdown
from stipend.schemas.trip import TripRequest
from stipend.services.cache_service import PersistentCache, make_cache_key
from stipend.services.cost_of_living import CostOfLivingAdjuster
from stipend.services.distance import distance_between, distance_tier, is_local_trip
from stipend.services.flight_pricing import FlightPriceResolver
from stipend.services.local_transport import LocalTransportEstimator
from stipend.services.location_resolver import LocationResolver
from stipend.services.reference_store import ReferenceStore
from stipend.services.trip_dates import compute_flight_dates, parse_trip_date

logger = logging.getLogger(__name__)

NO_FLIGHT_NEEDED = PriceResult(price=0.0, source="No flight needed")

_CENT = Decimal("0.01")


def round_money(value: float) -> float:
    """Round half-up to cents."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def count_nights(first_night: date, nights: int) -> tuple[int, int]:
    """Split nights starting at `first_night` into (weekday, weekend); Saturday and Sunday nights are weekend."""
    weekend = sum(1 for i in range(nights) if (first_night + timedelta(days=i)).weekday() >= 5)
    return nights - weekend, weekend


def meal_allowance(days: int, daily_rate: float) -> float:
    """Full daily rate for the first few days, a reduced ratio after that."""
    rules = TRAVEL_STIPEND.rules
    full_days = min(days, rules.full_meal_days)
    reduced_days = max(days - rules.full_meal_days, 0)
    return daily_rate * full_days + daily_rate * rules.reduced_meal_ratio * reduced_days


class StipendCalculator:
    """Entry point: `await calculate(trip)` returns a StipendBreakdown.

    Only invalid input raises (`InvalidTripRequest`, before any lookup). Every
    unreliable collaborator degrades to a documented default instead.
    """

    def __init__(
        self,
        locations: LocationResolver,
        flight_prices: FlightPriceResolver,
        cost_of_living: CostOfLivingAdjuster,
        local_transport: LocalTransportEstimator,
        cache: PersistentCache,
        store: ReferenceStore | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.locations = locations
        self.flight_prices = flight_prices
        self.cost_of_living = cost_of_living
        self.local_transport = local_transport
        self.cache = cache
        self.store = store
        self._today = today

    def _validate(self, trip: TripRequest) -> tuple[str, str, date, date]:
        origin = (trip.origin or "").strip()
        destination = (trip.destination or "").strip()
        if not origin:
            raise InvalidTripRequest("origin", "origin is required")
        if not destination:
            raise InvalidTripRequest("destination", "destination is required")

        today = self._today()
        start = parse_trip_date(trip.start_date, "start_date", today)
        # yearless end dates roll forward relative to the start date
        end = start if trip.end_date in (None, "") else parse_trip_date(trip.end_date, "end_date", start)
        if end < start:
            raise InvalidTripRequest("end_date", "end date is before start date")
        return origin, destination, start, end

    def _cache_key(self, trip: TripRequest, origin: str, destination: str, start: date, end: date,
                   pre_days: int, post_days: int, ticket: float) -> str:
        costs = TRAVEL_STIPEND.costs
        return make_cache_key(
            trip.conference,
            destination,
            start.isoformat(),
            end.isoformat(),
            origin,
            costs.hotel,
            costs.meals,
            ticket,
            pre_days,
            post_days,
            trip.include_budget,
            settings.stipend_cache_version,
        )

    async def calculate(self, trip: TripRequest) -> StipendBreakdown:
        origin, destination, start, end = self._validate(trip)
        defaults = TRAVEL_STIPEND.conference
        pre_days = defaults.pre_days if trip.buffer_days_before is None else trip.buffer_days_before
        post_days = defaults.post_days if trip.buffer_days_after is None else trip.buffer_days_after
        ticket = parse_ticket_price(trip.ticket_price, TRAVEL_STIPEND.costs.ticket)

        key = self._cache_key(trip, origin, destination, start, end, pre_days, post_days, ticket)
        cached = self.cache.get(key)
        if cached is not None:
            try:
                logger.info(f"Stipend cache hit for {trip.conference} ({origin} -> {destination})")
                return StipendBreakdown(**cached)
            except (TypeError, ValidationError) as e:
                logger.warning(f"Ignoring malformed cached stipend: {e}")

        # 1. Locations and distance
        origin_match = await self.locations.match(origin)
        destination_match = await self.locations.match(destination)
        origin_coords = origin_match.coordinates if origin_match else SENTINEL
        destination_coords = destination_match.coordinates if destination_match else SENTINEL
        distance_km = distance_between(origin_coords, destination_coords)
        local = is_local_trip(origin, destination, origin_coords, destination_coords)
        resolved = local or not (origin_coords.is_sentinel or destination_coords.is_sentinel)

        # 2. Days and nights
        if local:
            pre_days = post_days = 0
        conference_days = (end - start).days + 1
        total_days = conference_days + pre_days + post_days
        nights = max(total_days - 1, 0)
        flight_dates = compute_flight_dates(start, end, pre_days, post_days, local)

        # 3. Flight
        if local:
            flight = NO_FLIGHT_NEEDED
        else:
            flight = await self._price_flight(trip, origin, destination, origin_coords, destination_coords,
                                              distance_km, flight_dates)

        # 4. City-dependent costs
        city = self.locations.qualified_name(destination_match.name) if destination_match else destination
        col = await self.cost_of_living.factor(city)
        costs = TRAVEL_STIPEND.costs
        rules = TRAVEL_STIPEND.rules

        weekday_nights, weekend_nights = count_nights(start - timedelta(days=pre_days), nights)
        if local:
            lodging = 0.0
        else:
            weekday_rate = costs.hotel * col
            weekend_rate = weekday_rate * rules.weekend_rate_multiplier
            lodging = weekday_nights * weekday_rate + weekend_nights * weekend_rate

        basic_meals = meal_allowance(total_days, costs.meals * col)
        entertainment = costs.business_entertainment * conference_days
        transport = await self.local_transport.estimate(city, total_days, col)
        internet = 0.0 if local else rules.international_internet * total_days
        incidentals = costs.incidentals * total_days

        # 5. Round each component, sum, round again
        flight_cost = round_money(flight.price)
        lodging_cost = round_money(lodging)
        basic_meals_cost = round_money(basic_meals)
        entertainment_cost = round_money(entertainment)
        transport_cost = round_money(transport)
        ticket_cost = round_money(ticket)
        internet_cost = round_money(internet)
        incidentals_cost = round_money(incidentals)
        total = round_money(
            flight_cost + lodging_cost + basic_meals_cost + entertainment_cost
            + transport_cost + ticket_cost + internet_cost + incidentals_cost
        )

        breakdown = StipendBreakdown(
            conference=trip.conference,
            origin=origin,
            destination=destination,
            conference_start=start.isoformat(),
            conference_end=end.isoformat(),
            flight_departure=flight_dates.outbound,
            flight_return=flight_dates.inbound,
            flight_cost=flight_cost,
            flight_price_source=flight.source,
            lodging_cost=lodging_cost,
            basic_meals_cost=basic_meals_cost,
            business_entertainment_cost=entertainment_cost,
            meals_cost=round_money(basic_meals_cost + entertainment_cost),
            local_transport_cost=transport_cost,
            ticket_price=ticket_cost,
            internet_data_allowance=internet_cost,
            incidentals_allowance=incidentals_cost,
            total_stipend=total,
            distance_km=round(distance_km, 1),
            distance_tier=distance_tier(distance_km, resolved),
            cost_of_living_factor=col,
            is_local_trip=local,
            conference_days=conference_days,
            total_days=total_days,
            pre_days=pre_days,
            post_days=post_days,
            weekday_nights=weekday_nights,
            weekend_nights=weekend_nights,
        )

        self.cache.set(key, breakdown.model_dump())
        self.cache.save_to_disk()
        logger.info(f"Stipend for {trip.conference} ({origin} -> {destination}): {total}")
        return breakdown

    async def _price_flight(self, trip, origin, destination, origin_coords, destination_coords,
                            distance_km, flight_dates: FlightDates) -> PriceResult:
        query = FlightQuery(
            origin=origin,
            destination=destination,
            origin_code=await self.locations.airport_code(origin),
            destination_code=await self.locations.airport_code(destination),
            origin_coordinates=origin_coords,
            destination_coordinates=destination_coords,
            distance_km=distance_km,
            dates=flight_dates,
            include_budget=trip.include_budget,
        )
        return await self.flight_prices.resolve(query)

    async def calculate_batch(self, trips: list[TripRequest]) -> list[StipendBreakdown]:
        """Price trips one at a time. Invalid requests are logged and skipped."""
        results = []
        for trip in trips:
            try:
                results.append(await self.calculate(trip))
            except InvalidTripRequest as e:
                logger.warning(f"Skipping {trip.conference}: {e}")
        return results

    async def calculate_conferences(self, origin: str) -> list[StipendBreakdown]:
        """Stipends for every conference in the reference store, travelling from `origin`."""
        if self.store is None:
            raise RuntimeError("StipendCalculator has no reference store for conferences")
        conferences = await self.store.conferences()
        trips = [c.model_copy(update={"origin": origin}) for c in conferences]
        logger.info(f"Calculating stipends for {len(trips)} conferences from {origin}")
        return await self.calculate_batch(trips)
