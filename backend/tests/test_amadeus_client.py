"""AmadeusClient against httpx.MockTransport, and AmadeusStrategy carrier filtering."""

import asyncio

import httpx

from stipend.schemas.location import Coordinates
from stipend.schemas.pricing import FlightDates, FlightOffer, FlightQuery
from stipend.services.amadeus_client import AmadeusClient
from stipend.services.flight_pricing.amadeus_strategy import AmadeusStrategy, filter_major_carriers


def _offer(total: str, validating: str, *itineraries: list[str]) -> dict:
    return {
        "price": {"total": total, "currency": "USD"},
        "validatingAirlineCodes": [validating],
        "itineraries": [{"segments": [{"carrierCode": c} for c in carriers]} for carriers in itineraries],
    }


class AmadeusStub:
    def __init__(self, offers: list[dict], status: int = 200):
        self.offers = offers
        self.status = status
        self.token_calls = 0
        self.search_params: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/security/oauth2/token":
            self.token_calls += 1
            return httpx.Response(200, json={"access_token": f"tok-{self.token_calls}", "expires_in": 1799})
        if request.url.path == "/v2/shopping/flight-offers":
            self.search_params.append(dict(request.url.params))
            assert request.headers["Authorization"] == f"Bearer tok-{self.token_calls}"
            return httpx.Response(self.status, json={"data": self.offers})
        return httpx.Response(404)


def _client(stub, clock=None) -> AmadeusClient:
    kwargs = {"clock": clock} if clock else {}
    return AmadeusClient(
        client_id="id",
        client_secret="secret",
        base_url="https://amadeus.test",
        transport=httpx.MockTransport(stub),
        **kwargs,
    )


def test_search_round_trip_sends_expected_params():
    stub = AmadeusStub([_offer("812.40", "KE", ["KE"], ["KE"])])
    client = _client(stub)

    async def run():
        try:
            return await client.search_round_trip("SIN", "ICN", "2026-05-07", "2026-05-12")
        finally:
            await client.close()

    offers = asyncio.run(run())
    assert offers == [FlightOffer(total_price=812.40, carrier_code="KE", segments=[["KE"], ["KE"]])]
    params = stub.search_params[0]
    assert params["originLocationCode"] == "SIN"
    assert params["destinationLocationCode"] == "ICN"
    assert params["departureDate"] == "2026-05-07"
    assert params["returnDate"] == "2026-05-12"
    assert params["currencyCode"] == "USD"
    assert params["travelClass"] == "ECONOMY"
    assert params["maxPrice"] == "5000"
    assert params["adults"] == "1"


def test_token_is_reused_until_close_to_expiry(clock):
    stub = AmadeusStub([])
    client = _client(stub, clock)

    async def run():
        first = await client.get_token()
        clock.advance(seconds=1700)
        second = await client.get_token()
        clock.advance(seconds=60)  # past expires_in - 60
        third = await client.get_token()
        await client.close()
        return first, second, third

    first, second, third = asyncio.run(run())
    assert first == second == "tok-1"
    assert third == "tok-2"
    assert stub.token_calls == 2


def test_http_error_returns_no_offers():
    stub = AmadeusStub([], status=500)
    client = _client(stub)

    async def run():
        offers = await client.search_round_trip("SIN", "ICN", "2026-05-07", "2026-05-12")
        await client.close()
        return offers

    assert asyncio.run(run()) == []


def test_not_configured_without_credentials():
    assert not AmadeusClient(client_id="", client_secret="").configured


def _query(include_budget: bool = False) -> FlightQuery:
    return FlightQuery(
        origin="Singapore",
        destination="Seoul, KR",
        origin_code="SIN",
        destination_code="ICN",
        origin_coordinates=Coordinates(lat=1.3521, lng=103.8198),
        destination_coordinates=Coordinates(lat=37.5665, lng=126.9780),
        distance_km=4670.0,
        dates=FlightDates(outbound="2026-05-07", inbound="2026-05-12"),
        include_budget=include_budget,
    )


MIXED_OFFERS = [
    _offer("1000.00", "KE", ["KE"], ["KE"]),
    _offer("400.00", "7C", ["7C"], ["7C"]),
    # validating carrier is Star Alliance but one segment is not
    _offer("800.00", "SQ", ["SQ", "TR"], ["SQ"]),
]


def _strategy_price(offers, include_budget):
    client = _client(AmadeusStub(offers))

    async def run():
        result = await AmadeusStrategy(client).resolve(_query(include_budget))
        await client.close()
        return result

    return asyncio.run(run())


def test_strategy_keeps_only_alliance_itineraries():
    result = _strategy_price(MIXED_OFFERS, include_budget=False)
    assert result.price == 1000.0
    assert result.source == "Amadeus API"


def test_strategy_with_budget_uses_every_offer():
    result = _strategy_price(MIXED_OFFERS, include_budget=True)
    assert result.price == round((1000 + 400 + 800) / 3, 2)


def test_filter_falls_back_to_all_offers():
    budget_only = [
        FlightOffer(total_price=300, carrier_code="7C", segments=[["7C"]]),
        FlightOffer(total_price=350, carrier_code="TR", segments=[["TR"]]),
    ]
    assert filter_major_carriers(budget_only) == budget_only


def test_strategy_fails_without_credentials_or_codes():
    unconfigured = AmadeusStrategy(AmadeusClient(client_id="", client_secret=""))
    assert asyncio.run(unconfigured.resolve(_query())) is None

    client = _client(AmadeusStub(MIXED_OFFERS))
    no_codes = _query().model_copy(update={"destination_code": None})
    assert asyncio.run(AmadeusStrategy(client).resolve(no_codes)) is None


def test_strategy_with_no_offers_fails():
    assert _strategy_price([], include_budget=False) is None
