"""Amadeus API client: OAuth2 client-credentials token plus round-trip flight offers."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import httpx

from stipend.config import settings
from stipend.schemas.pricing import FlightOffer

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"
OFFERS_PATH = "/v2/shopping/flight-offers"
TOKEN_EXPIRY_BUFFER_SECONDS = 60
MAX_OFFERS = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AmadeusClient:
    """Adapter for the Amadeus Self-Service flight offers API."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_price: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.client_id = settings.amadeus_client_id if client_id is None else client_id
        self.client_secret = settings.amadeus_client_secret if client_secret is None else client_secret
        self.base_url = base_url or settings.amadeus_base_url
        self.timeout = settings.amadeus_timeout_seconds if timeout is None else timeout
        self.max_price = settings.amadeus_max_price if max_price is None else max_price
        self._transport = transport
        self._clock = clock
        self._token: str | None = None
        self._token_expires: datetime | None = None
        self._client: httpx.AsyncClient | None = None

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def get_token(self) -> str:
        """Return a bearer token, requesting a new one within 60 s of expiry."""
        if self._token and self._token_expires and self._clock() < self._token_expires:
            return self._token

        client = await self._get_client()
        for attempt in range(3):
            try:
                resp = await client.post(
                    TOKEN_PATH,
                    data={
                        "grant_type": "client_credentials",
                        "client_id": self.client_id,
                        "client_secret": self.client_secret,
                    },
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
                resp.raise_for_status()
                data = resp.json()
                self._token = data["access_token"]
                self._token_expires = self._clock() + timedelta(
                    seconds=data.get("expires_in", 1799) - TOKEN_EXPIRY_BUFFER_SECONDS
                )
                logger.info("Amadeus token refreshed")
                return self._token
            except httpx.HTTPStatusError as e:
                if e.response.status_code == 429 and attempt < 2:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise

        raise RuntimeError("Amadeus token request kept hitting the rate limit")

    async def search_round_trip(
        self,
        origin: str,
        destination: str,
        date_out: str,
        date_in: str,
    ) -> list[FlightOffer]:
        """Economy round-trip offers in USD. Returns [] on any HTTP failure."""
        try:
            token = await self.get_token()
            client = await self._get_client()
            resp = await client.get(
                OFFERS_PATH,
                params={
                    "originLocationCode": origin,
                    "destinationLocationCode": destination,
                    "departureDate": date_out,
                    "returnDate": date_in,
                    "adults": 1,
                    "currencyCode": "USD",
                    "max": MAX_OFFERS,
                    "nonStop": "false",
                    "travelClass": "ECONOMY",
                    "maxPrice": self.max_price,
                },
                headers={"Authorization": f"Bearer {token}"},
            )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Amadeus search error {origin}->{destination}: {e.response.status_code}")
            return []
        except httpx.HTTPError as e:
            logger.error(f"Amadeus request error {origin}->{destination}: {e}")
            return []

        offers = []
        for raw in data.get("data", []):
            offer = self._parse_offer(raw)
            if offer:
                offers.append(offer)
        logger.info(f"Amadeus returned {len(offers)} offers for {origin}->{destination}")
        return offers

    @staticmethod
    def _parse_offer(offer: dict) -> FlightOffer | None:
        try:
            total = float(offer["price"]["total"])
        except (KeyError, TypeError, ValueError):
            return None

        validating = offer.get("validatingAirlineCodes") or []
        segments = [
            [seg.get("carrierCode", "") for seg in itin.get("segments", [])]
            for itin in offer.get("itineraries", [])
        ]
        carrier = validating[0] if validating else (segments[0][0] if segments and segments[0] else "")
        return FlightOffer(total_price=total, carrier_code=carrier, segments=segments)

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
