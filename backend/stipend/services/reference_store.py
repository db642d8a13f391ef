"""Reference data store: city coordinates, airports, cost of living, taxi fares, conferences.

Two interchangeable implementations share the `ReferenceStore` protocol: an
in-memory store seeded from `stipend.data.seed` and a SQL store reading the
reference tables through an async SQLAlchemy session.
"""

import logging
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stipend.data import seed
from stipend.models.reference import AirportCode, CityCoordinate, Conference, CostOfLiving, TaxiFare
from stipend.schemas.location import Airport, Coordinates, TaxiRates
from stipend.schemas.trip import TripRequest

logger = logging.getLogger(__name__)


class ReferenceStore(Protocol):
    async def city_coordinates(self, city: str) -> Coordinates | None: ...

    async def all_cities(self) -> list[tuple[str, Coordinates]]: ...

    async def airports(self) -> list[Airport]: ...

    async def airport_codes(self, city: str) -> list[str]: ...

    async def cost_of_living(self, city: str) -> float | None: ...

    async def taxi_rates(self, city: str) -> TaxiRates | None: ...

    async def conferences(self) -> list[TripRequest]: ...


def _conference_request(
    name: str,
    location: str,
    start: str,
    end: str | None,
    ticket: str | None,
    category: str | None = None,
    description: str | None = None,
) -> TripRequest:
    return TripRequest(
        conference=name,
        destination=location,
        start_date=start,
        end_date=end,
        ticket_price=ticket,
        category=category,
        description=description,
    )


class InMemoryReferenceStore:
    """Reference store over plain dicts, seeded from `stipend.data.seed` by default."""

    def __init__(
        self,
        cities: list[tuple[str, float, float]] | None = None,
        airports: list[tuple[str, str, str, float, float]] | None = None,
        cost_of_living: dict[str, float | None] | None = None,
        taxi_rates: dict[str, tuple[float, float, float]] | None = None,
        conferences: list[tuple[str, str, str, str | None, str | None]] | None = None,
    ):
        city_rows = seed.SEED_CITIES if cities is None else cities
        # dicts keep insertion order, so table order is stable
        self._cities: dict[str, Coordinates] = {
            name: Coordinates(lat=lat, lng=lng) for name, lat, lng in city_rows
        }
        self._airports = [
            Airport(code=code, city=city, country=country, coordinates=Coordinates(lat=lat, lng=lng))
            for code, city, country, lat, lng in (seed.SEED_AIRPORTS if airports is None else airports)
        ]
        self._cost_of_living = dict(seed.SEED_COST_OF_LIVING if cost_of_living is None else cost_of_living)
        self._taxi_rates = {
            city: TaxiRates(base_fare=base, per_km_rate=per_km, typical_trip_km=km)
            for city, (base, per_km, km) in (seed.SEED_TAXI_RATES if taxi_rates is None else taxi_rates).items()
        }
        self._conferences = list(seed.SEED_CONFERENCES if conferences is None else conferences)

    async def city_coordinates(self, city: str) -> Coordinates | None:
        return self._cities.get(city)

    async def all_cities(self) -> list[tuple[str, Coordinates]]:
        return list(self._cities.items())

    async def airports(self) -> list[Airport]:
        return list(self._airports)

    async def airport_codes(self, city: str) -> list[str]:
        wanted = city.strip().lower()
        return [a.code for a in self._airports if a.city.lower() == wanted]

    async def cost_of_living(self, city: str) -> float | None:
        return self._cost_of_living.get(city)

    async def taxi_rates(self, city: str) -> TaxiRates | None:
        return self._taxi_rates.get(city)

    async def conferences(self) -> list[TripRequest]:
        return [_conference_request(*row) for row in self._conferences]


class SqlReferenceStore:
    """Reference store backed by the SQL reference tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def seed_if_empty(self) -> bool:
        """Populate the reference tables from seed data when they hold no cities."""
        async with self._session_factory() as db:
            count = (await db.execute(select(func.count()).select_from(CityCoordinate))).scalar_one()
            if count:
                return False

            db.add_all(CityCoordinate(city=name, lat=lat, lng=lng) for name, lat, lng in seed.SEED_CITIES)
            db.add_all(
                AirportCode(code=code, city=city, country=country, lat=lat, lng=lng)
                for code, city, country, lat, lng in seed.SEED_AIRPORTS
            )
            db.add_all(CostOfLiving(city=city, cost_index=index) for city, index in seed.SEED_COST_OF_LIVING.items())
            db.add_all(
                TaxiFare(city=city, base_fare=base, per_km_rate=per_km, typical_trip_km=km)
                for city, (base, per_km, km) in seed.SEED_TAXI_RATES.items()
            )
            db.add_all(
                Conference(conference=name, location=location, start_date=start, end_date=end, ticket_price=ticket)
                for name, location, start, end, ticket in seed.SEED_CONFERENCES
            )
            await db.commit()
            logger.info(f"Seeded reference tables with {len(seed.SEED_CITIES)} cities")
            return True

    async def city_coordinates(self, city: str) -> Coordinates | None:
        async with self._session_factory() as db:
            row = (
                await db.execute(select(CityCoordinate).where(CityCoordinate.city == city))
            ).scalar_one_or_none()
        if row is None:
            return None
        return Coordinates(lat=row.lat, lng=row.lng)

    async def all_cities(self) -> list[tuple[str, Coordinates]]:
        async with self._session_factory() as db:
            rows = (await db.execute(select(CityCoordinate).order_by(CityCoordinate.id))).scalars().all()
        return [(r.city, Coordinates(lat=r.lat, lng=r.lng)) for r in rows]

    async def airports(self) -> list[Airport]:
        async with self._session_factory() as db:
            rows = (await db.execute(select(AirportCode).order_by(AirportCode.id))).scalars().all()
        return [
            Airport(code=r.code, city=r.city, country=r.country, coordinates=Coordinates(lat=r.lat, lng=r.lng))
            for r in rows
        ]

    async def airport_codes(self, city: str) -> list[str]:
        async with self._session_factory() as db:
            result = await db.execute(
                select(AirportCode.code)
                .where(func.lower(AirportCode.city) == city.strip().lower())
                .order_by(AirportCode.id)
            )
            return list(result.scalars().all())

    async def cost_of_living(self, city: str) -> float | None:
        async with self._session_factory() as db:
            row = (await db.execute(select(CostOfLiving).where(CostOfLiving.city == city))).scalar_one_or_none()
        return row.cost_index if row else None

    async def taxi_rates(self, city: str) -> TaxiRates | None:
        async with self._session_factory() as db:
            row = (await db.execute(select(TaxiFare).where(TaxiFare.city == city))).scalar_one_or_none()
        if row is None:
            return None
        return TaxiRates(base_fare=row.base_fare, per_km_rate=row.per_km_rate, typical_trip_km=row.typical_trip_km)

    async def conferences(self) -> list[TripRequest]:
        async with self._session_factory() as db:
            rows = (await db.execute(select(Conference).order_by(Conference.id))).scalars().all()
        return [
            _conference_request(
                r.conference, r.location, r.start_date, r.end_date, r.ticket_price, r.category, r.description
            )
            for r in rows
        ]
