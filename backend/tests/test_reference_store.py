"""SqlReferenceStore over a throwaway SQLite file, compared with the in-memory store."""

import asyncio

from stipend.data import seed
from stipend.database import create_engine, create_session_factory, create_tables
from stipend.schemas.location import Coordinates, TaxiRates
from stipend.services.location_resolver import LocationResolver
from stipend.services.reference_store import InMemoryReferenceStore, SqlReferenceStore


def _with_sql_store(tmp_path, check):
    async def run():
        engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'reference.db'}")
        try:
            await create_tables(engine)
            store = SqlReferenceStore(create_session_factory(engine))
            return await check(store)
        finally:
            await engine.dispose()

    return asyncio.run(run())


def test_seed_only_runs_once(tmp_path):
    async def check(store):
        return await store.seed_if_empty(), await store.seed_if_empty()

    assert _with_sql_store(tmp_path, check) == (True, False)


def test_sql_store_matches_seed_data(tmp_path):
    async def check(store):
        await store.seed_if_empty()
        return (
            await store.all_cities(),
            await store.city_coordinates("Seoul, KR"),
            await store.city_coordinates("Atlantis"),
            await store.airport_codes("seoul"),
            await store.cost_of_living("Singapore, SG"),
            await store.cost_of_living("Denver, US"),
            await store.taxi_rates("Seoul, KR"),
            await store.conferences(),
        )

    cities, seoul, atlantis, codes, singapore, denver, taxi, conferences = _with_sql_store(tmp_path, check)
    assert [name for name, _ in cities] == [row[0] for row in seed.SEED_CITIES]
    assert seoul == Coordinates(lat=37.5665, lng=126.9780)
    assert atlantis is None
    assert codes == ["ICN", "GMP"]
    assert singapore == 120.0
    assert denver is None
    assert taxi == TaxiRates(base_fare=3.5, per_km_rate=0.9, typical_trip_km=10.0)
    assert [c.conference for c in conferences] == [row[0] for row in seed.SEED_CONFERENCES]


def test_in_memory_store_agrees_with_sql_store(tmp_path):
    memory = InMemoryReferenceStore()

    async def check(store):
        await store.seed_if_empty()
        return await store.airports(), await store.all_cities()

    sql_airports, sql_cities = _with_sql_store(tmp_path, check)
    assert sql_airports == asyncio.run(memory.airports())
    assert sql_cities == asyncio.run(memory.all_cities())


def test_resolver_over_sql_store(tmp_path):
    async def check(store):
        await store.seed_if_empty()
        resolver = LocationResolver(store)
        await resolver.init()
        return await resolver.match("Seoul, Korea"), await resolver.airport_code("Barcelona, Spain")

    found, code = _with_sql_store(tmp_path, check)
    assert found.name == "Seoul, KR"
    assert code == "BCN"
