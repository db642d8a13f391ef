import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stipend.config import settings

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"


def configure_logging(log_dir: Path = LOG_DIR, level: str | None = None) -> None:
    """Console plus a rotating file under `log_dir`; LOG_LEVEL picks the level."""
    log_dir.mkdir(parents=True, exist_ok=True)
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(),
            RotatingFileHandler(
                log_dir / "stipend.log",
                maxBytes=10 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            ),
        ],
    )
    for noisy in ("httpcore", "httpx", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


configure_logging()

from stipend.database import create_engine, create_session_factory, create_tables
from stipend.routers import stipend
from stipend.services.amadeus_client import AmadeusClient
from stipend.services.cache_service import PersistentCache
from stipend.services.cost_of_living import CostOfLivingAdjuster
from stipend.services.flight_pricing import (
    AmadeusStrategy,
    DistanceStrategy,
    FlightPriceResolver,
    PriceStrategy,
    ScraperStrategy,
)
from stipend.services.google_flights_client import GoogleFlightsClient
from stipend.services.local_transport import LocalTransportEstimator
from stipend.services.location_resolver import LocationResolver
from stipend.services.reference_store import InMemoryReferenceStore, ReferenceStore, SqlReferenceStore
from stipend.services.stipend_calculator import StipendCalculator

logger = logging.getLogger(__name__)


def build_strategies(amadeus: AmadeusClient) -> list[PriceStrategy]:
    """Scraper first, then the API, then the distance estimate."""
    strategies: list[PriceStrategy] = []
    if settings.scraper_enabled:
        strategies.append(ScraperStrategy(GoogleFlightsClient()))
    strategies.append(AmadeusStrategy(amadeus))
    strategies.append(DistanceStrategy())
    return strategies


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Reference data: SQL tables when enabled, seed data otherwise
    engine = None
    store: ReferenceStore
    if settings.use_database:
        engine = create_engine()
        await create_tables(engine)
        sql_store = SqlReferenceStore(create_session_factory(engine))
        if await sql_store.seed_if_empty():
            logger.info("Reference database was empty, seeded it")
        store = sql_store
    else:
        store = InMemoryReferenceStore()

    flight_cache = PersistentCache("flight_prices")
    stipend_cache = PersistentCache("stipends")
    flight_cache.init()
    stipend_cache.init()

    locations = LocationResolver(store)
    await locations.init()

    amadeus = AmadeusClient()
    if not amadeus.configured:
        logger.warning("Amadeus credentials missing, API pricing disabled")

    app.state.calculator = StipendCalculator(
        locations=locations,
        flight_prices=FlightPriceResolver(build_strategies(amadeus), flight_cache),
        cost_of_living=CostOfLivingAdjuster(store),
        local_transport=LocalTransportEstimator(store),
        cache=stipend_cache,
        store=store,
    )
    logger.info("Stipend services started")

    yield

    # Shutdown
    await locations.close()
    await amadeus.close()
    flight_cache.close()
    stipend_cache.close()
    if engine:
        await engine.dispose()
    logger.info("Stipend services stopped")


app = FastAPI(
    title="Travel Stipend",
    description="Conference travel stipend estimator",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stipend.router, prefix="/api/stipend", tags=["stipend"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "stipend"}
