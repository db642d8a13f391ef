from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Reference database
    database_url: str = f"sqlite+aiosqlite:///{_BACKEND_DIR / 'db' / 'reference.db'}"
    use_database: bool = False

    # Persistent cache
    cache_dir: str = str(_BACKEND_DIR / "fixtures" / "cache")
    stipend_cache_version: str = "v11"
    flight_cache_version: str = "v1"
    flight_cache_ttl_hours: int = 6

    # Amadeus
    amadeus_client_id: str = ""
    amadeus_client_secret: str = ""
    amadeus_base_url: str = "https://test.api.amadeus.com"
    amadeus_timeout_seconds: float = 15.0
    amadeus_max_price: int = 5000

    # Google Flights scraping
    scraper_enabled: bool = True
    scraper_max_attempts: int = 3
    scraper_backoff_seconds: float = 2.0
    scraper_timeout_seconds: float = 60.0

    # Location matching
    fuzzy_match_threshold: float = 0.6
    nearby_airport_radius_km: float = 150.0

    # Distance fallback (USD per km, round trip)
    distance_price_per_km: float = 0.20

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
