import math
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class Coordinates(BaseModel):
    lat: float
    lng: float

    model_config = {"frozen": True}

    @field_validator("lat", "lng")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("coordinates must be finite")
        return v

    @property
    def is_sentinel(self) -> bool:
        return self.lat == 0.0 and self.lng == 0.0


SENTINEL = Coordinates(lat=0.0, lng=0.0)


class LocationMatch(BaseModel):
    name: str
    coordinates: Coordinates
    similarity: float = Field(ge=0.0, le=1.0)
    method: Literal["exact", "alias", "fuzzy"]


class Airport(BaseModel):
    code: str
    city: str
    country: str
    coordinates: Coordinates


class TaxiRates(BaseModel):
    base_fare: float
    per_km_rate: float
    typical_trip_km: float
