from datetime import date

from pydantic import BaseModel, Field


class TripRequest(BaseModel):
    conference: str = "Business Trip"
    origin: str | None = None
    destination: str | None = None
    start_date: date | str | None = None
    end_date: date | str | None = None
    buffer_days_before: int | None = Field(default=None, ge=0)
    buffer_days_after: int | None = Field(default=None, ge=0)
    ticket_price: float | str | None = None
    include_budget: bool = False
    category: str | None = None
    description: str | None = None
