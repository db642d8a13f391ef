from pydantic import BaseModel


class StipendBreakdown(BaseModel):
    conference: str
    origin: str
    destination: str
    conference_start: str
    conference_end: str
    flight_departure: str
    flight_return: str

    flight_cost: float
    flight_price_source: str
    lodging_cost: float
    basic_meals_cost: float
    business_entertainment_cost: float
    meals_cost: float
    local_transport_cost: float
    ticket_price: float
    internet_data_allowance: float
    incidentals_allowance: float
    total_stipend: float

    distance_km: float
    distance_tier: str
    cost_of_living_factor: float
    is_local_trip: bool
    conference_days: int
    total_days: int
    pre_days: int
    post_days: int
    weekday_nights: int
    weekend_nights: int
