"""Stipend rate tables: single source for every baseline cost and rule."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConferenceDefaults:
    pre_days: int = 1    # arrive the day before
    post_days: int = 1   # leave the day after


@dataclass(frozen=True)
class BaseCosts:
    """Baseline USD costs before cost-of-living adjustment."""
    ticket: float = 0.0
    hotel: float = 150.0                 # per night
    meals: float = 65.0                  # per day
    transport: float = 35.0              # per day, when no taxi data exists
    incidentals: float = 25.0            # per day
    business_entertainment: float = 50.0  # per conference day


@dataclass(frozen=True)
class StipendRules:
    cost_of_living_index: float = 100.0  # index that maps to factor 1.0
    international_internet: float = 5.0  # per day, non-local trips only
    weekend_rate_multiplier: float = 0.9
    full_meal_days: int = 3
    reduced_meal_ratio: float = 0.85
    taxi_trips_per_day: int = 2


@dataclass(frozen=True)
class TravelStipend:
    conference: ConferenceDefaults = field(default_factory=ConferenceDefaults)
    costs: BaseCosts = field(default_factory=BaseCosts)
    rules: StipendRules = field(default_factory=StipendRules)


TRAVEL_STIPEND = TravelStipend()
