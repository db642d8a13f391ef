"""Stipend router: price a single trip, a batch of trips, or the known conferences."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from stipend.exceptions import InvalidTripRequest
from stipend.schemas.stipend import StipendBreakdown
from stipend.schemas.trip import TripRequest
from stipend.services.stipend_calculator import StipendCalculator

router = APIRouter()


def get_calculator(request: Request) -> StipendCalculator:
    return request.app.state.calculator


@router.post("", response_model=StipendBreakdown)
async def calculate_stipend(
    trip: TripRequest,
    calculator: StipendCalculator = Depends(get_calculator),
):
    """Estimate the full travel stipend for one trip."""
    try:
        return await calculator.calculate(trip)
    except InvalidTripRequest as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/batch", response_model=list[StipendBreakdown])
async def calculate_batch(
    trips: list[TripRequest],
    calculator: StipendCalculator = Depends(get_calculator),
):
    """Price several trips in order; invalid ones are left out of the result."""
    return await calculator.calculate_batch(trips)


@router.get("/conferences", response_model=list[StipendBreakdown])
async def conference_stipends(
    origin: str = Query(..., min_length=1),
    calculator: StipendCalculator = Depends(get_calculator),
):
    """Stipends for every known conference, travelling from `origin`."""
    return await calculator.calculate_conferences(origin)
