"""Trip date parsing and flight date derivation."""

from datetime import date, datetime, timedelta

from stipend.exceptions import InvalidTripRequest
from stipend.schemas.pricing import FlightDates

_DATED_FORMATS = ["%Y-%m-%d", "%d %B %Y", "%d %b %Y", "%B %d %Y", "%b %d %Y"]
_YEARLESS_FORMATS = ["%d %B %Y", "%d %b %Y", "%B %d %Y", "%b %d %Y"]


def _strptime(text: str, formats: list[str]) -> date | None:
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_trip_date(value: date | str | None, field: str = "start_date", today: date | None = None) -> date:
    """Parse an ISO date, a date object, or text like '1 May' / '1 May 2026'.

    A date written without a year that has already passed this year is taken
    to mean next year.
    """
    if value is None or value == "":
        raise InvalidTripRequest(field, "date is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = " ".join(value.replace(",", " ").split())
    parsed = _strptime(text, _DATED_FORMATS)
    if parsed:
        return parsed

    today = today or date.today()
    parsed = _strptime(f"{text} {today.year}", _YEARLESS_FORMATS)
    if parsed is None:
        raise InvalidTripRequest(field, f"unrecognized date {value!r}")
    if parsed < today:
        try:
            parsed = parsed.replace(year=today.year + 1)
        except ValueError:
            raise InvalidTripRequest(field, f"{value!r} does not exist next year") from None
    return parsed


def compute_flight_dates(start: date, end: date, pre_days: int, post_days: int, is_local: bool) -> FlightDates:
    """Fly out at least one day early and back at least one day late; local trips use the conference dates."""
    if is_local:
        return FlightDates(outbound=start.isoformat(), inbound=end.isoformat())
    outbound = start - timedelta(days=max(pre_days, 1))
    inbound = end + timedelta(days=max(post_days, 1))
    return FlightDates(outbound=outbound.isoformat(), inbound=inbound.isoformat())
