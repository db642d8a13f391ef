"""Trip date parsing and flight date derivation."""

from datetime import date

import pytest

from stipend.exceptions import InvalidTripRequest
from stipend.services.trip_dates import compute_flight_dates, parse_trip_date

TODAY = date(2026, 6, 15)


def test_parses_iso_and_date_objects():
    assert parse_trip_date("2026-09-01", today=TODAY) == date(2026, 9, 1)
    assert parse_trip_date(date(2026, 9, 1), today=TODAY) == date(2026, 9, 1)


def test_parses_day_month_text_with_year():
    assert parse_trip_date("1 May 2027", today=TODAY) == date(2027, 5, 1)
    assert parse_trip_date("May 1, 2027", today=TODAY) == date(2027, 5, 1)


def test_yearless_date_still_ahead_stays_this_year():
    assert parse_trip_date("18 September", today=TODAY) == date(2026, 9, 18)
    assert parse_trip_date("15 June", today=TODAY) == date(2026, 6, 15)


def test_yearless_date_already_passed_rolls_to_next_year():
    assert parse_trip_date("1 May", today=TODAY) == date(2027, 5, 1)
    assert parse_trip_date("Feb 27", today=TODAY) == date(2027, 2, 27)


@pytest.mark.parametrize("value", [None, "", "someday", "31 Smarch"])
def test_bad_dates_raise(value):
    with pytest.raises(InvalidTripRequest) as exc:
        parse_trip_date(value, "start_date", today=TODAY)
    assert exc.value.field == "start_date"


def test_flight_dates_pad_at_least_one_day():
    dates = compute_flight_dates(date(2026, 9, 1), date(2026, 9, 3), 0, 0, is_local=False)
    assert (dates.outbound, dates.inbound) == ("2026-08-31", "2026-09-04")

    dates = compute_flight_dates(date(2026, 9, 1), date(2026, 9, 3), 2, 3, is_local=False)
    assert (dates.outbound, dates.inbound) == ("2026-08-30", "2026-09-06")


def test_local_trips_fly_on_conference_dates():
    dates = compute_flight_dates(date(2026, 9, 1), date(2026, 9, 3), 1, 1, is_local=True)
    assert (dates.outbound, dates.inbound) == ("2026-09-01", "2026-09-03")
