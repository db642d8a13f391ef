"""Price-string parsing, USD conversion and alliance lookups."""

import pytest

from stipend.data.airline_alliances import get_alliance_label, is_major_carrier
from stipend.data.currency import normalize_to_usd, parse_price, parse_ticket_price
from stipend.exceptions import CurrencyNormalizationError


def test_parse_price_prefixes_and_suffixes():
    assert parse_price("$450") == (450.0, "USD")
    assert parse_price("CA$1,326") == (1326.0, "CAD")
    assert parse_price("€399") == (399.0, "EUR")
    assert parse_price("450 EUR") == (450.0, "EUR")
    assert parse_price("₩1,200,000") == (1200000.0, "KRW")


def test_normalize_to_usd():
    assert normalize_to_usd("$450") == 450.0
    assert normalize_to_usd("CA$1,000") == 740.0
    assert normalize_to_usd("£100") == 127.0


@pytest.mark.parametrize("value", ["", "450", "abc", "Ƀ100", "100 XYZ"])
def test_unknown_currency_raises(value):
    with pytest.raises(CurrencyNormalizationError):
        normalize_to_usd(value)


def test_ticket_price_parsing():
    assert parse_ticket_price("$750", 0.0) == 750.0
    assert parse_ticket_price("$1,299", 0.0) == 1299.0
    assert parse_ticket_price(500, 0.0) == 500.0
    assert parse_ticket_price(None, 0.0) == 0.0
    assert parse_ticket_price("free", 0.0) == 0.0


def test_alliance_membership():
    assert is_major_carrier("KE")
    assert is_major_carrier("SQ")
    assert not is_major_carrier("TR")
    assert get_alliance_label("UA") == "Star Alliance"
    assert get_alliance_label("TR") == "Independent"
