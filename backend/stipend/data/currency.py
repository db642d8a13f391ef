"""Currency utilities: price-string parsing and conversion to USD."""

import re

from stipend.exceptions import CurrencyNormalizationError

# Static exchange rates to USD (can be updated periodically)
EXCHANGE_RATES_TO_USD: dict[str, float] = {
    "USD": 1.0,
    "CAD": 0.74,
    "GBP": 1.27,
    "EUR": 1.08,
    "JPY": 0.0067,
    "AUD": 0.65,
    "NZD": 0.60,
    "SGD": 0.75,
    "HKD": 0.13,
    "INR": 0.012,
    "AED": 0.27,
    "QAR": 0.27,
    "TRY": 0.031,
    "KRW": 0.00074,
    "TWD": 0.031,
    "THB": 0.028,
    "CHF": 1.13,
}

# Display prefix → currency code. Longer prefixes first so "CA$" wins over "$".
CURRENCY_PREFIXES: list[tuple[str, str]] = [
    ("US$", "USD"), ("CA$", "CAD"), ("AU$", "AUD"), ("NZ$", "NZD"),
    ("HK$", "HKD"), ("NT$", "TWD"), ("S$", "SGD"), ("A$", "AUD"),
    ("$", "USD"), ("€", "EUR"), ("£", "GBP"), ("¥", "JPY"),
    ("₩", "KRW"), ("₹", "INR"), ("฿", "THB"),
]

_PRICE_RE = re.compile(r"^(?P<prefix>[^\d\s]*)\s*(?P<amount>\d[\d,]*(?:\.\d+)?)\s*(?P<suffix>[A-Z]{3})?$")


def parse_price(price_str: str) -> tuple[float, str]:
    """Split a price string like 'CA$1,326' or '450 EUR' into (amount, currency).

    Raises CurrencyNormalizationError when the currency cannot be identified.
    """
    if not price_str:
        raise CurrencyNormalizationError("empty price string")
    match = _PRICE_RE.match(price_str.strip())
    if not match:
        raise CurrencyNormalizationError(f"unparseable price {price_str!r}")

    amount = float(match.group("amount").replace(",", ""))
    prefix = match.group("prefix")
    suffix = match.group("suffix")

    if suffix:
        currency = suffix
    elif prefix in EXCHANGE_RATES_TO_USD:
        currency = prefix
    else:
        currency = next((code for symbol, code in CURRENCY_PREFIXES if prefix == symbol), None)
    if currency is None:
        raise CurrencyNormalizationError(f"unknown currency marker {prefix!r} in {price_str!r}")
    return amount, currency


def convert_to_usd(amount: float, from_currency: str) -> float:
    """Convert an amount to USD using static exchange rates."""
    rate = EXCHANGE_RATES_TO_USD.get(from_currency)
    if rate is None:
        raise CurrencyNormalizationError(f"no exchange rate for {from_currency}")
    return round(amount * rate, 2)


def normalize_to_usd(price_str: str) -> float:
    """Parse a displayed price and return its value in USD."""
    amount, currency = parse_price(price_str)
    return convert_to_usd(amount, currency)


def parse_ticket_price(value: float | int | str | None, default: float) -> float:
    """Conference ticket prices arrive as numbers or strings such as '$750'."""
    if value is None or value == "":
        return default
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(value.replace("$", "").replace(",", "").strip())
    except ValueError:
        return default
