"""Errors raised by the stipend pipeline.

Only malformed input escapes the pipeline; every failure of an external
source is absorbed where it happens.
"""


class StipendError(Exception):
    """Base class for stipend pipeline errors."""


class InvalidTripRequest(StipendError, ValueError):
    """Raised before any external call when a trip request cannot be priced."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class CurrencyNormalizationError(StipendError):
    """A scraped price could not be converted to USD."""
