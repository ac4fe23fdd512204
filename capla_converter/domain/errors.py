"""
DOMAIN ERRORS

Every failure of an invocation is one of these. The driver turns each into a
single informational display item; nothing reaches the launcher as a crash.
"""

from typing import Optional


USAGE_EXAMPLE = 'Example: "1,000" or "1,000 63.25" (with optional bank rate)'
BANK_RATE_EXAMPLE = 'Example: "1,000 63.25"'


class ConverterError(Exception):
    """Base exception for the converter"""

    title = "Error fetching exchange rates"
    default_message = "Please try again later"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InputError(ConverterError):
    """Raw input could not be turned into a usable amount / bank rate"""

    MISSING_AMOUNT = "missing_amount"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_BANK_RATE = "invalid_bank_rate"

    _TEXT = {
        MISSING_AMOUNT: ("Enter an amount to convert", USAGE_EXAMPLE),
        INVALID_AMOUNT: ("Please enter a valid number", USAGE_EXAMPLE),
        INVALID_BANK_RATE: (
            "Please enter a valid bank rate as second argument",
            BANK_RATE_EXAMPLE,
        ),
    }

    def __init__(self, kind: str):
        if kind not in self._TEXT:
            raise ValueError(f"Unknown input error kind: {kind}")
        title, example = self._TEXT[kind]
        super().__init__(example)
        self.kind = kind
        self.title = title


class ExtractionError(ConverterError):
    """The fetched document did not yield a usable rate"""


class RateNotFoundError(ExtractionError):
    """No recognizable rate fragment or element in the document"""

    default_message = "Could not find exchange rate on the page"


class InvalidRateError(ExtractionError):
    """A rate was located but is not a strictly positive number"""

    default_message = "Invalid exchange rate found"


class FetchError(ConverterError):
    """The rate page could not be retrieved"""
