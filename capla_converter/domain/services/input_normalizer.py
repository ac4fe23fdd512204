"""
INPUT NORMALIZER

Turns raw launcher tokens into numbers.

RULES:
- Commas are grouping separators and are dropped before parsing
- Empty / absent text is "absent" (None), never zero
- Text that does not parse to a finite number is "invalid"
- Amount valid iff parsed and > 0
- Bank rate valid iff present, parsed and > 0
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple, Union

from capla_converter.domain.errors import InputError
from capla_converter.domain.models import ValidatedInput


class InvalidNumberError(ValueError):
    """Text was present but is not a finite decimal number"""


def parse_amount_text(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse user-typed numeric text.

    Args:
        text: Raw token, e.g. "1,000.50"

    Returns:
        Decimal value, or None when text is empty / absent

    Raises:
        InvalidNumberError: text is present but unparseable
    """
    if not text:
        return None

    cleaned = text.replace(",", "").strip()
    # Decimal() accepts "1_000"; launcher input does not
    if not cleaned or "_" in cleaned:
        raise InvalidNumberError(f"Not a number: {text!r}")

    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidNumberError(f"Not a number: {text!r}") from exc

    if not value.is_finite():
        raise InvalidNumberError(f"Not a finite number: {text!r}")

    return value


def to_decimal(value: Union[Decimal, int, float, str]) -> Decimal:
    """Coerce a number to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _parse_positive(text: Optional[str]) -> Tuple[Optional[Decimal], bool]:
    try:
        value = parse_amount_text(text)
    except InvalidNumberError:
        return None, False
    return value, value is not None and value > 0


def validate(
    amount_text: Optional[str],
    bank_rate_text: Optional[str] = None,
) -> ValidatedInput:
    """
    Validate the amount and optional bank rate tokens.
    """
    amount, is_valid_amount = _parse_positive(amount_text)
    bank_rate, is_valid_bank_rate = _parse_positive(bank_rate_text)

    return ValidatedInput(
        amount=amount,
        bank_rate=bank_rate,
        is_valid_amount=is_valid_amount,
        is_valid_bank_rate=is_valid_bank_rate,
        bank_rate_present=bool(bank_rate_text),
    )


def require_valid(amount_text: Optional[str], bank_rate_text: Optional[str] = None) -> ValidatedInput:
    """
    Validate and raise the matching InputError on the first problem.

    Checked in order: missing amount, invalid amount, invalid bank rate.
    """
    if not amount_text:
        raise InputError(InputError.MISSING_AMOUNT)

    validated = validate(amount_text, bank_rate_text)
    if not validated.is_valid_amount:
        raise InputError(InputError.INVALID_AMOUNT)
    if validated.has_invalid_bank_rate:
        raise InputError(InputError.INVALID_BANK_RATE)

    return validated
