"""
RATE EXTRACTOR

Locates the USD -> DOP buy rate inside the fetched rate page.

Two page formats are known:
- Structured fragment: a JSON object {"monedas": [{"nombre", "compra", "venta"}, ...]}
  embedded in the markup; the USD record's "compra" value is the rate.
- Labeled element: an element with class "amt-change" whose text reads "RD$ 62.30".

The fragment is tried first; if the page has none, the labeled element is used.
Either path returns a strictly positive Decimal or raises.
"""

import json
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from bs4 import BeautifulSoup

from capla_converter.domain.errors import InvalidRateError, RateNotFoundError

logger = logging.getLogger(__name__)

RATE_CURRENCY = "USD"
RATE_ELEMENT_CLASS = "amt-change"

_FRAGMENT_PATTERN = re.compile(
    r'\{\s*"monedas"\s*:\s*\[[^\[\]]*\]\s*\}',
    re.DOTALL,
)
# Commas only as thousands groups: "62,30" is not a number here
_RATE_NUMBER_PATTERN = re.compile(r"^(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?$")
# Currency label before the number, e.g. "RD$ " or "DOP "
_RATE_PREFIX_PATTERN = re.compile(r"^[^\d.\-]*")


def _to_rate(raw: Any) -> Decimal:
    """Parse a located rate value; anything not > 0 is invalid."""
    text = str(raw).strip() if raw is not None else ""
    if not _RATE_NUMBER_PATTERN.match(text):
        raise InvalidRateError()

    try:
        value = Decimal(text.replace(",", ""))
    except InvalidOperation as exc:
        raise InvalidRateError() from exc

    if value <= 0:
        raise InvalidRateError()
    return value


def _rate_from_fragment(match: Optional[re.Match]) -> Decimal:
    if not match:
        raise RateNotFoundError("Could not find exchange rates in the page")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        logger.debug("Rate fragment is not valid JSON: %s", exc)
        raise RateNotFoundError("Could not find exchange rates in the page") from exc

    for currency in data.get("monedas") or []:
        if isinstance(currency, dict) and currency.get("nombre") == RATE_CURRENCY:
            return _to_rate(currency.get("compra"))

    raise RateNotFoundError(f"Could not find {RATE_CURRENCY} exchange rate")


def extract_from_fragment(document: str) -> Decimal:
    """
    Structured-fragment strategy.

    Raises:
        RateNotFoundError: no fragment, undecodable fragment or no USD record
        InvalidRateError: USD buy value is not a positive number
    """
    return _rate_from_fragment(_FRAGMENT_PATTERN.search(document))


def extract_from_element(document: str) -> Decimal:
    """
    Labeled-element strategy.

    Raises:
        RateNotFoundError: no element carries the rate class
        InvalidRateError: element text is not a positive number
    """
    soup = BeautifulSoup(document, "html.parser")
    element = soup.find(class_=RATE_ELEMENT_CLASS)
    if element is None:
        raise RateNotFoundError()

    text = _RATE_PREFIX_PATTERN.sub("", element.get_text().strip(), count=1)
    return _to_rate(text)


def extract_rate(document: str) -> Decimal:
    """
    Extract the exchange rate from a fetched page of either known format.

    Args:
        document: Raw page text

    Returns:
        Strictly positive rate

    Raises:
        RateNotFoundError: nothing recognizable in the page
        InvalidRateError: located value is not numeric or is <= 0
    """
    document = document or ""
    match = _FRAGMENT_PATTERN.search(document)
    if match:
        rate = _rate_from_fragment(match)
        strategy = "fragment"
    else:
        rate = extract_from_element(document)
        strategy = "element"

    logger.debug("Extracted rate %s via %s strategy", rate, strategy)
    return rate
