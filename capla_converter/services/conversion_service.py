"""
Conversion Service
Single-shot driver: raw query -> display items

Input problems are reported before any network access. Fetch and
extraction failures become one informational item. Nothing is retried.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from capla_converter.domain.errors import ConverterError, InputError
from capla_converter.domain.models import DisplayItem, RawInput
from capla_converter.domain.services.input_normalizer import require_valid
from capla_converter.domain.services.output_formatter import build_output
from capla_converter.domain.services.rate_extractor import extract_rate

logger = logging.getLogger(__name__)

FetchDocument = Callable[[], Awaitable[str]]


def error_item(error: ConverterError) -> DisplayItem:
    return DisplayItem(title=error.title, subtitle=error.message, valid=False)


class ConversionService:
    """
    Composes normalizer, fetch, extractor and formatter for one query.
    """

    def __init__(self, fetch_document: FetchDocument):
        """
        Args:
            fetch_document: Coroutine function returning the rate page text
        """
        self.fetch_document = fetch_document

    async def run(self, query: Optional[str]) -> List[DisplayItem]:
        raw = RawInput.from_query(query)

        try:
            validated = require_valid(raw.amount_text, raw.bank_rate_text)
        except InputError as exc:
            logger.debug(f"Rejected input {query!r}: {exc.kind}")
            return [error_item(exc)]

        try:
            document = await self.fetch_document()
            rate = extract_rate(document)
        except ConverterError as exc:
            logger.warning(f"Conversion failed: {exc.message}")
            return [error_item(exc)]

        bank_rate = validated.bank_rate if validated.is_valid_bank_rate else None
        return build_output(validated.amount, rate, bank_rate)
