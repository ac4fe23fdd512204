"""
Launcher entry point

Usage:
    capla-convert 1,000 63.25

Prints a script-filter payload ({"items": [...]}) on stdout.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional, TextIO

from capla_converter.config import settings
from capla_converter.core.logging import setup_logging
from capla_converter.domain.errors import FetchError
from capla_converter.domain.models import DisplayItem
from capla_converter.infrastructure.rate_source import RateSourceClient
from capla_converter.services.conversion_service import ConversionService, error_item

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="capla-convert",
        description="Convert USD to DOP at the Capla rate, optionally against a bank rate",
    )
    parser.add_argument("query", nargs="*", help='amount and optional bank rate, e.g. "1,000 63.25"')
    parser.add_argument("--url", default=settings.RATE_SOURCE_URL, help="rate page address")
    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.FETCH_TIMEOUT_SECONDS,
        help="fetch timeout in seconds",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


def render(items: List[DisplayItem], out: TextIO) -> None:
    json.dump({"items": [item.to_payload() for item in items]}, out, ensure_ascii=False)
    out.write("\n")


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    out = out or sys.stdout

    client = RateSourceClient(base_url=args.url, timeout=args.timeout)
    service = ConversionService(client.fetch_document)

    try:
        items = asyncio.run(service.run(" ".join(args.query)))
    except Exception:
        logger.exception("Unexpected failure while converting")
        items = [error_item(FetchError())]

    render(items, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
