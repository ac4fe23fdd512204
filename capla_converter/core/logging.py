import logging
import sys
from typing import Optional

from capla_converter.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure centralized application logging.

    Records go to stderr; stdout belongs to the launcher payload.
    """
    level = level or settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Reduce noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
