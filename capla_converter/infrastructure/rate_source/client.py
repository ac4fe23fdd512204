"""
Rate Source Client
Fetches the rate page as raw text

One GET per call, no retries and no caching; the caller decides whether
to try again.
"""

import logging
from typing import Optional

import httpx

from capla_converter.config import settings
from capla_converter.domain.errors import FetchError

logger = logging.getLogger(__name__)


class RateSourceClient:
    """
    HTTP client for the page that publishes the Capla rate
    """

    HEADERS = {
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'es-DO,es;q=0.9,en-US;q=0.8,en;q=0.7',
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: Page address (default: settings.RATE_SOURCE_URL)
            timeout: Seconds before giving up (default: settings.FETCH_TIMEOUT_SECONDS)
            transport: Optional httpx transport, e.g. httpx.MockTransport
        """
        self.base_url = base_url or settings.RATE_SOURCE_URL
        self.timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT_SECONDS
        self.transport = transport

    def _headers(self) -> dict:
        return {**self.HEADERS, 'User-Agent': settings.USER_AGENT}

    async def fetch_document(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Fetch the page body.

        Args:
            url: Override address
            timeout: Override timeout, passed to httpx unchanged

        Raises:
            FetchError: transport failure, timeout or non-success status
        """
        target = url or self.base_url
        effective_timeout = self.timeout if timeout is None else timeout

        logger.info(f"Fetching rate page {target}")
        try:
            async with httpx.AsyncClient(
                headers=self._headers(),
                timeout=effective_timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(target)
                response.raise_for_status()
                return response.text
        except httpx.TimeoutException as exc:
            logger.warning(f"Rate page timed out after {effective_timeout}s: {exc}")
            raise FetchError("Rate source timed out, please try again later") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning(f"Rate page returned HTTP {status}")
            raise FetchError(f"Rate source returned HTTP {status}") from exc
        except httpx.HTTPError as exc:
            logger.warning(f"Rate page request failed: {exc}")
            raise FetchError() from exc
