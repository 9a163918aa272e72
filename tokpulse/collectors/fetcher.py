"""Async page fetcher.

Fetches the raw HTML of a TikTok page with a browser-like identity. Redirects
are followed and content-encoding is decoded by httpx. Non-2xx responses are
mapped to collector exceptions with human-actionable messages, so callers can
tell "could not fetch" apart from "fetched but could not extract".
"""

from typing import Optional

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from tokpulse.config.settings import get_settings
from tokpulse.core.exceptions import (
    CollectorBlockedError,
    CollectorConnectionError,
    CollectorNotFoundError,
    CollectorRateLimitError,
    CollectorTimeoutError,
    CollectorUnavailableError,
    RetryableError,
)

logger = structlog.get_logger(__name__)

COLLECTOR_NAME = "tiktok"

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8"


def raise_for_status(response: httpx.Response, url: str) -> None:
    """Translate a non-2xx response into a collector exception.

    Raises:
        CollectorNotFoundError: On 404.
        CollectorBlockedError: On 403.
        CollectorRateLimitError: On 429.
        CollectorUnavailableError: On any other non-2xx status.
    """
    status = response.status_code
    if response.is_success:
        return

    details = {"url": url, "status_code": status}

    if status == 404:
        raise CollectorNotFoundError(
            COLLECTOR_NAME,
            "Video not found (HTTP 404). "
            "The URL may be incorrect or the video has been deleted.",
            details,
        )
    if status == 403:
        raise CollectorBlockedError(
            COLLECTOR_NAME,
            "TikTok blocked the request (HTTP 403). "
            "Your IP may be rate-limited or geo-blocked. "
            "Wait a few minutes before trying again.",
            details,
        )
    if status == 429:
        raise CollectorRateLimitError(
            COLLECTOR_NAME,
            "Rate limited by TikTok (HTTP 429). "
            "Too many requests from this IP. Wait before retrying.",
            details,
        )
    raise CollectorUnavailableError(
        COLLECTOR_NAME,
        f"Unexpected HTTP response: {status}. "
        "TikTok may be temporarily unavailable or blocking this request.",
        details,
    )


class PageFetcher:
    """Async HTTP fetcher for TikTok pages.

    Example:
        async with PageFetcher() as fetcher:
            html = await fetcher.fetch("https://www.tiktok.com/@user/video/123")
    """

    retry_wait: wait_base = wait_exponential(multiplier=1, min=1, max=8)

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. Defaults to settings.
            max_retries: Attempts on timeouts and connection errors. Defaults to settings.
            user_agent: Outbound User-Agent. Defaults to settings.
            transport: Optional httpx transport, used by tests to stub the network.
        """
        settings = get_settings()
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._max_retries = max_retries if max_retries is not None else settings.max_retries
        self._headers = {
            "User-Agent": user_agent or settings.user_agent,
            "Accept": ACCEPT_HEADER,
            "Accept-Language": settings.accept_language,
            "Upgrade-Insecure-Requests": "1",
        }
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "PageFetcher":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers=self._headers,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def fetch(self, url: str) -> str:
        """Fetch the page body, retrying transient network failures.

        HTTP status errors are never retried.

        Raises:
            CollectorTimeoutError: When every attempt timed out.
            CollectorConnectionError: When every attempt failed to connect.
            CollectorError: Subclasses for non-2xx responses.
        """
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(RetryableError),
            stop=stop_after_attempt(self._max_retries),
            wait=self.retry_wait,
            before_sleep=lambda retry_state: logger.warning(
                "tiktok_fetch_retry",
                attempt=retry_state.attempt_number,
                error=str(retry_state.outcome.exception()),
            ),
            reraise=True,
        ):
            with attempt:
                return await self._fetch_once(url)

    async def _fetch_once(self, url: str) -> str:
        """Single GET without retries."""
        client = await self._ensure_client()
        logger.debug("tiktok_fetch_started", url=url)

        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.error("tiktok_fetch_timeout", url=url, error=str(e))
            raise CollectorTimeoutError(
                COLLECTOR_NAME,
                f"Request timeout: {e}",
                {"url": url},
            ) from e
        except httpx.RequestError as e:
            logger.error("tiktok_fetch_request_error", url=url, error=str(e))
            raise CollectorConnectionError(
                COLLECTOR_NAME,
                f"Network error: {e}",
                {"url": url, "original_error": str(e)},
            ) from e

        if not response.is_success:
            logger.warning(
                "tiktok_fetch_http_error",
                url=url,
                status_code=response.status_code,
            )
        raise_for_status(response, url)

        logger.debug(
            "tiktok_fetch_completed",
            url=url,
            final_url=str(response.url),
            size=len(response.text),
        )
        return response.text
