"""TikTok collector extending BaseCollector.

Validates a TikTok URL, fetches the page and runs the extraction pipeline
over it. Each stage fails differently:

- InvalidURLError: the URL was rejected before any network access
- CollectorError subclasses: the page could not be fetched
- ExtractionFailedError: the page was fetched but held no known data shape
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional

import structlog

from tokpulse.collectors.base import BaseCollector
from tokpulse.collectors.fetcher import PageFetcher
from tokpulse.collectors.registry import CollectorType, register_collector
from tokpulse.collectors.urls import classify_url
from tokpulse.config.settings import get_settings
from tokpulse.core.exceptions import (
    CollectorError,
    ConfigurationError,
    ExtractionFailedError,
    InvalidURLError,
    TokPulseError,
)
from tokpulse.extraction.pipeline import ExtractionPipeline, get_default_pipeline
from tokpulse.extraction.schema import NormalizedRecord

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DownloadOutcome:
    """Result of one URL in a batch download."""

    url: str
    record: Optional[NormalizedRecord] = None
    error: Optional[TokPulseError] = None

    @property
    def ok(self) -> bool:
        """True when the URL produced a record."""
        return self.record is not None


@register_collector(CollectorType.TIKTOK)
class TikTokCollector(BaseCollector):
    """Collector for public TikTok video pages.

    Config options:
        timeout: Request timeout in seconds
        max_retries: Fetch attempts on transient network errors
        user_agent: Outbound User-Agent
        transport: httpx transport override (tests)
        pipeline: ExtractionPipeline override

    Example:
        async with TikTokCollector({}) as collector:
            record = await collector.download("https://www.tiktok.com/@user/video/123")
            print(record.video_url)
    """

    name = CollectorType.TIKTOK.value

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """Initialize TikTok collector.

        Args:
            config: Configuration dictionary, see class docstring.
        """
        config = config or {}
        super().__init__(config)
        self.fetcher = PageFetcher(
            timeout=config.get("timeout"),
            max_retries=config.get("max_retries"),
            user_agent=config.get("user_agent"),
            transport=config.get("transport"),
        )
        self.pipeline: ExtractionPipeline = config.get("pipeline") or get_default_pipeline()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.fetcher.aclose()

    async def health_check(self) -> bool:
        """The collector is usable once it has extractors to run."""
        return bool(self.pipeline.list_extractors())

    async def download(self, url: str) -> NormalizedRecord:
        """Download video metadata from a public TikTok URL.

        Args:
            url: TikTok video, short-link or share-link URL

        Returns:
            Normalized record for the video

        Raises:
            InvalidURLError: If the URL is not a supported TikTok address
            CollectorError: On network errors or non-2xx responses
            ExtractionFailedError: If no extraction strategy matched
        """
        url = (url or "").strip()
        shape = classify_url(url)
        if shape is None:
            logger.warning("tiktok_url_rejected", url=url)
            raise InvalidURLError(url)

        logger.info("tiktok_download_started", url=url, shape=shape.value)

        html = await self.fetcher.fetch(url)

        try:
            record = self.pipeline.extract(html)
        except ExtractionFailedError as e:
            logger.error(
                "tiktok_extraction_failed",
                url=url,
                strategies=e.strategies,
                page_size=len(html),
            )
            raise

        logger.info("tiktok_download_completed", url=url, source=record.source_tag)
        return record

    async def get_video_info(self, url: str) -> NormalizedRecord:
        """Alias for download(), for preview workflows."""
        return await self.download(url)

    async def download_many(
        self,
        urls: list[str],
        max_concurrency: Optional[int] = None,
    ) -> list[DownloadOutcome]:
        """Download several URLs concurrently.

        One failing URL does not abort the batch; each outcome carries either
        a record or the error raised for that URL. Outcomes keep input order.

        Args:
            urls: URLs to download
            max_concurrency: Simultaneous fetches. Defaults to settings.

        Raises:
            ConfigurationError: If max_concurrency is below 1
        """
        if max_concurrency is None:
            max_concurrency = get_settings().max_concurrent_downloads
        if max_concurrency < 1:
            raise ConfigurationError(
                f"max_concurrency must be at least 1, got {max_concurrency}",
                config_key="max_concurrency",
            )
        semaphore = asyncio.Semaphore(max_concurrency)

        async def run(url: str) -> DownloadOutcome:
            async with semaphore:
                try:
                    return DownloadOutcome(url=url, record=await self.download(url))
                except (InvalidURLError, CollectorError, ExtractionFailedError) as e:
                    return DownloadOutcome(url=url, error=e)

        outcomes = await asyncio.gather(*(run(url) for url in urls))

        logger.info(
            "tiktok_batch_completed",
            total=len(outcomes),
            succeeded=sum(1 for outcome in outcomes if outcome.ok),
        )
        return list(outcomes)


async def download(url: str) -> NormalizedRecord:
    """Download one URL with a short-lived default collector."""
    async with TikTokCollector() as collector:
        return await collector.download(url)
