"""
Data Source Integrations.

This module contains the TikTok collector and its plumbing:

- urls: address-shape classification, run before any network access
- fetcher: async page fetcher with status-to-exception mapping
- tiktok: TikTokCollector tying validation, fetching and extraction together
- registry: collector registration and lookup

Example:
    from tokpulse.collectors import TikTokCollector

    async with TikTokCollector() as collector:
        record = await collector.download("https://www.tiktok.com/@user/video/1234567890")
"""

from tokpulse.collectors.base import BaseCollector
from tokpulse.collectors.fetcher import PageFetcher, raise_for_status
from tokpulse.collectors.registry import (
    CollectorType,
    get_collector,
    list_collectors,
    register_collector,
)
from tokpulse.collectors.tiktok import DownloadOutcome, TikTokCollector, download
from tokpulse.collectors.urls import UrlShape, classify_url, is_valid_tiktok_url

__all__ = [
    "BaseCollector",
    "PageFetcher",
    "raise_for_status",
    "CollectorType",
    "get_collector",
    "list_collectors",
    "register_collector",
    "DownloadOutcome",
    "TikTokCollector",
    "download",
    "UrlShape",
    "classify_url",
    "is_valid_tiktok_url",
]
