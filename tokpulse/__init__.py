"""
TokPulse - video metadata extraction for public TikTok posts.

This package contains:
- extraction: the multi-strategy extraction pipeline (embedded JSON blobs,
  then Open Graph meta tags)
- collectors: URL classification, page fetching and the TikTok collector
- config: Pydantic settings
- core: exception hierarchy and logging setup
- cli: the ``tokpulse`` command

Example:
    from tokpulse import extract

    record = extract(html)
    print(record.video_url, record.author)
"""

from tokpulse.collectors import TikTokCollector, download, is_valid_tiktok_url
from tokpulse.core.exceptions import ExtractionFailedError, InvalidURLError
from tokpulse.extraction import NormalizedRecord, extract

__version__ = "0.1.0"

__all__ = [
    "TikTokCollector",
    "download",
    "is_valid_tiktok_url",
    "ExtractionFailedError",
    "InvalidURLError",
    "NormalizedRecord",
    "extract",
    "__version__",
]
