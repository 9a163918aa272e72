"""TikTok URL classification.

A URL is accepted only if it matches one of three fixed address shapes.
The check runs before any network access.
"""

import re
from enum import Enum
from typing import Optional


class UrlShape(Enum):
    """Recognised TikTok address shapes."""

    VIDEO = "video"  # tiktok.com/@user/video/ID
    SHORT_LINK = "short_link"  # vm.tiktok.com/CODE
    SHARE_LINK = "share_link"  # tiktok.com/t/CODE


URL_PATTERNS: dict[UrlShape, re.Pattern] = {
    UrlShape.VIDEO: re.compile(
        r"^https?://(www\.|m\.)?tiktok\.com/@[^/]+/video/\d+",
        re.IGNORECASE,
    ),
    UrlShape.SHORT_LINK: re.compile(
        r"^https?://vm\.tiktok\.com/[a-zA-Z0-9]+",
        re.IGNORECASE,
    ),
    UrlShape.SHARE_LINK: re.compile(
        r"^https?://(www\.)?tiktok\.com/t/[a-zA-Z0-9]+",
        re.IGNORECASE,
    ),
}


def classify_url(url: str) -> Optional[UrlShape]:
    """Return the shape ``url`` matches, or None if it matches none."""
    if not url:
        return None
    for shape, pattern in URL_PATTERNS.items():
        if pattern.match(url):
            return shape
    return None


def is_valid_tiktok_url(url: str) -> bool:
    """Check whether ``url`` is a supported TikTok address."""
    return classify_url(url) is not None
