"""Tag-based fallback extractor.

Reads Open Graph and author ``<meta>`` tags when no structured blob is
present. Each field is matched on its own; only the video URL is required.
"""

from typing import Optional

import structlog
from bs4 import BeautifulSoup, SoupStrainer

from tokpulse.extraction.schema import NormalizedRecord, SourceTag

logger = structlog.get_logger(__name__)

# og:video is preferred; og:video:url is the secondary form
VIDEO_URL_TAGS = (
    {"property": "og:video"},
    {"property": "og:video:url"},
)
THUMBNAIL_TAG = {"property": "og:image"}
TITLE_TAG = {"property": "og:title"}
AUTHOR_TAG = {"name": "author"}

META_ONLY = SoupStrainer("meta")


def _content(soup: BeautifulSoup, attrs: dict[str, str]) -> Optional[str]:
    """Return the content of the first ``<meta>`` matching ``attrs``, if any."""
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    return tag.get("content")


class MetaTagExtractor:
    """Fallback extractor over ``<meta>`` attributes."""

    name = SourceTag.OG_META.value

    def extract(self, raw_text: str) -> Optional[NormalizedRecord]:
        """Return a record from meta tags, or None without a video URL."""
        soup = BeautifulSoup(raw_text, "html.parser", parse_only=META_ONLY)

        video_url = None
        for attrs in VIDEO_URL_TAGS:
            video_url = _content(soup, attrs)
            if video_url:
                break

        if not video_url:
            logger.debug("meta_video_url_missing")
            return None

        return NormalizedRecord(
            video_url=video_url,
            thumbnail=_content(soup, THUMBNAIL_TAG) or "",
            title=_content(soup, TITLE_TAG) or "",
            author=_content(soup, AUTHOR_TAG) or "",
            source_tag=self.name,
        )


META_TAG_EXTRACTOR = MetaTagExtractor()
