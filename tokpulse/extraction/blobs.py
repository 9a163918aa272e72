"""Structured-blob extractors.

TikTok pages embed their state as a JSON object inside a script tag. Three
shapes are known, each introduced by its own marker and nesting the item
node under its own key path. Every extractor follows the same steps:

1. find the marker and capture the smallest ``{...}`` span closing the tag
2. parse the span as JSON
3. walk the variant's key path down to the item node
4. project the item node into a NormalizedRecord

A miss at any step returns None. Malformed and truncated blobs are common
and must never abort the pipeline.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

import structlog

from tokpulse.extraction.projection import KeyPath, navigate, project_item
from tokpulse.extraction.schema import NormalizedRecord, SourceTag

logger = structlog.get_logger(__name__)


# =============================================================================
# Markers
# =============================================================================

UNIVERSAL_DATA_PATTERN = re.compile(
    r"<script[^>]*>\s*window\.__UNIVERSAL_DATA_FOR_REHYDRATION__\s*=\s*(\{.*?\})\s*;?\s*</script>",
    re.DOTALL,
)

SIGI_STATE_PATTERN = re.compile(
    r"<script[^>]*>\s*window\[['\"]SIGI_STATE['\"]\]\s*=\s*(\{.*?\})\s*;?\s*</script>",
    re.DOTALL,
)

NEXT_DATA_PATTERN = re.compile(
    r"<script[^>]+id=[\"']__NEXT_DATA__[\"'][^>]*>\s*(\{.*?\})\s*</script>",
    re.DOTALL,
)


# =============================================================================
# Extractor
# =============================================================================


@dataclass(frozen=True)
class BlobExtractor:
    """One embedded-data shape.

    Attributes:
        name: Source tag stamped on records from this extractor.
        pattern: Regex whose first group captures the JSON span.
        item_path: Keys leading from the blob root to the item node.
        first_entry: When True, ``item_path`` ends at a mapping keyed by
            item IDs and the first entry in insertion order is the item.
    """

    name: str
    pattern: re.Pattern
    item_path: KeyPath
    first_entry: bool = False

    def extract(self, raw_text: str) -> Optional[NormalizedRecord]:
        """Return a record from this blob shape, or None if it is absent."""
        blob = self.parse_blob(raw_text)
        if blob is None:
            return None

        item = self.locate_item(blob)
        if item is None:
            return None

        return project_item(item, self.name)

    def parse_blob(self, raw_text: str) -> Optional[Any]:
        """Find the marker and decode the JSON span that follows it."""
        match = self.pattern.search(raw_text)
        if not match:
            return None

        try:
            return json.loads(match.group(1))
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug("blob_parse_failed", extractor=self.name, error=str(e))
            return None

    def locate_item(self, blob: Any) -> Optional[dict[str, Any]]:
        """Walk ``item_path`` down to the item node."""
        node = navigate(blob, self.item_path)
        if node is None:
            logger.debug("blob_path_missing", extractor=self.name, path=self.item_path)
            return None

        if self.first_entry:
            # A video page describes one item; any others are ignored.
            if not isinstance(node, dict) or not node:
                return None
            node = next(iter(node.values()))

        if not isinstance(node, dict) or not node:
            return None
        return node


# =============================================================================
# Known shapes, newest first
# =============================================================================

UNIVERSAL_DATA_EXTRACTOR = BlobExtractor(
    name=SourceTag.UNIVERSAL.value,
    pattern=UNIVERSAL_DATA_PATTERN,
    item_path=("__DEFAULT_SCOPE__", "webapp.video-detail", "itemInfo", "itemStruct"),
)

SIGI_STATE_EXTRACTOR = BlobExtractor(
    name=SourceTag.SIGI.value,
    pattern=SIGI_STATE_PATTERN,
    item_path=("ItemModule",),
    first_entry=True,
)

NEXT_DATA_EXTRACTOR = BlobExtractor(
    name=SourceTag.NEXT.value,
    pattern=NEXT_DATA_PATTERN,
    item_path=("props", "pageProps", "itemInfo", "itemStruct"),
)

BLOB_EXTRACTORS: tuple[BlobExtractor, ...] = (
    UNIVERSAL_DATA_EXTRACTOR,
    SIGI_STATE_EXTRACTOR,
    NEXT_DATA_EXTRACTOR,
)
