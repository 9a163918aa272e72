"""Item-to-record projection shared by the structured-blob extractors.

An item node is the loosely-shaped dict TikTok embeds for one video. Fields
move around between page versions, so every record field is resolved from an
ordered list of candidate paths: the first path that yields a non-empty
string wins.
"""

from typing import Any, Optional, Sequence, Union

import structlog

from tokpulse.extraction.schema import NormalizedRecord

logger = structlog.get_logger(__name__)

PathStep = Union[str, int]
KeyPath = tuple[PathStep, ...]

# Older pages expose playAddr; newer ones downloadAddr or the H264 variant.
# The bitrate list is a last resort and its first rendition is taken as is.
VIDEO_URL_PATHS: tuple[KeyPath, ...] = (
    ("video", "playAddr"),
    ("video", "downloadAddr"),
    ("video", "playAddrH264"),
    ("video", "bitrateInfo", 0, "PlayAddr", "UrlList", 0),
)

THUMBNAIL_PATHS: tuple[KeyPath, ...] = (
    ("video", "cover"),
    ("video", "dynamicCover"),
)

TITLE_PATHS: tuple[KeyPath, ...] = (("desc",),)

AUTHOR_PATHS: tuple[KeyPath, ...] = (
    ("author", "uniqueId"),
    ("author", "nickname"),
)


def navigate(data: Any, path: Sequence[PathStep]) -> Optional[Any]:
    """Follow ``path`` through nested dicts and lists.

    Each step is a dict key (str) or a list index (int). Returns None as soon
    as a step is missing or the current node has the wrong shape.
    """
    node = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or not 0 <= step < len(node):
                return None
            node = node[step]
        else:
            if not isinstance(node, dict) or step not in node:
                return None
            node = node[step]
    return node


def first_present(data: Any, paths: Sequence[KeyPath]) -> Optional[str]:
    """Return the first non-empty string found along ``paths``, in order."""
    for path in paths:
        value = navigate(data, path)
        if isinstance(value, str) and value:
            return value
    return None


def project_item(item: dict[str, Any], source_tag: str) -> Optional[NormalizedRecord]:
    """Project an item node into a NormalizedRecord.

    Args:
        item: Item node taken from a structured blob.
        source_tag: Tag of the extractor that found the item.

    Returns:
        The record, or None when no video URL can be resolved.
    """
    video_url = first_present(item, VIDEO_URL_PATHS)
    if not video_url:
        logger.debug("item_without_video_url", source=source_tag)
        return None

    author = first_present(item, AUTHOR_PATHS)

    return NormalizedRecord(
        video_url=video_url,
        thumbnail=first_present(item, THUMBNAIL_PATHS) or "",
        title=first_present(item, TITLE_PATHS) or "",
        author=f"@{author}" if author else "",
        source_tag=source_tag,
    )
