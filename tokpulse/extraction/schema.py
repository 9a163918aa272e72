"""Normalized record returned by every extractor.

Provides the NormalizedRecord Pydantic model and the source tags that
identify which extractor produced a record.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class SourceTag(str, Enum):
    """Identifies the extractor that produced a record."""

    UNIVERSAL = "json:universal"
    SIGI = "json:sigi"
    NEXT = "json:next"
    OG_META = "og_meta"


class NormalizedRecord(BaseModel):
    """Uniform output shape for a single TikTok video.

    A record always carries a non-empty video URL; extractors that cannot
    find one return None instead of building a record.
    """

    video_url: str = Field(..., min_length=1, description="Direct video URL")
    thumbnail: str = Field(default="", description="Cover image URL")
    title: str = Field(default="", description="Post description")
    author: str = Field(default="", description="Author, '@handle' when taken from a handle")
    source_tag: str = Field(..., description="Extractor that produced the record")

    model_config = {"extra": "forbid", "frozen": True}

    def to_dict(self) -> dict[str, Any]:
        """Render with the public output keys."""
        return {
            "video_url": self.video_url,
            "thumbnail": self.thumbnail,
            "title": self.title,
            "author": self.author,
            "source": self.source_tag,
        }
