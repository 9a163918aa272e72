"""Extraction core.

Turns already-fetched TikTok page markup into a NormalizedRecord by trying
known embedded-data shapes in order, falling back to meta tags.
"""

from tokpulse.extraction.blobs import (
    BLOB_EXTRACTORS,
    NEXT_DATA_EXTRACTOR,
    SIGI_STATE_EXTRACTOR,
    UNIVERSAL_DATA_EXTRACTOR,
    BlobExtractor,
)
from tokpulse.extraction.meta_tags import META_TAG_EXTRACTOR, MetaTagExtractor
from tokpulse.extraction.pipeline import (
    ExtractionPipeline,
    ExtractionResult,
    Extractor,
    extract,
    get_default_pipeline,
)
from tokpulse.extraction.projection import first_present, navigate, project_item
from tokpulse.extraction.schema import NormalizedRecord, SourceTag

__all__ = [
    "BLOB_EXTRACTORS",
    "NEXT_DATA_EXTRACTOR",
    "SIGI_STATE_EXTRACTOR",
    "UNIVERSAL_DATA_EXTRACTOR",
    "BlobExtractor",
    "META_TAG_EXTRACTOR",
    "MetaTagExtractor",
    "ExtractionPipeline",
    "ExtractionResult",
    "Extractor",
    "extract",
    "get_default_pipeline",
    "first_present",
    "navigate",
    "project_item",
    "NormalizedRecord",
    "SourceTag",
]
