"""Extraction pipeline for turning page markup into a NormalizedRecord.

Runs the registered extractors in priority order and stops at the first one
that produces a record. The pipeline is a pure function of its input: it
holds no per-call state, performs no I/O and never retries.
"""

from dataclasses import dataclass, field
from typing import Optional, Protocol

import structlog

from tokpulse.core.exceptions import ExtractionFailedError
from tokpulse.extraction.blobs import BLOB_EXTRACTORS
from tokpulse.extraction.meta_tags import META_TAG_EXTRACTOR
from tokpulse.extraction.schema import NormalizedRecord

logger = structlog.get_logger(__name__)


class Extractor(Protocol):
    """Anything that can pull a record out of raw page text."""

    name: str

    def extract(self, raw_text: str) -> Optional[NormalizedRecord]:
        """Return a record, or None when this extractor's shape is absent."""
        ...


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of one pipeline run.

    Attributes:
        record: The record produced, or None when every extractor missed.
        strategies: Names of the extractors that ran, in order.
    """

    record: Optional[NormalizedRecord]
    strategies: tuple[str, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        """True when an extractor produced a record."""
        return self.record is not None


class ExtractionPipeline:
    """Ordered chain of extractors with first-match-wins semantics.

    Example:
        pipeline = ExtractionPipeline([*BLOB_EXTRACTORS, META_TAG_EXTRACTOR])
        record = pipeline.extract(html)
    """

    def __init__(self, extractors: Optional[list[Extractor]] = None):
        """Initialize the pipeline.

        Args:
            extractors: Extractors in priority order.
        """
        self._extractors: list[Extractor] = list(extractors or [])

    def register_extractor(self, extractor: Extractor) -> None:
        """Append an extractor at the lowest priority.

        Raises:
            ValueError: If an extractor with the same name is registered.
        """
        if self.has_extractor(extractor.name):
            raise ValueError(f"Extractor already registered: {extractor.name}")
        self._extractors.append(extractor)

    def has_extractor(self, name: str) -> bool:
        """Check if an extractor is registered under ``name``."""
        return any(extractor.name == name for extractor in self._extractors)

    def list_extractors(self) -> list[str]:
        """List registered extractor names in priority order."""
        return [extractor.name for extractor in self._extractors]

    def attempt(self, raw_text: str) -> ExtractionResult:
        """Run extractors until one produces a record.

        Never raises for missing or malformed data.
        """
        tried: list[str] = []
        for extractor in self._extractors:
            tried.append(extractor.name)
            record = extractor.extract(raw_text)
            if record is not None:
                logger.debug("extractor_matched", extractor=extractor.name, tried=tried)
                return ExtractionResult(record=record, strategies=tuple(tried))
            logger.debug("extractor_missed", extractor=extractor.name)

        return ExtractionResult(record=None, strategies=tuple(tried))

    def extract(self, raw_text: str) -> NormalizedRecord:
        """Extract a record from raw page text.

        Args:
            raw_text: Page body as returned by the fetcher.

        Returns:
            The first record produced.

        Raises:
            ExtractionFailedError: If every extractor came back empty.
        """
        result = self.attempt(raw_text)
        if result.record is None:
            logger.warning("extraction_failed", strategies=list(result.strategies))
            raise ExtractionFailedError(list(result.strategies))
        return result.record


def get_default_pipeline() -> ExtractionPipeline:
    """
    Factory for the default pipeline.

    Structured blobs newest first, then the meta tag fallback.
    Each call builds a new pipeline, so registrations stay with their owner.
    """
    return ExtractionPipeline([*BLOB_EXTRACTORS, META_TAG_EXTRACTOR])


def extract(raw_text: str) -> NormalizedRecord:
    """Extract a record with the default pipeline."""
    return get_default_pipeline().extract(raw_text)
