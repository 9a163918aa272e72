"""
Core exception hierarchy for TokPulse.

Provides standardized exception types with categorization for retry logic.
Extractors never raise these for a missing or malformed blob; they return
None. Only terminal outcomes surface to the caller.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class TokPulseError(Exception):
    """Base exception for all TokPulse errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RetryableError(TokPulseError):
    """
    Transient errors that may succeed on a later attempt.

    Examples: timeouts, dropped connections.
    """

    pass


class PermanentError(TokPulseError):
    """
    Errors that won't be fixed by retrying.

    Examples: invalid input, deleted content, unrecognised page structure.
    """

    pass


# =============================================================================
# Input Errors
# =============================================================================


SUPPORTED_URL_FORMATS = (
    "tiktok.com/@user/video/ID",
    "vm.tiktok.com/CODE",
    "tiktok.com/t/CODE",
)


class InvalidURLError(PermanentError):
    """Raised when a URL does not match any supported TikTok address shape."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            "Invalid TikTok URL. Supported formats: " + ", ".join(SUPPORTED_URL_FORMATS),
            {"url": url},
        )


# =============================================================================
# Collector (transport) Errors
# =============================================================================


class CollectorError(TokPulseError):
    """Base exception for collector errors."""

    def __init__(
        self,
        collector_type: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.collector_type = collector_type
        super().__init__(f"[{collector_type}] {message}", details)


class CollectorConnectionError(CollectorError, RetryableError):
    """Raised when the connection to the upstream host fails."""

    pass


class CollectorRateLimitError(CollectorError, PermanentError):
    """Raised when the upstream answers 429 Too Many Requests."""

    pass


class CollectorBlockedError(CollectorError, PermanentError):
    """Raised when the upstream refuses the request (403)."""

    pass


class CollectorTimeoutError(CollectorError, RetryableError):
    """Raised when a collector operation times out."""

    pass


class CollectorNotFoundError(CollectorError, PermanentError):
    """Raised when requested resource is not found."""

    pass


class CollectorUnavailableError(CollectorError, PermanentError):
    """Raised on any other non-2xx response."""

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionFailedError(PermanentError):
    """
    Raised when every extraction strategy came back empty.

    This is distinct from a transport failure: the page was fetched but no
    known data shape could be found in it.
    """

    def __init__(self, strategies: list[str]):
        self.strategies = list(strategies)
        super().__init__(
            "Could not extract video from this post. "
            "It may be private, deleted, or TikTok has updated their page structure.",
            {"strategies": self.strategies},
        )


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)
