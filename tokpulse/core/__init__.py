"""
Core infrastructure modules for TokPulse.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
- logging: structlog configuration
"""

from tokpulse.core.exceptions import (
    TokPulseError,
    RetryableError,
    PermanentError,
    InvalidURLError,
    CollectorError,
    CollectorConnectionError,
    CollectorRateLimitError,
    CollectorBlockedError,
    CollectorTimeoutError,
    CollectorNotFoundError,
    CollectorUnavailableError,
    ExtractionFailedError,
    ConfigurationError,
)

from tokpulse.core.logging import configure_logging

__all__ = [
    # Exceptions
    "TokPulseError",
    "RetryableError",
    "PermanentError",
    "InvalidURLError",
    "CollectorError",
    "CollectorConnectionError",
    "CollectorRateLimitError",
    "CollectorBlockedError",
    "CollectorTimeoutError",
    "CollectorNotFoundError",
    "CollectorUnavailableError",
    "ExtractionFailedError",
    "ConfigurationError",
    # Logging
    "configure_logging",
]
