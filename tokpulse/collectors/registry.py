"""Collector registry for runtime collector selection.

Provides decorator-based registration and factory function for collectors.
"""

from enum import Enum
from typing import TYPE_CHECKING

from tokpulse.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from tokpulse.collectors.base import BaseCollector


class CollectorType(Enum):
    """Supported collector types."""

    TIKTOK = "tiktok"


_collectors: dict[CollectorType, type["BaseCollector"]] = {}


def register_collector(collector_type: CollectorType):
    """Decorator to register a collector class.

    Args:
        collector_type: The CollectorType enum value for this collector.

    Example:
        @register_collector(CollectorType.TIKTOK)
        class TikTokCollector(BaseCollector):
            ...
    """

    def decorator(cls: type["BaseCollector"]):
        _collectors[collector_type] = cls
        return cls

    return decorator


def get_collector(collector_type: CollectorType, config: dict) -> "BaseCollector":
    """Factory function to get a collector instance.

    Args:
        collector_type: The type of collector to instantiate.
        config: Configuration dictionary for the collector.

    Returns:
        Instantiated collector.

    Raises:
        ConfigurationError: If the collector type is not registered.
    """
    if collector_type not in _collectors:
        raise ConfigurationError(
            f"Unknown collector type: {collector_type}",
            config_key="collector_type",
        )
    return _collectors[collector_type](config)


def list_collectors() -> list[CollectorType]:
    """List all registered collector types."""
    return list(_collectors.keys())
