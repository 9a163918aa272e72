"""Base collector interface for all data collectors.

All collectors should extend BaseCollector and implement the required methods.
Collectors that hold network resources are used as async context managers.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseCollector(ABC):
    """Abstract base class for all data collectors.

    Provides common interface for configuration, resource cleanup and
    health checking. Concrete collectors implement the platform-specific
    collection methods.
    """

    name: str = "base"

    def __init__(self, config: dict[str, Any]):
        """Initialize collector with configuration.

        Args:
            config: Configuration dictionary with collector-specific settings.
        """
        self.config = config

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager, releasing held resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Release network resources. No-op unless overridden."""
        return None

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the collector is ready to collect.

        Returns:
            True if the collector can operate.
        """
        ...
