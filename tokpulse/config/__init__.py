"""
Configuration Management.

Configuration sources (in order of precedence):
1. Environment variables (``TOKPULSE_`` prefix)
2. .env file
3. Default values

Example:
    from tokpulse.config import get_settings

    timeout = get_settings().request_timeout
"""

from tokpulse.config.settings import DEFAULT_USER_AGENT, Settings, get_settings

__all__ = [
    "DEFAULT_USER_AGENT",
    "Settings",
    "get_settings",
]
