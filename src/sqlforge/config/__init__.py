"""Configuration management for SQLForge.

Settings are loaded from environment variables (``SQLFORGE_`` prefix) and an
optional ``.env`` file named by ``SQLFORGE_ENV_FILE``, with validation using
Pydantic BaseSettings.

Usage:
    >>> from sqlforge.config import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    'postgres'
"""

from sqlforge.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
