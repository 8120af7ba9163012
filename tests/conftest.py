"""Pytest configuration shared by all suites.

Logging is configured once for the session, the way an application
configures it at startup. Settings are cached process-wide, so every test
starts from a clean environment and an empty settings cache.
"""

from __future__ import annotations

import logging
import os
from typing import Iterator

import pytest

from sqlforge.config import get_settings
from sqlforge.utils.logging import configure_logging

_ENV_KEYS = ("LOG_LEVEL",)
_ENV_PREFIX = "SQLFORGE_"

configure_logging(level=logging.INFO, log_to_file=False)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop SQLForge environment overrides and reset the settings cache."""
    for key in list(os.environ):
        if key.startswith(_ENV_PREFIX) or key in _ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
