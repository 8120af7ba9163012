"""Shared utilities."""

from .logging import bind_context, configure_logging, get_logger

__all__ = [
    "bind_context",
    "configure_logging",
    "get_logger",
]
