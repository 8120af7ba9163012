"""Core SQL utilities package."""

from .exceptions import (
    DialectMismatchError,
    SqlBuilderError,
    StatementShapeError,
    UnknownDialectError,
    UnknownOperatorError,
    UnsupportedTypeError,
)
from .identifier import quote_identifier
from .parameters import format_placeholder

__all__ = [
    "quote_identifier",
    "format_placeholder",
    "SqlBuilderError",
    "UnsupportedTypeError",
    "StatementShapeError",
    "UnknownOperatorError",
    "DialectMismatchError",
    "UnknownDialectError",
]
