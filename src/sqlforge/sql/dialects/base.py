"""
Dialect selection and the rendering rules every dialect provides.

A dialect only decides how identifiers are quoted and how the N-th
positional placeholder is spelled; everything else about rendering is
shared.
"""

from enum import Enum
from typing import Protocol


class Dialect(str, Enum):
    """Supported SQL dialects."""

    POSTGRES = "postgres"
    SQLITE = "sqlite"


class SQLDialect(Protocol):
    """Protocol for SQL dialect rendering rules."""

    name: Dialect

    def quote(self, identifier: str) -> str: ...
    def placeholder(self, position: int) -> str: ...
