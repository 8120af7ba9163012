"""
SQL dialects.

Dialects are registered by name so configuration can select one with a
plain string.
"""

from typing import Dict, Union

from ..core.exceptions import UnknownDialectError
from .base import Dialect, SQLDialect
from .postgresql import PostgreSQLDialect, PostgresInsert
from .sqlite import SQLiteDialect

_REGISTRY: Dict[Dialect, SQLDialect] = {
    Dialect.POSTGRES: PostgreSQLDialect(),
    Dialect.SQLITE: SQLiteDialect(),
}


def get_dialect(name: Union[str, Dialect]) -> SQLDialect:
    """
    Resolve a dialect by enum member or case-insensitive name.

    Raises:
        UnknownDialectError: If no dialect is registered under ``name``
    """
    try:
        key = Dialect(name.lower() if isinstance(name, str) else name)
    except ValueError:
        raise UnknownDialectError(str(name), (d.value for d in _REGISTRY)) from None
    return _REGISTRY[key]


__all__ = [
    "Dialect",
    "SQLDialect",
    "PostgreSQLDialect",
    "PostgresInsert",
    "SQLiteDialect",
    "get_dialect",
]
