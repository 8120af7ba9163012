"""SQLite dialect implementation."""

from ..core.identifier import quote_identifier
from ..core.parameters import format_placeholder
from .base import Dialect


class SQLiteDialect:
    """SQLite SQL dialect: double-quoted identifiers, ``?N`` placeholders."""

    name = Dialect.SQLITE

    def quote(self, identifier: str) -> str:
        return quote_identifier(identifier)

    def placeholder(self, position: int) -> str:
        # ?NNN binds by index, so a positional sequence still lines up
        return format_placeholder(position, prefix="?")
