"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL identifier quoting, ``$N`` placeholders and the
INSERT ... RETURNING statement variant.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from sqlforge.utils.logging import bind_context

from ..core.exceptions import DialectMismatchError
from ..core.identifier import quote_identifier
from ..core.parameters import format_placeholder
from ..operations.base import as_names
from ..operations.insert import Insert
from .base import Dialect

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..core.writer import SqlWriter


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = Dialect.POSTGRES

    def quote(self, identifier: str) -> str:
        """Quote an identifier using PostgreSQL syntax (double quotes)."""
        return quote_identifier(identifier)

    def placeholder(self, position: int) -> str:
        return format_placeholder(position, prefix="$")


@dataclass(frozen=True)
class PostgresInsert(Insert):
    """
    INSERT with an optional ``RETURNING`` clause.

    Only renders through the PostgreSQL dialect.

    Example:
        >>> from sqlforge.sql import Builder
        >>> (
        ...     Builder("postgres")
        ...     .insert("t1")
        ...     .columns("c2", "c3")
        ...     .values("test", "test2")
        ...     .returning("id")
        ...     .string()
        ... )
        'INSERT INTO "t1" ("c2", "c3") VALUES ($1, $2) RETURNING "id"'
    """

    returning_columns: Tuple[str, ...] = ()

    def returning(self, *names: str) -> PostgresInsert:
        """Return a copy that returns ``names`` from the inserted row."""
        return dataclasses.replace(self, returning_columns=as_names(names))

    def write_query(self, writer: "SqlWriter") -> None:
        actual = writer.dialect.name
        if actual != Dialect.POSTGRES:
            error = DialectMismatchError(
                statement=self.kind,
                required=Dialect.POSTGRES.value,
                actual=getattr(actual, "value", str(actual)),
            )
            log = bind_context(__name__, statement=self.kind, table=self.table)
            log.error("sql.dialect_mismatch", **error.to_dict())
            raise error
        super().write_query(writer)
        if self.returning_columns:
            writer.write_raw(" RETURNING ")
            writer.write_joined(self.returning_columns, writer.write_identifier)
