"""
Statement factory bound to one dialect.

Usage:
    >>> from sqlforge.sql import Builder, Column
    >>> builder = Builder("postgres")
    >>> builder.delete("t1").where(Column("c1").equal(123)).build()
    ('DELETE FROM "t1" WHERE "c1" = $1', [123])
"""

import os
from functools import lru_cache
from typing import Any, List, Tuple, Union

from pydantic import ValidationError

from sqlforge.config import get_settings
from sqlforge.utils.logging import get_logger

from .core.writer import SqlWriter
from .dialects import Dialect, PostgresInsert, get_dialect
from .operations import Delete, Insert, Select, Statement, Update

logger = get_logger(__name__)


class Builder:
    """
    Creates statements for a dialect and renders them.

    The dialect is resolved once, at construction. A builder holds no
    per-render state, so one instance can be shared between threads.

    Args:
        dialect: Dialect enum member or name ("postgres", "sqlite")
    """

    def __init__(self, dialect: Union[str, Dialect] = Dialect.POSTGRES):
        self.rules = get_dialect(dialect)

    @property
    def dialect(self) -> Dialect:
        return self.rules.name

    def select(self, table: str) -> Select:
        return Select(table=table, builder=self)

    def insert(self, table: str) -> Insert:
        """Create an INSERT; PostgreSQL builders return PostgresInsert."""
        if self.dialect == Dialect.POSTGRES:
            return PostgresInsert(table=table, builder=self)
        return Insert(table=table, builder=self)

    def update(self, table: str) -> Update:
        return Update(table=table, builder=self)

    def delete(self, table: str) -> Delete:
        return Delete(table=table, builder=self)

    def build(self, statement: Statement) -> Tuple[str, List[Any]]:
        """
        Render ``statement`` into SQL text and its bound values.

        Every call walks the statement afresh, so placeholder numbering
        always restarts at 1.

        Raises:
            StatementShapeError: If an INSERT/UPDATE has no columns or
                mismatched column/value counts
            DialectMismatchError: If the statement requires another dialect
        """
        writer = SqlWriter(self.rules)
        statement.write_query(writer)
        sql, values = writer.render()

        log_sql, log_values = _render_log_flags()
        if log_sql:
            event = {
                "statement": statement.kind,
                "dialect": self.dialect.value,
                "table": statement.table,
                "sql": sql,
                "value_count": len(values),
            }
            if log_values:
                event["values"] = values
            logger.debug("sql.rendered", **event)
        return sql, values

    def string(self, statement: Statement) -> str:
        """Render SQL text without values."""
        sql, _ = self.build(statement)
        return sql

    def __repr__(self) -> str:
        return f"Builder(dialect={self.dialect.value!r})"


def _render_log_flags() -> Tuple[bool, bool]:
    """
    Read (log_sql, log_values) from settings.

    LOG_LEVEL is shared with the host application, so a value the settings
    reject must not stop statements from rendering. The defaults apply then.
    """
    try:
        settings = get_settings()
    except ValidationError:
        return True, False
    return settings.log_sql, settings.log_values


def _configured_dialect() -> str:
    try:
        return get_settings().dialect
    except ValidationError:
        # Settings rejected for an unrelated field; get_dialect still
        # rejects an unknown dialect name.
        return os.getenv("SQLFORGE_DIALECT", Dialect.POSTGRES.value)


@lru_cache()
def _builder_for(dialect: str) -> Builder:
    return Builder(dialect)


def get_default_builder() -> Builder:
    """
    Builder for the dialect configured in settings.

    Raises:
        UnknownDialectError: If SQLFORGE_DIALECT names no registered dialect
            while other settings are invalid
    """
    return _builder_for(_configured_dialect())
