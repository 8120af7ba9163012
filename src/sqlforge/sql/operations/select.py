"""
SQL SELECT statement builder.

Renders ``SELECT <columns or *> FROM <table> WHERE <predicate or 1 = 1>``
followed by optional ORDER BY and LIMIT clauses.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..core.exceptions import UnsupportedTypeError
from ..expressions import BoolExpr, Order, wrap_order_expression
from .base import Statement, as_names, as_predicate

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..core.writer import SqlWriter


@dataclass(frozen=True)
class Select(Statement):
    """
    SELECT statement.

    Example:
        >>> from sqlforge.sql import Builder, Column, descending
        >>> query = (
        ...     Builder("postgres")
        ...     .select("users")
        ...     .columns("id", "name")
        ...     .where(Column("active").equal(True))
        ...     .order_by(descending("created_at"))
        ...     .limit(10)
        ... )
        >>> query.build()
        ('SELECT "id", "name" FROM "users" WHERE "active" = $1 ORDER BY "created_at" DESC LIMIT 10', [True])
    """

    kind = "select"

    column_names: Tuple[str, ...] = ()
    predicate: Optional[BoolExpr] = None
    ordering: Tuple[Order, ...] = ()
    row_limit: Optional[int] = None

    def columns(self, *names: str) -> Select:
        """Return a copy selecting ``names``; no names selects ``*``."""
        return dataclasses.replace(self, column_names=as_names(names))

    def where(self, predicate: Optional[BoolExpr]) -> Select:
        return dataclasses.replace(self, predicate=as_predicate(predicate))

    def order_by(self, *items: Any) -> Select:
        """
        Return a copy ordered by ``items``.

        Each item is an Order (from ascending/descending), an expression or
        a column name; anything without a direction sorts ascending.
        """
        return dataclasses.replace(
            self, ordering=tuple(wrap_order_expression(item) for item in items)
        )

    def limit(self, count: Optional[int]) -> Select:
        """
        Return a copy limited to ``count`` rows.

        None or a non-positive count renders no LIMIT clause.
        """
        if count is not None and (isinstance(count, bool) or not isinstance(count, int)):
            raise UnsupportedTypeError(count, "an integer row limit")
        return dataclasses.replace(self, row_limit=count)

    def write_query(self, writer: "SqlWriter") -> None:
        writer.write_raw("SELECT ")
        if self.column_names:
            writer.write_joined(self.column_names, writer.write_identifier)
        else:
            writer.write_raw("*")
        writer.write_raw(" FROM ")
        writer.write_identifier(self.table)
        self._write_where(writer, self.predicate)
        if self.ordering:
            writer.write_raw(" ORDER BY ")
            writer.write_joined(self.ordering, writer.write_expression)
        if self.row_limit is not None and self.row_limit > 0:
            writer.write_raw(f" LIMIT {self.row_limit:d}")
