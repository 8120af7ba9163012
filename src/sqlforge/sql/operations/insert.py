"""
SQL INSERT statement builder.

Renders ``INSERT INTO <table> (<columns>) VALUES (<values>)``. Values are
wrapped eagerly: raw scalars become bound parameters, Column objects render
as identifiers.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Tuple

from ..expressions import Value
from .base import Statement, as_names, as_values

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..core.writer import SqlWriter


@dataclass(frozen=True)
class Insert(Statement):
    """
    INSERT statement.

    The column list must be non-empty and match the value list in length;
    this is checked when the statement is rendered.

    Example:
        >>> from sqlforge.sql import Builder
        >>> Builder("sqlite").insert("t1").columns("c2", "c3").values("a", "b").build()
        ('INSERT INTO "t1" ("c2", "c3") VALUES (?1, ?2)', ['a', 'b'])
    """

    kind = "insert"

    column_names: Tuple[str, ...] = ()
    value_nodes: Tuple[Value, ...] = ()

    def columns(self, *names: str) -> Insert:
        return dataclasses.replace(self, column_names=as_names(names))

    def values(self, *values: Any) -> Insert:
        return dataclasses.replace(self, value_nodes=as_values(values))

    def write_query(self, writer: "SqlWriter") -> None:
        writer.write_raw("INSERT INTO ")
        writer.write_identifier(self.table)
        self._write_insert(writer)

    def _write_insert(self, writer: "SqlWriter") -> None:
        self._check_shape(self.column_names, self.value_nodes)
        writer.write_raw(" (")
        writer.write_joined(self.column_names, writer.write_identifier)
        writer.write_raw(") VALUES (")
        writer.write_joined(self.value_nodes, writer.write_expression)
        writer.write_raw(")")
