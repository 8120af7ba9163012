"""SQL UPDATE statement builder."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..expressions import BoolExpr, Value
from .base import Statement, as_names, as_predicate, as_values

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..core.writer import SqlWriter


@dataclass(frozen=True)
class Update(Statement):
    """
    UPDATE statement.

    Renders ``UPDATE <table> SET <c1> = <v1>, ... WHERE <predicate or 1 = 1>``.
    SET values are bound before the predicate, so their placeholders come
    first.
    """

    kind = "update"

    column_names: Tuple[str, ...] = ()
    value_nodes: Tuple[Value, ...] = ()
    predicate: Optional[BoolExpr] = None

    def columns(self, *names: str) -> Update:
        return dataclasses.replace(self, column_names=as_names(names))

    def values(self, *values: Any) -> Update:
        return dataclasses.replace(self, value_nodes=as_values(values))

    def where(self, predicate: Optional[BoolExpr]) -> Update:
        return dataclasses.replace(self, predicate=as_predicate(predicate))

    def write_query(self, writer: "SqlWriter") -> None:
        writer.write_raw("UPDATE ")
        writer.write_identifier(self.table)
        self._write_set(writer)
        self._write_where(writer, self.predicate)

    def _write_set(self, writer: "SqlWriter") -> None:
        self._check_shape(self.column_names, self.value_nodes)
        writer.write_raw(" SET ")
        for i, (name, value) in enumerate(zip(self.column_names, self.value_nodes)):
            if i > 0:
                writer.write_raw(", ")
            writer.write_identifier(name)
            writer.write_raw(" = ")
            writer.write_expression(value)
