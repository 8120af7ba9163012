"""
Shared statement behavior.

Statements are frozen records. Every fluent method returns a modified copy
(``dataclasses.replace``), so a statement handed to several call sites can
be specialized independently and rendered concurrently.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple, TypeVar

from sqlforge.utils.logging import bind_context

from ..core.exceptions import StatementShapeError, UnsupportedTypeError
from ..expressions import BoolExpr, Value, is_bool_expression, wrap_value

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..builder import Builder
    from ..core.writer import SqlWriter


TAUTOLOGY = "1 = 1"

S = TypeVar("S", bound="Statement")


def as_names(names: Iterable[Any]) -> Tuple[str, ...]:
    """Validate column names eagerly so misuse fails at the call site."""
    result = tuple(names)
    for name in result:
        if not isinstance(name, str):
            raise UnsupportedTypeError(name, "a column name string")
    return result


def as_values(values: Iterable[Any]) -> Tuple[Value, ...]:
    return tuple(wrap_value(v) for v in values)


def as_predicate(predicate: Any) -> Optional[BoolExpr]:
    if predicate is not None and not is_bool_expression(predicate):
        raise UnsupportedTypeError(predicate, "a boolean expression")
    return predicate


@dataclass(frozen=True)
class Statement:
    """
    Base record for all statements.

    Attributes:
        table: Target table name
        builder: Builder that created the statement; None renders through
            the default builder from settings
    """

    kind = "statement"

    table: str
    builder: Optional["Builder"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.table, str):
            raise UnsupportedTypeError(self.table, "a table name string")

    def with_table(self: S, table: str) -> S:
        """Return a copy targeting another table."""
        return dataclasses.replace(self, table=table)

    def write_query(self, writer: "SqlWriter") -> None:
        raise NotImplementedError

    def build(self) -> Tuple[str, List[Any]]:
        """Render SQL text and bound values."""
        return self._resolve_builder().build(self)

    def string(self) -> str:
        """Render SQL text without values."""
        sql, _ = self.build()
        return sql

    def __str__(self) -> str:
        return self.string()

    def _resolve_builder(self) -> "Builder":
        if self.builder is not None:
            return self.builder
        from ..builder import get_default_builder

        return get_default_builder()

    def _write_where(self, writer: "SqlWriter", predicate: Optional[BoolExpr]) -> None:
        writer.write_raw(" WHERE ")
        if predicate is None:
            writer.write_raw(TAUTOLOGY)
            return
        writer.write_expression(predicate)

    def _check_shape(self, names: Tuple[str, ...], values: Tuple[Value, ...]) -> None:
        """Reject empty or mismatched column/value lists."""
        error = None
        if not names:
            error = StatementShapeError(
                "list of names can not be empty",
                statement=self.kind,
                table=self.table,
                column_count=0,
                value_count=len(values),
            )
        elif len(names) != len(values):
            error = StatementShapeError(
                "amount of names and values differs",
                statement=self.kind,
                table=self.table,
                column_count=len(names),
                value_count=len(values),
            )
        if error is not None:
            log = bind_context(__name__, statement=self.kind, table=self.table)
            log.error("sql.shape_invalid", **error.to_dict())
            raise error
