"""
Render engine accumulating SQL text and bound values.

A SqlWriter lives for exactly one render pass. It owns the only
dialect-specific syntax (identifier quoting and placeholder spelling) so
that statements and expressions stay dialect-agnostic.
"""

from typing import Any, Callable, Iterable, List, Tuple, TypeVar

from ..dialects.base import SQLDialect
from ..expressions import (
    Binary,
    BoolOp,
    Column,
    Comparison,
    ComparisonOp,
    Direction,
    LiteralValue,
    Order,
)
from .exceptions import UnknownOperatorError

T = TypeVar("T")

COMPARISON_TOKENS = {
    ComparisonOp.EQ: " = ",
    ComparisonOp.NEQ: " <> ",
    ComparisonOp.LT: " < ",
    ComparisonOp.GT: " > ",
    ComparisonOp.LE: " <= ",
    ComparisonOp.GE: " >= ",
}

NULL_COMPARISON_TOKENS = {
    ComparisonOp.EQ: " IS NULL",
    ComparisonOp.NEQ: " IS NOT NULL",
}

BOOL_TOKENS = {
    BoolOp.AND: " AND ",
    BoolOp.OR: " OR ",
}

DIRECTION_TOKENS = {
    Direction.ASC: " ASC",
    Direction.DESC: " DESC",
}


class SqlWriter:
    """
    Accumulates SQL fragments and positional values for one render pass.

    Example:
        >>> from sqlforge.sql.dialects import PostgreSQLDialect
        >>> writer = SqlWriter(PostgreSQLDialect())
        >>> writer.write_identifier("c1")
        >>> writer.write_raw(" = ")
        >>> writer.write_value(123)
        >>> writer.render()
        ('"c1" = $1', [123])
    """

    def __init__(self, dialect: SQLDialect):
        self.dialect = dialect
        self._parts: List[str] = []
        self._values: List[Any] = []

    def write_raw(self, text: str) -> None:
        """Append SQL text verbatim."""
        self._parts.append(text)

    def write_identifier(self, name: str) -> None:
        """Append the dialect's quoted form of ``name``."""
        self._parts.append(self.dialect.quote(name))

    def write_value(self, value: Any) -> None:
        """Bind ``value`` and append the placeholder for its position."""
        self._values.append(value)
        self._parts.append(self.dialect.placeholder(len(self._values)))

    def write_joined(
        self, items: Iterable[T], write_item: Callable[[T], None], sep: str = ", "
    ) -> None:
        """Write each item with ``write_item``, separated by ``sep``."""
        for i, item in enumerate(items):
            if i > 0:
                self.write_raw(sep)
            write_item(item)

    def write_expression(self, expr: Any) -> None:
        """
        Render an expression node.

        Raises:
            UnknownOperatorError: If expr is not one of the known node kinds
                or carries an unknown operator/direction tag
        """
        if isinstance(expr, Column):
            self.write_identifier(expr.name)
        elif isinstance(expr, LiteralValue):
            self.write_value(expr.value)
        elif isinstance(expr, Comparison):
            self._write_comparison(expr)
        elif isinstance(expr, Binary):
            self._write_binary(expr)
        elif isinstance(expr, Order):
            self._write_order(expr)
        else:
            raise UnknownOperatorError("expression", type(expr).__name__)

    def _write_comparison(self, expr: Comparison) -> None:
        if expr.op not in COMPARISON_TOKENS:
            raise UnknownOperatorError("comparison", expr.op)
        self.write_expression(expr.left)
        if (
            expr.op in NULL_COMPARISON_TOKENS
            and isinstance(expr.right, LiteralValue)
            and expr.right.is_null
        ):
            self.write_raw(NULL_COMPARISON_TOKENS[expr.op])
            return
        self.write_raw(COMPARISON_TOKENS[expr.op])
        self.write_expression(expr.right)

    def _write_binary(self, expr: Binary) -> None:
        token = BOOL_TOKENS.get(expr.op)
        if token is None:
            raise UnknownOperatorError("binary expression", expr.op)
        self._write_binary_part(expr, expr.left)
        self.write_raw(token)
        self._write_binary_part(expr, expr.right)

    def _write_binary_part(self, parent: Binary, part: Any) -> None:
        # Parenthesize only a child whose connective differs from the parent's
        if isinstance(part, Binary) and part.op != parent.op:
            self.write_raw("(")
            self.write_expression(part)
            self.write_raw(")")
        else:
            self.write_expression(part)

    def _write_order(self, expr: Order) -> None:
        token = DIRECTION_TOKENS.get(expr.direction)
        if token is None:
            raise UnknownOperatorError("order", expr.direction)
        self.write_expression(expr.expr)
        self.write_raw(token)

    def render(self) -> Tuple[str, List[Any]]:
        """Return the accumulated SQL text and a copy of the bound values."""
        return "".join(self._parts), list(self._values)
