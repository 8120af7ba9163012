"""
Expression algebra for building predicates and values.

Expression trees are closed over five immutable node kinds:

- Column: a quoted column reference
- LiteralValue: a bound parameter (``None`` renders as ``IS [NOT] NULL``)
- Comparison: ``left <op> right`` over two values
- Binary: ``AND`` / ``OR`` over two boolean expressions
- Order: an expression with an ``ASC`` / ``DESC`` direction

Nodes never change after construction; combinators return new nodes, so a
tree can be shared and rendered any number of times.

Usage:
    >>> from sqlforge.sql.expressions import Column
    >>> x = Column("x")
    >>> predicate = x.greater(0).and_(x.less_equal(100)).or_(x.less(-10))
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .core.exceptions import UnsupportedTypeError


class ComparisonOp(str, Enum):
    """Comparison operators."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    GT = "gt"
    LE = "le"
    GE = "ge"


class BoolOp(str, Enum):
    """Boolean connectives."""

    AND = "and"
    OR = "or"


class Direction(str, Enum):
    """Sort directions."""

    ASC = "asc"
    DESC = "desc"


class _Comparable:
    """Comparison factories shared by value nodes."""

    def _compare(self, op: ComparisonOp, other: Any) -> Comparison:
        return Comparison(op=op, left=self, right=wrap_value(other))  # type: ignore[arg-type]

    def equal(self, other: Any) -> Comparison:
        """Build ``self = other`` (``IS NULL`` when other is None)."""
        return self._compare(ComparisonOp.EQ, other)

    def not_equal(self, other: Any) -> Comparison:
        """Build ``self <> other`` (``IS NOT NULL`` when other is None)."""
        return self._compare(ComparisonOp.NEQ, other)

    def less(self, other: Any) -> Comparison:
        return self._compare(ComparisonOp.LT, other)

    def greater(self, other: Any) -> Comparison:
        return self._compare(ComparisonOp.GT, other)

    def less_equal(self, other: Any) -> Comparison:
        return self._compare(ComparisonOp.LE, other)

    def greater_equal(self, other: Any) -> Comparison:
        return self._compare(ComparisonOp.GE, other)


class _Combinable:
    """Boolean combinators shared by predicate nodes."""

    def _combine(self, op: BoolOp, other: Any) -> Binary:
        if not isinstance(other, (Comparison, Binary)):
            raise UnsupportedTypeError(other, "a boolean expression")
        return Binary(op=op, left=self, right=other)  # type: ignore[arg-type]

    def and_(self, other: BoolExpr) -> Binary:
        return self._combine(BoolOp.AND, other)

    def or_(self, other: BoolExpr) -> Binary:
        return self._combine(BoolOp.OR, other)


@dataclass(frozen=True)
class Column(_Comparable):
    """Table column reference."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise UnsupportedTypeError(self.name, "a column name string")


@dataclass(frozen=True)
class LiteralValue(_Comparable):
    """Scalar bound as a positional parameter."""

    value: Any

    @property
    def is_null(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Comparison(_Combinable):
    op: ComparisonOp
    left: Value
    right: Value


@dataclass(frozen=True)
class Binary(_Combinable):
    op: BoolOp
    left: BoolExpr
    right: BoolExpr


@dataclass(frozen=True)
class Order:
    """Expression with a sort direction, used in ORDER BY."""

    direction: Direction
    expr: Expression


Value = Union[Column, LiteralValue]
BoolExpr = Union[Comparison, Binary]
Expression = Union[Column, LiteralValue, Comparison, Binary, Order]

_VALUE_TYPES = (Column, LiteralValue)
_BOOL_TYPES = (Comparison, Binary)
_EXPRESSION_TYPES = (Column, LiteralValue, Comparison, Binary, Order)


def value(obj: Any) -> LiteralValue:
    """
    Wrap a raw scalar into a literal node.

    Lets a bound value sit on the left side of a comparison:

        >>> value(10).less(Column("x"))
    """
    if isinstance(obj, _EXPRESSION_TYPES):
        raise UnsupportedTypeError(obj, "a raw scalar")
    return LiteralValue(obj)


def wrap_value(obj: Any) -> Value:
    """
    Normalize ``obj`` into a value node.

    Columns and literals pass through unchanged; any other expression kind
    is rejected; everything else becomes a literal.

    Raises:
        UnsupportedTypeError: If obj is a boolean or order expression
    """
    if isinstance(obj, _VALUE_TYPES):
        return obj
    if isinstance(obj, _EXPRESSION_TYPES):
        raise UnsupportedTypeError(obj, "a column or literal value")
    return LiteralValue(obj)


def wrap_expression(obj: Any) -> Expression:
    """
    Normalize ``obj`` into an expression node; a bare string names a column.

    Raises:
        UnsupportedTypeError: If obj is neither an expression nor a string
    """
    if isinstance(obj, _EXPRESSION_TYPES):
        return obj
    if isinstance(obj, str):
        return Column(obj)
    raise UnsupportedTypeError(obj, "an expression or column name")


def _order(direction: Direction, obj: Any) -> Order:
    # Re-ordering replaces the direction instead of nesting
    if isinstance(obj, Order):
        return Order(direction=direction, expr=obj.expr)
    return Order(direction=direction, expr=wrap_expression(obj))


def ascending(obj: Any) -> Order:
    """Sort by ``obj`` ascending; an existing Order keeps only its expression."""
    return _order(Direction.ASC, obj)


def descending(obj: Any) -> Order:
    """Sort by ``obj`` descending; an existing Order keeps only its expression."""
    return _order(Direction.DESC, obj)


def wrap_order_expression(obj: Any) -> Order:
    """Pass an Order through; default anything else to ascending."""
    if isinstance(obj, Order):
        return obj
    return ascending(obj)


def is_bool_expression(obj: Any) -> bool:
    return isinstance(obj, _BOOL_TYPES)
