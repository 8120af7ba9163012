"""
SQL statement building.

This package builds SQL statements from immutable expression trees and
renders them with proper identifier quoting and dialect-specific
positional placeholders.

Usage:
    >>> from sqlforge.sql import Builder, Column
    >>> x = Column("x")
    >>> Builder("postgres").select("t1").where(
    ...     x.greater(0).and_(x.less_equal(100)).or_(x.less(-10))
    ... ).build()
    ('SELECT * FROM "t1" WHERE ("x" > $1 AND "x" <= $2) OR "x" < $3', [0, 100, -10])
"""

# Import order matters: dialects pull in operations, the builder pulls in both.
from .core.exceptions import (
    DialectMismatchError,
    SqlBuilderError,
    StatementShapeError,
    UnknownDialectError,
    UnknownOperatorError,
    UnsupportedTypeError,
)
from .expressions import (
    Binary,
    BoolOp,
    Column,
    Comparison,
    ComparisonOp,
    Direction,
    LiteralValue,
    Order,
    ascending,
    descending,
    value,
    wrap_expression,
    wrap_value,
)
from .dialects import (
    Dialect,
    PostgreSQLDialect,
    PostgresInsert,
    SQLiteDialect,
    get_dialect,
)
from .operations import Delete, Insert, Select, Statement, Update
from .core.writer import SqlWriter
from .builder import Builder, get_default_builder
from .executor import StatementExecutor, execute_statement

__all__ = [
    "Builder",
    "get_default_builder",
    "SqlWriter",
    "Dialect",
    "get_dialect",
    "PostgreSQLDialect",
    "SQLiteDialect",
    "Statement",
    "Select",
    "Insert",
    "PostgresInsert",
    "Update",
    "Delete",
    "Column",
    "LiteralValue",
    "Comparison",
    "ComparisonOp",
    "Binary",
    "BoolOp",
    "Order",
    "Direction",
    "value",
    "wrap_value",
    "wrap_expression",
    "ascending",
    "descending",
    "StatementExecutor",
    "execute_statement",
    "SqlBuilderError",
    "UnsupportedTypeError",
    "StatementShapeError",
    "UnknownOperatorError",
    "DialectMismatchError",
    "UnknownDialectError",
]
