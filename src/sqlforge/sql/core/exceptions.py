"""
Exception hierarchy for the SQL statement builder.

Every error here signals misuse of the builder API or a broken internal
invariant, never an environmental condition, so none of them is meant to be
caught and retried.
"""

from typing import Any, Dict, Iterable, Optional


def _with_context(message: str, context_parts: Iterable[str]) -> str:
    parts = list(context_parts)
    if parts:
        return f"{message} ({', '.join(parts)})"
    return message


class SqlBuilderError(Exception):
    """Base exception for all statement-builder errors."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
        }


class UnsupportedTypeError(SqlBuilderError, TypeError):
    """
    Raised when a value cannot be wrapped into an expression node.

    Raised at construction time, so the faulty call site shows up in the
    traceback instead of a later render.

    Args:
        value: The offending input
        expected: Short description of what was acceptable (optional)
    """

    def __init__(self, value: Any, expected: Optional[str] = None):
        self.type_name = type(value).__name__
        self.expected = expected

        context_parts = []
        if expected:
            context_parts.append(f"expected {expected}")
        super().__init__(
            _with_context(f"unsupported type: {self.type_name}", context_parts)
        )


class StatementShapeError(SqlBuilderError, ValueError):
    """
    Raised when an INSERT or UPDATE has no columns or mismatched counts.

    Args:
        message: Error description
        statement: Statement kind, e.g. "insert" (optional)
        table: Target table (optional)
        column_count: Number of configured columns (optional)
        value_count: Number of configured values (optional)
    """

    def __init__(
        self,
        message: str,
        statement: Optional[str] = None,
        table: Optional[str] = None,
        column_count: Optional[int] = None,
        value_count: Optional[int] = None,
    ):
        self.statement = statement
        self.table = table
        self.column_count = column_count
        self.value_count = value_count

        context_parts = []
        if statement:
            context_parts.append(f"statement='{statement}'")
        if table:
            context_parts.append(f"table='{table}'")
        if column_count is not None:
            context_parts.append(f"columns={column_count}")
        if value_count is not None:
            context_parts.append(f"values={value_count}")

        super().__init__(_with_context(message, context_parts))

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            statement=self.statement,
            table=self.table,
            column_count=self.column_count,
            value_count=self.value_count,
        )
        return data


class UnknownOperatorError(SqlBuilderError, RuntimeError):
    """Raised when rendering meets a node kind or tag outside the closed set."""

    def __init__(self, kind: str, tag: Any):
        self.kind = kind
        self.tag = tag
        super().__init__(f"unsupported {kind}: {tag!r}")


class DialectMismatchError(SqlBuilderError):
    """Raised when a dialect-specific statement is rendered by another dialect."""

    def __init__(self, statement: str, required: str, actual: str):
        self.statement = statement
        self.required = required
        self.actual = actual
        super().__init__(
            f"{statement} statement requires the '{required}' dialect, "
            f"got '{actual}'"
        )


class UnknownDialectError(SqlBuilderError, KeyError):
    """Raised when a dialect name does not resolve to a registered dialect."""

    def __init__(self, name: str, available: Iterable[str]):
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"Unknown dialect '{name}'. Available: {', '.join(self.available)}"
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
