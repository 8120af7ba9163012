"""
Boundary to the component that actually runs statements.

Connection handling, transactions and driver configuration live outside
this package. Anything with an ``execute(sql, values)`` method qualifies:
a thin wrapper over a DB-API cursor, an asyncpg connection adapter, a test
double.
"""

from typing import Any, Optional, Protocol, Sequence

from sqlforge.utils.logging import get_logger

from .builder import Builder
from .operations import Statement

logger = get_logger(__name__)


class StatementExecutor(Protocol):
    """Protocol for statement executors."""

    def execute(self, sql: str, values: Sequence[Any]) -> Any: ...


def execute_statement(
    executor: StatementExecutor,
    statement: Statement,
    builder: Optional[Builder] = None,
) -> Any:
    """
    Render ``statement`` and hand the result to ``executor``.

    Args:
        executor: Target executor
        statement: Statement to render
        builder: Builder to render with; defaults to the statement's own

    Returns:
        Whatever the executor returns

    Raises:
        Any rendering error, and any error raised by the executor, unchanged
    """
    sql, values = builder.build(statement) if builder is not None else statement.build()
    logger.info(
        "sql.execute",
        statement=statement.kind,
        table=statement.table,
        value_count=len(values),
    )
    try:
        return executor.execute(sql, values)
    except Exception as e:
        logger.error(
            "sql.execute_failed",
            statement=statement.kind,
            table=statement.table,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise
