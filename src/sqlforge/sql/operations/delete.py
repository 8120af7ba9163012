"""SQL DELETE statement builder."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..expressions import BoolExpr
from .base import Statement, as_predicate

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from ..core.writer import SqlWriter


@dataclass(frozen=True)
class Delete(Statement):
    """``DELETE FROM <table> WHERE <predicate or 1 = 1>``."""

    kind = "delete"

    predicate: Optional[BoolExpr] = None

    def where(self, predicate: Optional[BoolExpr]) -> Delete:
        return dataclasses.replace(self, predicate=as_predicate(predicate))

    def write_query(self, writer: "SqlWriter") -> None:
        writer.write_raw("DELETE FROM ")
        writer.write_identifier(self.table)
        self._write_where(writer, self.predicate)
