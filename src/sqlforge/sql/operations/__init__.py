"""Statement builders: SELECT, INSERT, UPDATE, DELETE."""

from .base import Statement
from .delete import Delete
from .insert import Insert
from .select import Select
from .update import Update

__all__ = [
    "Statement",
    "Select",
    "Insert",
    "Update",
    "Delete",
]
