"""Filers: translate named values into statements for a driver."""

from .base import Filer
from .config import FilerConfig
from .predicate import compile_assignments, compile_where
from .result import Skipped
from .table import InsertStyle, TableFiler

__all__ = [
    "Filer",
    "FilerConfig",
    "InsertStyle",
    "Skipped",
    "TableFiler",
    "compile_assignments",
    "compile_where",
]
