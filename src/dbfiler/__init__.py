"""
dbfiler core package.

Provides:
- A table-level persistence adapter (`dbfiler.filer`) that turns named
  values into SELECT / UPDATE / INSERT / DELETE statements
- A driver contract and a SQLite implementation (`dbfiler.database`)
- A minimal Typer-based CLI (`dbfiler.cli`)

Configuration:
- Shared, project-wide filesystem anchors live in `dbfiler.global_config`.
"""

from .database import ConfigurationError, DriverError, SQLiteDriver
from .filer import InsertStyle, Skipped, TableFiler

__all__ = [
    "ConfigurationError",
    "DriverError",
    "InsertStyle",
    "SQLiteDriver",
    "Skipped",
    "TableFiler",
]
