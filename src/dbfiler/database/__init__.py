"""Public interface for the database package.

This module exposes the driver contract, the SQLite driver, connection
helpers, and the project's database exception types.
"""

from .connection import execute_script, get_connection, transaction
from .driver import Driver, ResultHandle
from .errors import (
    ConfigurationError,
    DatabaseError,
    DriverError,
    IntegrityError,
    ParamsMissing,
)
from .sqlite_driver import SQLiteDriver, SQLiteResult

__all__ = [
    "get_connection",
    "transaction",
    "execute_script",
    "Driver",
    "ResultHandle",
    "SQLiteDriver",
    "SQLiteResult",
    "DatabaseError",
    "ConfigurationError",
    "ParamsMissing",
    "DriverError",
    "IntegrityError",
]
