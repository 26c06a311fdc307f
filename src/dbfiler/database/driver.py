"""Driver contract consumed by filers.

A driver executes raw SQL text, quotes scalar values for interpolation and
exposes transaction primitives. Filers only ever talk to this surface.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResultHandle(Protocol):
    """Result of one executed statement."""

    @property
    def rowcount(self) -> int: ...

    @property
    def lastrowid(self) -> int | None: ...

    def fetch_one(self) -> dict[str, Any] | None: ...


@runtime_checkable
class Driver(Protocol):
    """Minimum capability set a filer needs from a database driver.

    ``execute`` and ``quote`` raise a driver-defined error on failure;
    filers propagate it unchanged.
    """

    def execute(self, sql: str) -> ResultHandle: ...

    def quote(self, value: Any) -> str: ...

    def begin(self) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
