"""Capability set shared by filers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Filer(Protocol):
    """Anything that can load, store, insert and delete one entity's data."""

    def load(self, *fields: str) -> Mapping[str, Any]: ...

    def store(self, values: Mapping[str, Any]) -> Any: ...

    def insert(self, values: Mapping[str, Any]) -> Any: ...

    def delete(self) -> Any: ...

    def begin(self) -> bool: ...

    def commit(self) -> bool: ...

    def rollback(self) -> bool: ...
