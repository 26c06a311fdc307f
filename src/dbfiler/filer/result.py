"""Result type for filer operations that issue no statement."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


class Skipped(Mapping[str, Any]):
    """Returned when a filer operation is a no-op.

    A Skipped result is falsy and behaves as an empty mapping, so
    ``if not filer.store(...)`` and ``filer.load(...) == {}`` both hold,
    while ``isinstance(result, Skipped)`` still tells a skip apart from a
    statement that ran and matched nothing.

    Attributes:
        reason: Why no statement was issued.
    """

    __slots__ = ("reason",)

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def __getitem__(self, key: str) -> Any:
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Skipped({self.reason!r})"
