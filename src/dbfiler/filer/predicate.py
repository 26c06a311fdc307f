"""Compile column/value mappings into SQL fragments.

Column names are interpolated verbatim and must come from code, not from
end users. Values always pass through the driver's ``quote``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

Quote = Callable[[Any], str]


def _pairs(values: Mapping[str, Any], quote: Quote) -> list[str]:
    return [f"{column}={quote(value)}" for column, value in values.items()]


def compile_where(where: Any, quote: Quote) -> str | None:
    """Build the body of a WHERE clause from a predicate mapping.

    Args:
        where: Column to match-value mapping. Anything that is not a
            Mapping (including None) means no predicate was supplied.
        quote: Driver quoting function applied to every value.

    Returns:
        ``"c1=<q1> AND c2=<q2>"`` in the mapping's iteration order, ``""``
        for an empty mapping, or None when there is no predicate at all.
    """
    if not isinstance(where, Mapping):
        return None
    return " AND ".join(_pairs(where, quote))


def compile_assignments(values: Mapping[str, Any], quote: Quote) -> str:
    """Build a ``c1=<q1>,c2=<q2>`` assignment list for SET clauses."""
    return ",".join(_pairs(values, quote))
