"""Typed construction parameters for filers."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..database.driver import Driver
from ..database.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Accepted property names and the field each one populates.
PROPERTY_ALIASES: dict[str, str] = {
    "driver": "driver",
    "io": "driver",
    "table": "table",
    "where": "where",
    "predicate": "where",
}


@dataclass
class FilerConfig:
    """Driver, table and predicate a filer is bound to.

    The driver is mandatory. Table and predicate are optional here and are
    checked by the individual operations that need them. The predicate is
    held by reference.
    """

    driver: Driver
    table: str | None = None
    where: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        if self.driver is None:
            raise ConfigurationError("A driver is required to construct a filer")

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        *,
        strict: bool = True,
    ) -> FilerConfig:
        """Build a config from a generic property mapping.

        Recognised keys are ``driver`` (alias ``io``), ``table`` and
        ``where`` (alias ``predicate``). The driver is checked before any
        other key is looked at.

        Args:
            properties: Named construction values.
            strict: If True, unknown keys raise ConfigurationError. If False,
                they are discarded.

        Returns:
            Populated FilerConfig.

        Raises:
            ConfigurationError: If no driver is given, or on unknown keys in
                strict mode.
        """
        driver = properties.get("driver", properties.get("io"))
        if driver is None:
            raise ConfigurationError("A driver is required to construct a filer")

        unknown = sorted(key for key in properties if key not in PROPERTY_ALIASES)
        if unknown and strict:
            raise ConfigurationError(f"Unknown filer properties: {', '.join(unknown)}")
        if unknown:
            logger.debug("Discarding unknown filer properties: %s", unknown)

        return cls(
            driver=driver,
            table=properties.get("table"),
            where=properties.get("where", properties.get("predicate")),
        )
