"""Non-fatal diagnostics returned alongside engine results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

UNRESOLVED_REFERENCE = "unresolved_reference"
MISSING_KEY = "missing_key"
SIGN_MISMATCH = "sign_mismatch"


@dataclass(slots=True, frozen=True)
class EngineWarning:
    """Something in the input could not be used as-is.

    The result it accompanies is still complete; callers that need strict
    validation inspect these entries instead of catching exceptions.
    """

    kind: str
    entity: str
    entity_id: Any
    message: str


def log_warnings(logger: logging.Logger, warnings: Iterable[EngineWarning]) -> None:
    """Emit each warning through *logger* with structured extras."""

    for warning in warnings:
        logger.warning(
            warning.message,
            extra={"kind": warning.kind, "entity": warning.entity, "entity_id": warning.entity_id},
        )


__all__ = [
    "EngineWarning",
    "MISSING_KEY",
    "SIGN_MISMATCH",
    "UNRESOLVED_REFERENCE",
    "log_warnings",
]
