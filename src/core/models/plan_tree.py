"""Tagged view over a decoded plan state document."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from src.services.errors import StructuralAssumptionError


class PlanKind(Enum):
    """The six shapes a decoded JSON value can take."""

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    SEQUENCE = auto()
    MAPPING = auto()


SCALAR_KINDS = frozenset({PlanKind.BOOLEAN, PlanKind.NUMBER, PlanKind.STRING})


def kind_of(value: Any) -> PlanKind:
    """Classify ``value`` as one of the plan tree variants.

    Raises:
        StructuralAssumptionError: When ``value`` is not a JSON-decoded type.
    """

    if value is None:
        return PlanKind.NULL
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return PlanKind.BOOLEAN
    if isinstance(value, (int, float)):
        return PlanKind.NUMBER
    if isinstance(value, str):
        return PlanKind.STRING
    if isinstance(value, list):
        return PlanKind.SEQUENCE
    if isinstance(value, dict):
        return PlanKind.MAPPING
    raise StructuralAssumptionError(
        f"Unsupported value of type {type(value).__name__} in plan state"
    )


def stringify(value: Any) -> str:
    """Return the stable string form used for hashing and blacklist lookups."""

    kind = kind_of(value)
    if kind is PlanKind.STRING:
        return value
    if kind is PlanKind.BOOLEAN:
        return "true" if value else "false"
    if kind is PlanKind.NULL:
        return "null"
    if kind is PlanKind.NUMBER:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return repr(value)
    raise StructuralAssumptionError(
        f"Cannot stringify a {kind.name.lower()} value from the plan state"
    )
