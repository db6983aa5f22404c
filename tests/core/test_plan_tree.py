"""Tests for the plan tree classification helpers."""

from __future__ import annotations

import unittest

import pytest

from src.core.models.plan_tree import PlanKind, kind_of, stringify
from src.services.errors import StructuralAssumptionError

TC = unittest.TestCase()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, PlanKind.NULL),
        (True, PlanKind.BOOLEAN),
        (False, PlanKind.BOOLEAN),
        (0, PlanKind.NUMBER),
        (1.5, PlanKind.NUMBER),
        ("text", PlanKind.STRING),
        ([], PlanKind.SEQUENCE),
        ({}, PlanKind.MAPPING),
    ],
)
def test_kind_of_classifies_json_values(value: object, expected: PlanKind) -> None:
    """kind_of should map each decoded JSON type to its variant."""

    TC.assertIs(kind_of(value), expected)


def test_kind_of_rejects_foreign_types() -> None:
    """Values that json.loads never produces are a structural error."""

    with pytest.raises(StructuralAssumptionError, match="tuple"):
        kind_of(("a", "b"))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("us-east-1", "us-east-1"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (3.0, "3"),
        (0.25, "0.25"),
        (-7, "-7"),
        (None, "null"),
    ],
)
def test_stringify_is_stable(value: object, expected: str) -> None:
    """stringify should render scalars the same way on every run."""

    TC.assertEqual(stringify(value), expected)


def test_stringify_rejects_containers() -> None:
    """Containers have no scalar string form."""

    with pytest.raises(StructuralAssumptionError, match="mapping"):
        stringify({"a": 1})
