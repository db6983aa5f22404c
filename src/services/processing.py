"""Process pass: hash values and identifiers in place.

Purpose: Apply the frozen name list and value blacklist to every scalar and
map key of the plan state, keeping its structure intact for debugging.
Date: 2026-10-12
Related tests: tests/services/test_processing.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.core.models.plan_tree import PlanKind, kind_of, stringify
from src.core.models.strip_context import StripContext
from src.services.hashing import hash_value
from src.services.matching import is_blacklisted, replace_names


@dataclass
class ProcessStats:
    """Counters describing what the process pass changed."""

    keys_renamed: int = 0
    values_hashed: int = 0
    values_kept: int = 0


def process_state(
    plan: dict[str, Any],
    context: StripContext,
    stats: ProcessStats | None = None,
) -> ProcessStats:
    """Hash every value and name in ``plan``; mutates it in place."""

    if stats is None:
        stats = ProcessStats()
    _process_mapping(plan, context, stats)
    return stats


def check_and_hash(value: Any, context: StripContext, stats: ProcessStats) -> str:
    """Return the sanitized replacement for a scalar value."""

    text = stringify(value)
    if is_blacklisted(text, context.value_blacklist):
        stats.values_kept += 1
        return replace_names(text, context.names)
    stats.values_hashed += 1
    return hash_value(text)


def hash_names_as_keys(
    mapping: dict[str, Any], context: StripContext, stats: ProcessStats
) -> None:
    """Rename keys that are discovered names to their hash tokens."""

    names = context.name_set
    renames = {key: hash_value(key) for key in mapping if key in names}
    if not renames:
        return

    items = list(mapping.items())
    mapping.clear()
    for key, value in items:
        mapping[renames.get(key, key)] = value
    stats.keys_renamed += len(renames)


def _process_mapping(
    mapping: dict[str, Any], context: StripContext, stats: ProcessStats
) -> None:
    for key, value in mapping.items():
        kind = kind_of(value)
        if kind is PlanKind.MAPPING:
            _process_mapping(value, context, stats)
        elif kind is PlanKind.SEQUENCE:
            _process_sequence(value, context, stats)
        elif kind is not PlanKind.NULL:
            mapping[key] = check_and_hash(value, context, stats)

    hash_names_as_keys(mapping, context, stats)


def _process_sequence(
    items: list[Any], context: StripContext, stats: ProcessStats
) -> None:
    for index, item in enumerate(items):
        kind = kind_of(item)
        if kind is PlanKind.MAPPING:
            _process_mapping(item, context, stats)
        elif kind is PlanKind.SEQUENCE:
            _process_sequence(item, context, stats)
        elif kind is not PlanKind.NULL:
            items[index] = check_and_hash(item, context, stats)
