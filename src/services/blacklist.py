"""Build pass: discover names, collect legible values, drop noise keys.

Purpose: Walk the plan state once before any value is touched, recording
which identifiers must be hashed everywhere and which values stay legible.
Date: 2026-10-12
Related tests: tests/services/test_blacklist.py
"""

from __future__ import annotations

import logging
from typing import Any

from src.core.models.plan_tree import PlanKind, kind_of, stringify
from src.core.models.strip_context import BuildContext
from src.services.errors import StructuralAssumptionError

logger = logging.getLogger(__name__)

PROVIDER_CONFIG_KEY = "provider_config"
MODULE_CALLS_KEY = "module_calls"
VARIABLES_KEY = "variables"


def build_blacklist(plan: dict[str, Any], context: BuildContext) -> None:
    """Run the build pass over the root of a plan state.

    The root is not a resource block, so no names are collected from it;
    its noise keys are still removed.
    """

    for child_key, child in plan.items():
        _build_value(child_key, child, context)
    delete_irrelevant_keys(plan, context)


def collect_names(key: str, mapping: dict[str, Any], context: BuildContext) -> None:
    """Add resource, module, and variable names found at ``mapping``."""

    if "address" in mapping and "name" in mapping:
        name = mapping["name"]
        if kind_of(name) is not PlanKind.NULL:
            context.names.append(stringify(name))

    if key in (MODULE_CALLS_KEY, VARIABLES_KEY):
        context.names.extend(mapping.keys())


def check_and_blacklist(key: str, value: Any, context: BuildContext) -> None:
    """Keep values under structural keys such as ``address`` legible."""

    if key in context.key_blacklist:
        context.value_blacklist.append(stringify(value))


def exempt_provider_names(providers: Any, context: BuildContext) -> None:
    """Keep every provider name from a ``provider_config`` map legible."""

    if kind_of(providers) is not PlanKind.MAPPING:
        raise StructuralAssumptionError(
            f"Expected {PROVIDER_CONFIG_KEY} to be an object, "
            f"got {kind_of(providers).name.lower()}"
        )

    for provider_key, provider in providers.items():
        if kind_of(provider) is not PlanKind.MAPPING:
            raise StructuralAssumptionError(
                f"Provider config entry '{provider_key}' is not an object"
            )
        name = provider.get("name")
        if not isinstance(name, str):
            raise StructuralAssumptionError(
                f"Provider config entry '{provider_key}' has no string 'name'"
            )
        context.value_blacklist.append(name)


def delete_irrelevant_keys(mapping: dict[str, Any], context: BuildContext) -> int:
    """Remove free-form keys such as ``tags`` and return how many were dropped."""

    doomed = [key for key in mapping if key in context.key_deletelist]
    for key in doomed:
        del mapping[key]
    context.deleted_keys += len(doomed)
    return len(doomed)


def _build_mapping(key: str, mapping: dict[str, Any], context: BuildContext) -> None:
    for child_key, child in mapping.items():
        _build_value(child_key, child, context)

    collect_names(key, mapping, context)
    if delete_irrelevant_keys(mapping, context):
        logger.debug("Dropped noise keys below '%s'", key or "<root>")


def _build_value(key: str, value: Any, context: BuildContext) -> None:
    kind = kind_of(value)
    if kind is PlanKind.NULL:
        return

    if key == PROVIDER_CONFIG_KEY:
        exempt_provider_names(value, context)

    if kind is PlanKind.MAPPING:
        _build_mapping(key, value, context)
    elif kind is PlanKind.SEQUENCE:
        _build_sequence(key, value, context)
    else:
        check_and_blacklist(key, value, context)


def _build_sequence(key: str, items: list[Any], context: BuildContext) -> None:
    for item in items:
        kind = kind_of(item)
        if kind is PlanKind.MAPPING:
            _build_mapping(key, item, context)
        elif kind is PlanKind.SEQUENCE:
            _build_sequence(key, item, context)
        elif kind is not PlanKind.NULL:
            check_and_blacklist(key, item, context)
