"""Value matching and name substitution for the process pass.

Purpose: Decide which scalars stay legible and scrub discovered resource,
module, and variable names out of the ones that do.
Date: 2026-10-12
Related tests: tests/services/test_matching.py
"""

from __future__ import annotations

from typing import Sequence

from src.core.models.strip_context import WILDCARD_SUFFIX
from src.services.hashing import hash_value


def replace_names(value: str, names: Sequence[str]) -> str:
    """Replace every occurrence of each name in ``value`` with its hash token.

    ``names`` must already be ordered longest first. Matching is plain
    substring matching, so a short name inside an unrelated word is replaced
    too.
    """

    for name in names:
        if name and name in value:
            value = value.replace(name, hash_value(name))
    return value


def is_blacklisted(value: str, value_blacklist: Sequence[str]) -> bool:
    """Return True when ``value`` is exempt from hashing.

    Entries ending in ``<value>`` match any value starting with the text
    before the suffix; all other entries must match exactly.
    """

    for entry in value_blacklist:
        if entry.endswith(WILDCARD_SUFFIX):
            if value.startswith(entry[: -len(WILDCARD_SUFFIX)]):
                return True
        elif value == entry:
            return True
    return False
