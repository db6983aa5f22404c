"""Lists that drive the two sanitization passes.

The build pass fills a ``BuildContext``; ``freeze`` turns it into the
read-only ``StripContext`` consumed by the process pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

KEY_BLACKLIST = ("address", "type", "module_address", "index", "provider_name")
KEY_DELETELIST = ("tags", "tags_all", "description", "source")
WILDCARD_SUFFIX = "<value>"
VALUE_BLACKLIST_SEED = (
    "each.key",
    "count.index",
    "module." + WILDCARD_SUFFIX,
    "var." + WILDCARD_SUFFIX,
)


@dataclass
class BuildContext:
    """Accumulators filled during the build pass."""

    names: list[str] = field(default_factory=list)
    value_blacklist: list[str] = field(
        default_factory=lambda: list(VALUE_BLACKLIST_SEED)
    )
    key_blacklist: tuple[str, ...] = KEY_BLACKLIST
    key_deletelist: tuple[str, ...] = KEY_DELETELIST
    deleted_keys: int = 0


@dataclass(frozen=True)
class StripContext:
    """Frozen name list and value blacklist for the process pass.

    ``names`` is ordered longest first so that substitution never lets a
    short name corrupt a longer one containing it.
    """

    names: tuple[str, ...] = ()
    value_blacklist: tuple[str, ...] = VALUE_BLACKLIST_SEED

    @property
    def name_set(self) -> frozenset[str]:
        """Return the names as a set for exact key lookups."""
        return frozenset(self.names)


def deduplicate(values: Iterable[str]) -> list[str]:
    """Drop repeated entries, keeping the first occurrence of each."""

    return list(dict.fromkeys(values))


def freeze(context: BuildContext) -> StripContext:
    """Deduplicate and order the build pass output."""

    names = sorted(deduplicate(context.names), key=len, reverse=True)
    return StripContext(
        names=tuple(names),
        value_blacklist=tuple(deduplicate(context.value_blacklist)),
    )
