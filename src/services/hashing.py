"""Deterministic hash tokens for sanitized plan values.

FNV-1a (64 bit) is used because it is fast and stable across runs. The
tokens only need to hide identifiers and stay diffable, not resist attack.
"""

from __future__ import annotations

HASH_PREFIX = "hash_"

FNV64_OFFSET_BASIS = 0xCBF29CE484222325
FNV64_PRIME = 0x100000001B3
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def fnv1a_64(data: bytes) -> int:
    """Return the 64-bit FNV-1a digest of ``data``."""

    digest = FNV64_OFFSET_BASIS
    for byte in data:
        digest ^= byte
        digest = (digest * FNV64_PRIME) & _MASK_64
    return digest


def hash_value(value: str) -> str:
    """Return the ``hash_<decimal>`` token for ``value``."""

    return f"{HASH_PREFIX}{fnv1a_64(value.encode('utf-8'))}"
