"""Tests for hash token generation."""

from __future__ import annotations

import itertools
import string
import unittest

from src.services.hashing import HASH_PREFIX, fnv1a_64, hash_value

TC = unittest.TestCase()


def test_fnv1a_64_matches_reference_vectors() -> None:
    """fnv1a_64 should reproduce the published FNV-1a test vectors."""

    TC.assertEqual(fnv1a_64(b""), 0xCBF29CE484222325)
    TC.assertEqual(fnv1a_64(b"a"), 0xAF63DC4C8601EC8C)


def test_hash_value_format() -> None:
    """hash_value should render an unsigned decimal digest after the prefix."""

    TC.assertEqual(hash_value("a"), "hash_12638187200555641996")
    token = hash_value("aws_instance.web")
    TC.assertTrue(token.startswith(HASH_PREFIX))
    digits = token[len(HASH_PREFIX):]
    TC.assertTrue(digits.isdigit())
    TC.assertLess(int(digits), 2**64)


def test_hash_value_is_deterministic() -> None:
    """Equal inputs should always yield the same token."""

    TC.assertEqual(hash_value("web"), hash_value("web"))
    TC.assertEqual(hash_value("web"), "hash_6818697334544801521")


def test_hash_value_handles_unicode() -> None:
    """Non-ASCII input is hashed over its UTF-8 bytes."""

    TC.assertEqual(hash_value("größe"), f"hash_{fnv1a_64('größe'.encode('utf-8'))}")
    TC.assertNotEqual(hash_value("größe"), hash_value("grosse"))


def test_hash_value_distinct_for_short_strings() -> None:
    """Many distinct short identifiers should not collide."""

    alphabet = string.ascii_lowercase + string.digits + "-_."
    inputs = ["".join(chars) for chars in itertools.product(alphabet, repeat=3)]
    tokens = {hash_value(value) for value in inputs}
    TC.assertEqual(len(tokens), len(inputs))
