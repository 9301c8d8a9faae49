# Axiom - hashing.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""Domain-separated SHA-256 hashing, BIP-340 style."""

from __future__ import annotations

import hashlib
import re
from functools import lru_cache

from axiom_merkle.constants import ENCODING, HASH_HEX_LENGTH
from axiom_merkle.errors import InvalidArgumentError

HASH_REGEX = rf"^[0-9a-f]{{{HASH_HEX_LENGTH}}}$"

_HASH_PATTERN = re.compile(HASH_REGEX)
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode(ENCODING)


@lru_cache(maxsize=64)
def _tag_prefix(tag: bytes) -> bytes:
    """Return SHA256(tag) || SHA256(tag) for a tag."""
    tag_hash = hashlib.sha256(tag).digest()
    return tag_hash + tag_hash


def tagged_hash(message: str | bytes, tag: str | bytes) -> str:
    """Compute SHA256(SHA256(tag) || SHA256(tag) || message) as lowercase hex.

    Strings are encoded as UTF-8 before hashing. Every input is valid,
    the empty string included.
    """
    digest = hashlib.sha256(_tag_prefix(_to_bytes(tag)))
    digest.update(_to_bytes(message))
    return digest.hexdigest()


def hex_to_bytes(value: str) -> bytes:
    """Decode a hex string into raw bytes."""
    if len(value) % 2 == 1:
        raise InvalidArgumentError(
            f"hex string must have an even length, got {len(value)}",
        )
    if _HEX_PATTERN.fullmatch(value) is None:
        raise InvalidArgumentError(f"invalid hex string: {value!r}")
    return bytes.fromhex(value)


def bytes_to_hex(value: bytes) -> str:
    """Encode raw bytes as a lowercase hex string."""
    return value.hex()


def is_hash(value: str) -> bool:
    """Return True if value looks like a hash produced by tagged_hash."""
    return _HASH_PATTERN.fullmatch(value) is not None
