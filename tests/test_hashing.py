# Axiom - test_hashing.py

import hashlib

import pytest

from axiom_merkle.constants import HASH_HEX_LENGTH
from axiom_merkle.errors import InvalidArgumentError
from axiom_merkle.hashing import bytes_to_hex, hex_to_bytes, is_hash, tagged_hash
from axiom_merkle.merkle import ProofStep, Side

TAG = "Bitcoin_Transaction"


def test_tagged_hash_matches_known_values() -> None:
    """Tests tagged hashes captured from an independent sha256sum run."""
    assert tagged_hash("aaa", TAG) == (
        "d2d838724571ff750eb7f498a667c32f522efae2b403eae6f678207ac6f978de"
    )
    assert tagged_hash("", TAG) == (
        "7288e9650f39079335493343efab78b07d5ba3883424bc5428b797450b7c4aac"
    )


def test_tagged_hash_is_doubled_tag_prefix() -> None:
    """Tests the SHA256(SHA256(tag) || SHA256(tag) || msg) construction."""
    tag_hash = hashlib.sha256(TAG.encode("utf-8")).digest()
    expected = hashlib.sha256(tag_hash + tag_hash + b"bbb").hexdigest()
    assert tagged_hash("bbb", TAG) == expected


def test_tagged_hash_encodes_non_ascii_as_utf8() -> None:
    """Tests that non-ASCII input is hashed as its UTF-8 bytes."""
    expected = (
        "93a075e06e4f91da5e0c7f9249c2e197f46ee1c115c4ba2c912bea1bcdd5ed88"
    )
    assert tagged_hash("héllo", TAG) == expected
    assert tagged_hash("héllo".encode("utf-8"), TAG.encode("utf-8")) == (
        expected
    )


def test_tagged_hash_separates_domains() -> None:
    """Tests that the same message under two tags gives two hashes."""
    leaf = tagged_hash("aaa", "ProofOfReserve_Leaf")
    branch = tagged_hash("aaa", "ProofOfReserve_Branch")
    assert leaf != branch
    assert is_hash(leaf)
    assert is_hash(branch)


def test_hex_conversions() -> None:
    """Tests hex helpers on a real digest."""
    digest = tagged_hash("ccc", TAG)
    raw = hex_to_bytes(digest)
    assert len(raw) == 32
    assert bytes_to_hex(raw) == digest


@pytest.mark.parametrize(
    "bad",
    ["abc", "zz", "0g", "ab  cd", " abcd ", "ab\ncd", "+1"],
)
def test_hex_to_bytes_rejects_malformed_input(bad: str) -> None:
    """Tests that malformed hex raises InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        hex_to_bytes(bad)


def test_is_hash() -> None:
    """Tests recognition of 64-character lowercase hex strings."""
    assert is_hash("0" * 64)
    assert not is_hash("0" * 63)
    assert not is_hash("A" * 64)
    assert not is_hash("")


def test_hex_to_bytes_accepts_either_case() -> None:
    """Tests that upper and lower case digits decode the same way."""
    assert hex_to_bytes("ABcd") == b"\xab\xcd"
    assert hex_to_bytes("") == b""


def test_hash_pattern_is_shared_with_models() -> None:
    """Tests that is_hash and the proof models agree on what a hash is."""
    good = "a" * HASH_HEX_LENGTH
    assert is_hash(good)
    assert ProofStep(sibling=good, side=Side.LEFT).sibling == good

    for bad in (good + "\n", good[:-1], good.upper()):
        assert not is_hash(bad)
        with pytest.raises(ValueError):
            ProofStep(sibling=bad, side=Side.LEFT)
