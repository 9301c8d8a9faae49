# Axiom - __init__.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""Tagged SHA-256 Merkle roots and inclusion proofs."""

from axiom_merkle.errors import InvalidArgumentError, MerkleError
from axiom_merkle.hashing import bytes_to_hex, hex_to_bytes, is_hash, tagged_hash
from axiom_merkle.merkle import (
    InclusionProof,
    MerkleTree,
    ProofIndex,
    ProofStep,
    Side,
    compute_root,
    compute_root_with_proofs,
    get_proof,
    verify_proof,
)

__all__ = [
    "InclusionProof",
    "InvalidArgumentError",
    "MerkleError",
    "MerkleTree",
    "ProofIndex",
    "ProofStep",
    "Side",
    "bytes_to_hex",
    "compute_root",
    "compute_root_with_proofs",
    "get_proof",
    "hex_to_bytes",
    "is_hash",
    "tagged_hash",
    "verify_proof",
]
