"""Defining constants shared by the Merkle engine and its CLI."""

# Axiom - constants.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.

from typing import Final

# --- Hashing Constants ---
ENCODING: Final[str] = "utf-8"
HASH_SIZE: Final[int] = 32  # in bytes
HASH_HEX_LENGTH: Final[int] = HASH_SIZE * 2


# --- Default Domain Tags ---
# Only the CLI falls back to these, library calls always take a tag.
DEFAULT_TAG: Final[str] = "Bitcoin_Transaction"
DEFAULT_LEAF_TAG: Final[str] = "ProofOfReserve_Leaf"
DEFAULT_BRANCH_TAG: Final[str] = "ProofOfReserve_Branch"


# --- Environment Overrides ---
TAG_ENV_VAR: Final[str] = "AXIOM_MERKLE_TAG"
LEAF_TAG_ENV_VAR: Final[str] = "AXIOM_MERKLE_LEAF_TAG"
BRANCH_TAG_ENV_VAR: Final[str] = "AXIOM_MERKLE_BRANCH_TAG"


# --- Logging ---
LOG_FORMAT: Final[str] = (
    "[%(name)s] %(asctime)s | %(levelname)s | %(filename)s:%(lineno)s >>> %(message)s"
)
