# Axiom - errors.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""Errors raised by the Merkle engine."""


class MerkleError(Exception):
    """Merkle Error."""

    __slots__ = ()


class InvalidArgumentError(MerkleError, ValueError):
    """Raised when an entry point receives input it cannot work with.

    The only validated precondition of tree construction is a non-empty
    input sequence; hex decoding also reports malformed values this way.
    """

    __slots__ = ()
