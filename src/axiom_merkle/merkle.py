# Axiom - merkle.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""A Merkle Tree engine for tagged roots and inclusion proofs.

Branch nodes hash the *hex text* of their children joined together, not the
raw 64 bytes of the two digests. This differs from a textbook Merkle tree but
is required to reproduce existing roots bit-for-bit.
"""

from __future__ import annotations

import enum
import hmac
import logging
import sys
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from axiom_merkle.constants import ENCODING, LOG_FORMAT
from axiom_merkle.errors import InvalidArgumentError, MerkleError
from axiom_merkle.hashing import HASH_REGEX, tagged_hash

logger = logging.getLogger("axiom-merkle")

stderr_handler = logging.StreamHandler(stream=sys.stderr)
stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logger.addHandler(stderr_handler)
logger.setLevel(logging.WARNING)
logger.propagate = False


class Side(int, enum.Enum):
    """Which side of the running hash a sibling is concatenated on."""

    LEFT = 0
    RIGHT = 1


class ProofStep(BaseModel):
    """One sibling on the path from a leaf up to the root."""

    model_config = ConfigDict(frozen=True)

    sibling: str = Field(pattern=HASH_REGEX)
    side: Side


ProofIndex = dict[str, list[ProofStep]]


class InclusionProof(BaseModel):
    """Everything a verifier needs to recompute a root from one leaf."""

    leaf_hash: str = Field(pattern=HASH_REGEX)
    path: list[ProofStep]
    root: str = Field(pattern=HASH_REGEX)

    def verify(self, branch_tag: str) -> bool:
        """Return True if the path leads from the leaf to the root."""
        return verify_proof(self.leaf_hash, self.path, branch_tag, self.root)


def _hash_pair(left: str, right: str, tag: str) -> str:
    """Combine two child hashes into their parent."""
    # --- Hex strings are joined as text before hashing ---
    return tagged_hash(left + right, tag)


class MerkleTree:
    """Builds every level of a tree over an ordered list of strings.

    Leaves are hashed with ``leaf_tag`` and every branch with ``branch_tag``
    (which defaults to ``leaf_tag``). When ``track_proofs`` is set, the
    proof index is filled in the same pass that builds the levels.
    """

    def __init__(
        self,
        inputs: Sequence[str] | None,
        leaf_tag: str,
        branch_tag: str | None = None,
        *,
        track_proofs: bool = False,
    ) -> None:
        """Initialize the MerkleTree and compute its root."""
        if inputs is None or isinstance(inputs, (str, bytes)):
            raise InvalidArgumentError(
                "Inputs must be a sequence of strings.",
            )
        if len(inputs) == 0:
            raise InvalidArgumentError(
                "Cannot create a Merkle Tree with no data.",
            )

        self.leaf_tag = leaf_tag
        self.branch_tag = leaf_tag if branch_tag is None else branch_tag
        self.track_proofs = track_proofs
        self.proofs: ProofIndex = {}

        self.leaves: list[str] = [tagged_hash(item, leaf_tag) for item in inputs]

        # Maps a position in the newest level to the leaves beneath it.
        self._owners: dict[int, list[str]] = {}
        if track_proofs:
            self._index_leaves()

        self.levels: list[list[str]] = [self.leaves]
        while len(self.levels[-1]) > 1:
            self._build_next_level()

        self.root: str = self.levels[-1][0]
        self._owners = {}

        logger.debug(
            f"built tree over {len(self.leaves)} leaves, "
            f"height {self.height}, root {self.root}",
        )

    @property
    def height(self) -> int:
        """Number of combination rounds between the leaves and the root."""
        return len(self.levels) - 1

    def _index_leaves(self) -> None:
        for position, leaf_hash in enumerate(self.leaves):
            if leaf_hash in self.proofs:
                logger.warning(
                    f"leaf {position} hashes to {leaf_hash}, which is already "
                    "indexed; keeping the proof of the first occurrence",
                )
                continue
            self.proofs[leaf_hash] = []
            self._owners[position] = [leaf_hash]

    def _build_next_level(self) -> None:
        """Take the last level of the tree and build the next level up."""
        last_level = self.levels[-1]
        next_level: list[str] = []
        next_owners: dict[int, list[str]] = {}

        for i in range(0, len(last_level), 2):
            left = last_level[i]
            has_partner = i + 1 < len(last_level)
            right = last_level[i + 1] if has_partner else left
            next_level.append(_hash_pair(left, right, self.branch_tag))

            if self.track_proofs:
                owners = self._record_pair(i, left, right, has_partner)
                if owners:
                    next_owners[i // 2] = owners

        logger.debug(
            f"reduced level {len(self.levels) - 1} "
            f"from {len(last_level)} to {len(next_level)} hashes",
        )
        self.levels.append(next_level)
        self._owners = next_owners

    def _record_pair(
        self,
        index: int,
        left: str,
        right: str,
        has_partner: bool,
    ) -> list[str]:
        """Append this level's proof steps and return the parent's leaves."""
        left_owners = self._owners.get(index, [])
        for leaf_hash in left_owners:
            self.proofs[leaf_hash].append(
                ProofStep(sibling=right, side=Side.RIGHT),
            )
        if not has_partner:
            # The duplicated tail gets no step of its own.
            return list(left_owners)

        right_owners = self._owners.get(index + 1, [])
        for leaf_hash in right_owners:
            self.proofs[leaf_hash].append(
                ProofStep(sibling=left, side=Side.LEFT),
            )
        return left_owners + right_owners

    def get_inclusion_proof(self, value: str) -> InclusionProof:
        """Return the inclusion proof of an input string."""
        if not self.track_proofs:
            raise MerkleError("This tree was built without proof tracking.")
        leaf_hash, path = get_proof(value, self.leaf_tag, self.proofs)
        return InclusionProof(leaf_hash=leaf_hash, path=path, root=self.root)


def compute_root(inputs: Sequence[str] | None, tag: str) -> str:
    """Return the Merkle root of inputs, using one tag for every level."""
    return MerkleTree(inputs, tag).root


def compute_root_with_proofs(
    inputs: Sequence[str] | None,
    leaf_tag: str,
    branch_tag: str,
) -> tuple[str, ProofIndex]:
    """Return the Merkle root of inputs plus a proof index keyed by leaf hash.

    Leaves are hashed with leaf_tag and branches with branch_tag, so a hash
    from one level can never pass for a hash from the other.
    """
    tree = MerkleTree(inputs, leaf_tag, branch_tag, track_proofs=True)
    return tree.root, tree.proofs


def get_proof(
    value: str,
    leaf_tag: str,
    proof_index: ProofIndex,
) -> tuple[str, list[ProofStep]]:
    """Look up the proof path of an input string.

    An input that was never part of the tree yields its leaf hash and an
    empty path. The returned path is a copy of the stored one.
    """
    leaf_hash = tagged_hash(value, leaf_tag)
    return leaf_hash, list(proof_index.get(leaf_hash, []))


def verify_proof(
    leaf_hash: str,
    path: Sequence[ProofStep],
    branch_tag: str,
    expected_root: str,
) -> bool:
    """Verify a proof without needing the entire tree."""
    current_hash = leaf_hash
    for step in path:
        if step.side == Side.RIGHT:
            current_hash = _hash_pair(current_hash, step.sibling, branch_tag)
        else:
            current_hash = _hash_pair(step.sibling, current_hash, branch_tag)

    return hmac.compare_digest(
        current_hash.encode(ENCODING),
        expected_root.encode(ENCODING),
    )
