# Axiom - cli.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""Command line entry point printing the Merkle root of its arguments."""

from __future__ import annotations

import logging
import os
import sys
from argparse import ArgumentParser
from collections.abc import Sequence

from pydantic import BaseModel

from axiom_merkle.constants import (
    BRANCH_TAG_ENV_VAR,
    DEFAULT_BRANCH_TAG,
    DEFAULT_LEAF_TAG,
    DEFAULT_TAG,
    LEAF_TAG_ENV_VAR,
    LOG_FORMAT,
    TAG_ENV_VAR,
)
from axiom_merkle.errors import MerkleError
from axiom_merkle.merkle import MerkleTree, compute_root

logger = logging.getLogger("axiom-merkle-cli")

stderr_handler = logging.StreamHandler(stream=sys.stderr)
stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))

logger.addHandler(stderr_handler)
logger.setLevel(logging.INFO)
logger.propagate = False


class Config(BaseModel):
    """Used as a checkpoint between user input and software."""

    inputs: list[str]
    tag: str
    proofs: bool
    leaf_tag: str
    branch_tag: str
    verbose: bool


def build_parser() -> ArgumentParser:
    """Return the argument parser, with defaults taken from the environment."""
    parser = ArgumentParser(
        prog="axiom-merkle",
        description=f"""
Print the tagged Merkle root of INPUT strings.

Tag defaults are computed like this:

    If supplied by CLI, use that.
    If not, look into {TAG_ENV_VAR}, {LEAF_TAG_ENV_VAR} and {BRANCH_TAG_ENV_VAR}.
    If not defined, use the standard defaults ({DEFAULT_TAG}, {DEFAULT_LEAF_TAG} & {DEFAULT_BRANCH_TAG}).

""",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="strings to place in the tree, in order",
    )
    parser.add_argument(
        "-t",
        "--tag",
        default=os.environ.get(TAG_ENV_VAR, DEFAULT_TAG),
        help="domain tag used for every level of the tree",
    )
    parser.add_argument(
        "--proofs",
        default=False,
        action="store_true",
        help="use separate leaf/branch tags and print an inclusion proof per input",
    )
    parser.add_argument(
        "--leaf-tag",
        default=os.environ.get(LEAF_TAG_ENV_VAR, DEFAULT_LEAF_TAG),
        help="domain tag for leaves when --proofs is given",
    )
    parser.add_argument(
        "--branch-tag",
        default=os.environ.get(BRANCH_TAG_ENV_VAR, DEFAULT_BRANCH_TAG),
        help="domain tag for branches when --proofs is given",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        default=False,
        action="store_true",
        help="log how the tree is built",
    )
    return parser


def run(config: Config) -> None:
    """Compute and print what the config asks for."""
    joined = ", ".join(config.inputs)

    if not config.proofs:
        root = compute_root(config.inputs, config.tag)
        print(f"Merkle Root for {joined}: {root}")
        return

    tree = MerkleTree(
        config.inputs,
        config.leaf_tag,
        config.branch_tag,
        track_proofs=True,
    )
    print(f"Merkle Root for {joined}: {tree.root}")
    for item in config.inputs:
        print(tree.get_inclusion_proof(item).model_dump_json())


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run, and return the process exit status."""
    arguments = build_parser().parse_args(argv)

    config = Config(
        inputs=arguments.inputs,
        tag=arguments.tag,
        proofs=arguments.proofs,
        leaf_tag=arguments.leaf_tag,
        branch_tag=arguments.branch_tag,
        verbose=arguments.verbose,
    )

    if config.verbose:
        logger.setLevel(logging.DEBUG)
        logging.getLogger("axiom-merkle").setLevel(logging.DEBUG)

    logger.debug(f"running with config {config}")

    try:
        run(config)
    except MerkleError as exc:
        logger.error(f"cannot compute Merkle root: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
