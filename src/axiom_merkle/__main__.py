# Axiom - __main__.py
# Copyright (C) 2025 The Axiom Contributors
# This program is licensed under the Peer Production License (PPL).
# See the LICENSE file for full details.
"""Allow running the CLI with ``python -m axiom_merkle``."""

import sys

from axiom_merkle.cli import main

sys.exit(main())
