# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Allow running jsoncheck as ``python -m jsoncheck``."""

from jsoncheck.cli.main import main

main()
