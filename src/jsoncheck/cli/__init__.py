# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for jsoncheck."""
