# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end validation of JSON documents."""

from jsoncheck.validation.processor import (
    InputError,
    ProcessResult,
    process_file,
    process_str,
    read_input,
)

__all__ = [
    "InputError",
    "ProcessResult",
    "process_file",
    "process_str",
    "read_input",
]
