# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""jsoncheck: a JSON lexer, parser, and validator."""

from jsoncheck.parser import ParseError, TokenError, parse, tokenize
from jsoncheck.validation import ProcessResult, process_file, process_str

__all__ = [
    "ParseError",
    "ProcessResult",
    "TokenError",
    "parse",
    "process_file",
    "process_str",
    "tokenize",
]
