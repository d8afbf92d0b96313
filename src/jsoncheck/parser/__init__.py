# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and parser for JSON text."""

from jsoncheck.parser.lexer import Token, TokenError, TokenType, tokenize
from jsoncheck.parser.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, ParseError, parse

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "ParseError",
    "Token",
    "TokenError",
    "TokenType",
    "parse",
    "tokenize",
]
