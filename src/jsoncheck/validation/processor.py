# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation workflow: read input, tokenize, parse, and report the outcome.

The lexer and parser raise on the first problem they find. This module runs
both passes in order and folds either failure into a :class:`ProcessResult`
so that callers only have to inspect a single value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jsoncheck.config.config import ParserOptions
from jsoncheck.model.nodes import Node
from jsoncheck.parser.lexer import TokenError, tokenize
from jsoncheck.parser.parser import ParseError, parse

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class InputError(Exception):
    """Raised when the input document cannot be read."""


@dataclass
class ProcessResult:
    """Outcome of validating one JSON document.

    Attributes:
        value: Root of the syntax tree, or None for an empty document or a failure.
        token_count: Number of tokens produced by the lexer (0 on a lexical error).
        error: The lexical or structural error that stopped validation, if any.
    """

    value: Node | None = None
    token_count: int = 0
    error: TokenError | ParseError | None = None

    @property
    def is_valid(self) -> bool:
        """Return True if the document was accepted."""
        return self.error is None

    @property
    def message(self) -> str | None:
        """Return a human-readable diagnostic, or None for a valid document."""
        if self.error is None:
            return None
        return str(self.error)


def process_str(contents: str, options: ParserOptions | None = None) -> ProcessResult:
    """Validate a JSON document held in memory.

    Args:
        contents: The complete JSON text.
        options: Parser options; defaults are used when omitted.

    Returns:
        A ProcessResult describing the outcome.
    """
    if options is None:
        options = ParserOptions()
    logger.debug("Content: %s", contents)

    try:
        tokens = tokenize(contents)
    except TokenError as exc:
        logger.info("Lexical error: %s", exc)
        return ProcessResult(error=exc)
    logger.debug("Tokens: %s", tokens)

    try:
        value = parse(tokens, max_depth=options.max_depth, allow_trailing=options.allow_trailing)
    except ParseError as exc:
        logger.info("Structural error: %s", exc)
        return ProcessResult(token_count=len(tokens), error=exc)

    return ProcessResult(value=value, token_count=len(tokens))


def process_file(path: Path, options: ParserOptions | None = None) -> ProcessResult:
    """Read a file fully into memory and validate its contents.

    Args:
        path: Path to the JSON document.
        options: Parser options; defaults are used when omitted.

    Returns:
        A ProcessResult describing the outcome.

    Raises:
        InputError: If the file cannot be read or is not valid UTF-8.
    """
    return process_str(read_input(path), options)


def read_input(path: Path) -> str:
    """Read a JSON document from disk as UTF-8 text.

    Raises:
        InputError: If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        contents = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(f"Input file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Cannot read input file '{path}': {exc}") from exc

    logger.debug("Read %d characters from %s", len(contents), path)
    return contents
