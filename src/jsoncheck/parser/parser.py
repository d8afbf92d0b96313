# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for JSON token streams.

Converts the token list produced by the lexer into a syntax tree of
:mod:`jsoncheck.model.nodes` values.
"""

from jsoncheck.model.nodes import (
    ArrayNode,
    BooleanNode,
    Node,
    NullNode,
    NumberNode,
    ObjectNode,
    StringNode,
)
from jsoncheck.parser.lexer import Token, TokenType

# ###############
# Public Interface
# ###############

DEFAULT_MAX_DEPTH = 256

# Upper bound for configurable depth; each level costs two interpreter frames.
MAX_DEPTH_LIMIT = 400


class ParseError(Exception):
    """Raised when the token stream does not form a well-formed JSON value.

    Attributes:
        message: Description of the structural problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid JSON: {message}")
        self.message = message


def parse(
    tokens: list[Token],
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_trailing: bool = False,
) -> Node | None:
    """Parse a token sequence into a syntax tree.

    Exactly one top-level value is parsed. An empty token sequence is valid
    and yields no value.

    Args:
        tokens: The complete token list produced by ``tokenize``.
        max_depth: Maximum number of nested objects and arrays. Input nested
            deeper than the interpreter recursion limit allows is rejected
            even when this bound is higher.
        allow_trailing: Accept (and ignore) tokens left over after the
            top-level value instead of rejecting them.

    Returns:
        The root node, or None if ``tokens`` is empty.

    Raises:
        ParseError: If the tokens are structurally invalid.
    """
    if not tokens:
        return None
    return _Parser(tokens, max_depth).parse(allow_trailing)


# ################
# Implementation
# ################

_UNEXPECTED_END = "Unexpected end of input"


class _Parser:
    """Recursive-descent parser with a single forward cursor and one-token lookahead."""

    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        self._tokens = tokens
        self._pos = 0
        self._depth = 0
        self._max_depth = max_depth

    def parse(self, allow_trailing: bool) -> Node:
        """Parse one value and check that nothing follows it."""
        try:
            root = self._parse_value()
        except RecursionError as exc:
            raise ParseError(f"Maximum nesting depth exceeded at level {self._depth}") from exc
        if not allow_trailing and self._peek() is not None:
            raise ParseError("Unexpected trailing token")
        return root

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token | None:
        """Return the next token without consuming it, or None at end of input."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self) -> Token:
        """Consume and return the next token.

        Raises ParseError at end of input.
        """
        tok = self._peek()
        if tok is None:
            raise ParseError(_UNEXPECTED_END)
        self._pos += 1
        return tok

    def _skip_comma(self) -> bool:
        """Consume a comma if it is the next token and report whether one was found."""
        tok = self._peek()
        if tok is not None and tok.type == TokenType.COMMA:
            self._pos += 1
            return True
        return False

    def _enter(self) -> None:
        """Track one more level of nesting."""
        self._depth += 1
        if self._depth > self._max_depth:
            raise ParseError(f"Maximum nesting depth of {self._max_depth} exceeded")

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _parse_value(self) -> Node:
        """Parse exactly one value, consuming its leading token."""
        tok = self._next()
        if tok.type == TokenType.STRING:
            return StringNode(value=tok.value)
        if tok.type == TokenType.NUMBER:
            return NumberNode(value=tok.value)
        if tok.type == TokenType.TRUE:
            return BooleanNode(value=True)
        if tok.type == TokenType.FALSE:
            return BooleanNode(value=False)
        if tok.type == TokenType.NULL:
            return NullNode()
        if tok.type == TokenType.LBRACE:
            self._enter()
            node: Node = self._parse_object()
            self._depth -= 1
            return node
        if tok.type == TokenType.LBRACKET:
            self._enter()
            node = self._parse_array()
            self._depth -= 1
            return node
        raise ParseError("Unexpected token")

    def _parse_object(self) -> ObjectNode:
        """Parse object entries up to and including the closing brace.

        The opening brace has already been consumed.
        """
        entries: list[tuple[str, Node]] = []
        is_first = True
        after_comma = False

        while True:
            tok = self._next()
            if tok.type == TokenType.RBRACE:
                if after_comma:
                    raise ParseError("Unexpected comma before end of object")
                return ObjectNode(entries=entries)
            if tok.type != TokenType.STRING:
                raise ParseError("Unexpected object key")
            if not is_first and not after_comma:
                raise ParseError("Missing comma")
            is_first = False

            if self._next().type != TokenType.COLON:
                raise ParseError("Expected colon after string key")
            entries.append((str(tok.value), self._parse_value()))
            after_comma = self._skip_comma()

    def _parse_array(self) -> ArrayNode:
        """Parse array items up to and including the closing bracket.

        The opening bracket has already been consumed.
        """
        items: list[Node] = []
        is_first = True
        after_comma = False

        while True:
            tok = self._peek()
            if tok is None:
                raise ParseError(_UNEXPECTED_END)
            if tok.type == TokenType.RBRACKET:
                if after_comma:
                    raise ParseError("Unexpected comma before end of array")
                self._pos += 1
                return ArrayNode(items=items)
            if not is_first and not after_comma:
                raise ParseError("Missing comma")
            is_first = False

            items.append(self._parse_value())
            after_comma = self._skip_comma()
