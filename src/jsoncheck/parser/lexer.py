# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for JSON text.

Converts raw source text into a sequence of tokens for subsequent parsing.
"""

import enum
import re
import unicodedata
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the JSON lexer."""

    # Structural punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    COMMA = ","

    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        value: The raw text between the quotes for STRING tokens, the parsed
            float for NUMBER tokens, and None for everything else.
    """

    type: TokenType
    value: str | float | None = None


class TokenError(Exception):
    """Raised when the scanner cannot match a lexeme.

    Attributes:
        message: Short description of what went wrong.
        position: 0-based offset of the first character of the offending lexeme.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


def tokenize(source: str) -> list[Token]:
    """Tokenize JSON text into a sequence of tokens.

    The whole input is scanned before returning, so a lexical error anywhere
    in the buffer is reported before any token reaches the parser.

    Args:
        source: The full JSON text.

    Returns:
        A list of Token objects, empty for an empty or blank input.

    Raises:
        TokenError: On unexpected characters, unterminated or multi-line
            strings, misspelled literals, or malformed numbers.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
}

_LITERALS: dict[str, TokenType] = {
    "t": TokenType.TRUE,
    "f": TokenType.FALSE,
    "n": TokenType.NULL,
}

_NUMBER_CHARS = frozenset("0123456789.eE+-")

_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _is_skippable(ch: str) -> bool:
    """Return True for whitespace and control characters between tokens."""
    return ch.isspace() or unicodedata.category(ch) == "Cc"


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens."""
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if _is_skippable(ch):
                self._pos += 1
                continue
            self._scan_token(ch)
        return self._tokens

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self, ch: str) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        start = self._pos

        if ch in _SINGLE_CHAR_TOKENS:
            self._pos += 1
            self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch]))
        elif ch == '"':
            self._scan_string(start)
        elif ch in _LITERALS:
            self._scan_literal(_LITERALS[ch], start)
        elif ch in "0123456789-":
            self._scan_number(start)
        else:
            raise TokenError(f"Unexpected character {ch!r}", start)

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self, start: int) -> None:
        """Scan a double-quoted string literal.

        Characters are copied verbatim; a backslash has no special meaning.
        """
        end = start + 1
        while end < len(self._source):
            ch = self._source[end]
            if ch == '"':
                self._tokens.append(Token(TokenType.STRING, self._source[start + 1 : end]))
                self._pos = end + 1
                return
            if ch in "\r\n":
                raise TokenError("Multi-line string literal", start)
            end += 1
        raise TokenError("Unterminated string literal", start)

    def _scan_literal(self, token_type: TokenType, start: int) -> None:
        """Match one of the keywords true, false or null."""
        word = str(token_type.value)
        if not self._source.startswith(word, start):
            raise TokenError(f"Invalid literal, expected {word!r}", start)
        self._pos = start + len(word)
        self._tokens.append(Token(token_type))

    def _scan_number(self, start: int) -> None:
        """Scan a number literal.

        The scan is greedy over digits, '.', 'e', 'E', '+' and '-'; the
        collected text must then match the JSON number grammar as a whole.
        """
        end = start
        while end < len(self._source) and self._source[end] in _NUMBER_CHARS:
            end += 1
        text = self._source[start:end]

        if text.endswith("."):
            raise TokenError("Trailing decimal point in number", start)
        if _NUMBER_RE.fullmatch(text) is None:
            raise TokenError(f"Invalid number literal {text!r}", start)
        try:
            value = float(text)
        except ValueError:
            raise TokenError(f"Invalid number literal {text!r}", start) from None

        self._pos = end
        self._tokens.append(Token(TokenType.NUMBER, value))
