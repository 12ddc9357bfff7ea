# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for deflex source text.

Converts raw source text into a flat sequence of tokens for a downstream
parser. Whitespace, unrecognized characters, unterminated strings and
incomplete operators are dropped without producing a token. Callers that need
to know about dropped input can pass a list to collect diagnostics, or enable
strict mode in the configuration.
"""

import logging
from collections.abc import Iterator

from deflex.lexer.config import LexerConfig
from deflex.lexer.diagnostics import Diagnostic, DiagnosticKind, LexerError
from deflex.lexer.tokens import (
    Identifier,
    Keyword,
    NumberLiteral,
    Operator,
    Punctuation,
    StringLiteral,
    Token,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def tokenize(
    source: str,
    config: LexerConfig | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> list[Token]:
    """Tokenize source text into a list of tokens.

    Args:
        source: The complete source text.
        config: Lexer options; defaults to silent, unbounded lexing.
        diagnostics: Optional list that receives one Diagnostic per dropped
            span. Token output is the same whether or not it is given.

    Returns:
        The tokens in source order.

    Raises:
        LexerError: Only when ``config.strict`` is set, at the first span
            that would otherwise be dropped.
    """
    return list(iter_tokens(source, config, diagnostics))


def iter_tokens(
    source: str,
    config: LexerConfig | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> Iterator[Token]:
    """Lazily tokenize source text. Accepts the same arguments as :func:`tokenize`."""
    return _Lexer(source, config or LexerConfig(), diagnostics).tokens()


# ################
# Implementation
# ################

_KEYWORDS: dict[str, Keyword] = {
    "define": Keyword.DEFINE,
    "true": Keyword.TRUE,
    "false": Keyword.FALSE,
    "if": Keyword.IF,
    "null": Keyword.NULL,
}

_PUNCTUATION: dict[str, Punctuation] = {
    "(": Punctuation.LEFT_PAREN,
    ")": Punctuation.RIGHT_PAREN,
    "{": Punctuation.LEFT_BRACE,
    "}": Punctuation.RIGHT_BRACE,
    ".": Punctuation.DOT,
    ",": Punctuation.COMMA,
    ";": Punctuation.SEMICOLON,
}

_SINGLE_CHAR_OPERATORS: dict[str, Operator] = {
    "+": Operator.PLUS,
    "-": Operator.MINUS,
    "*": Operator.STAR,
    "/": Operator.SLASH,
    "%": Operator.MOD,
}

# first char -> (extending char, two-char operator, one-char operator or None)
_TWO_CHAR_OPERATORS: dict[str, tuple[str, Operator, Operator | None]] = {
    "=": ("=", Operator.DOUBLE_EQUALS, Operator.EQUALS),
    "!": ("=", Operator.NOT_EQUALS, Operator.BANG),
    ">": ("=", Operator.GREATER_EQUAL, Operator.GREATER),
    "<": ("=", Operator.LESS_EQUAL, Operator.LESS),
    "&": ("&", Operator.AND, None),
    "|": ("|", Operator.OR, None),
}

_OPERATOR_START = frozenset(_SINGLE_CHAR_OPERATORS) | frozenset(_TWO_CHAR_OPERATORS)

_DIGITS = frozenset("0123456789")


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str, config: LexerConfig, diagnostics: list[Diagnostic] | None) -> None:
        self._source = source
        self._pos = 0
        self._config = config
        self._diagnostics = diagnostics

    def tokens(self) -> Iterator[Token]:
        """Run the scanner, yielding every token produced."""
        while self._pos < len(self._source):
            token = self._scan_token()
            if token is not None:
                yield token

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _report(self, kind: DiagnosticKind, message: str, offset: int) -> None:
        """Record a span from *offset* to the current position as dropped."""
        diagnostic = Diagnostic(kind, message, offset, self._source[offset : self._pos])
        logger.debug(f"Dropped {kind.value} at offset {offset}: {diagnostic.text!r}")
        if self._config.strict:
            raise LexerError(diagnostic)
        if self._diagnostics is not None:
            self._diagnostics.append(diagnostic)

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token | None:
        """Dispatch to the appropriate scanner based on the current character."""
        ch = self._current()
        start = self._pos

        if ch == '"':
            self._advance()
            return self._scan_string(start)
        if ch in _DIGITS:
            return self._scan_number()
        if ch in _PUNCTUATION:
            self._advance()
            return Token(_PUNCTUATION[ch])
        if ch in _OPERATOR_START:
            return self._scan_operator()
        if ch.isalnum():
            return self._scan_word()

        self._advance()
        if not ch.isspace():
            self._report(DiagnosticKind.UNEXPECTED_CHARACTER, f"Unexpected character: {ch!r}", start)
        return None

    # ------------------------------------------------------------------
    # Sub-scanners
    # ------------------------------------------------------------------

    def _scan_string(self, start: int) -> Token | None:
        """Scan a string literal; the opening quote at *start* is already consumed."""
        content_start = self._pos
        while self._pos < len(self._source):
            if self._current() == '"':
                text = self._source[content_start : self._pos]
                self._advance()  # closing "
                return Token(StringLiteral(text))
            if self._current() == "\n":
                self._report(DiagnosticKind.UNTERMINATED_STRING, "Unterminated string literal", start)
                self._advance()  # the newline stays consumed
                return None
            self._advance()
        self._report(DiagnosticKind.UNTERMINATED_STRING, "Unterminated string literal", start)
        return None

    def _scan_number(self) -> Token:
        """Scan a maximal run of decimal digits into a number literal."""
        value = 0
        while self._current() in _DIGITS:
            value = value * 10 + int(self._advance())
        if self._config.integer_width is not None:
            value = _wrap_signed(value, self._config.integer_width)
        return Token(NumberLiteral(value))

    def _scan_word(self) -> Token:
        """Scan an alphanumeric run and classify it as a keyword or identifier."""
        start = self._pos
        while self._pos < len(self._source) and self._current().isalnum():
            self._advance()
        text = self._source[start : self._pos]
        keyword = _KEYWORDS.get(text)
        if keyword is not None:
            return Token(keyword)
        return Token(Identifier(text))

    def _scan_operator(self) -> Token | None:
        """Scan a one- or two-character operator, consuming the second only when it extends the first."""
        start = self._pos
        first = self._advance()
        if first in _SINGLE_CHAR_OPERATORS:
            return Token(_SINGLE_CHAR_OPERATORS[first])

        pairing = _TWO_CHAR_OPERATORS.get(first)
        if pairing is None:
            self._report(DiagnosticKind.INVALID_OPERATOR, f"Unknown operator: {first!r}", start)
            return None

        follow, double, single = pairing
        if self._current() == follow:
            self._advance()
            return Token(double)
        if single is None:
            self._report(
                DiagnosticKind.INVALID_OPERATOR,
                f"Incomplete operator {first!r}, expected {first + follow!r}",
                start,
            )
            return None
        return Token(single)


def _wrap_signed(value: int, width: int) -> int:
    """Wrap *value* to a signed two's-complement integer of *width* bits."""
    modulus = 1 << width
    half = modulus >> 1
    return (value + half) % modulus - half
