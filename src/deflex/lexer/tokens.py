# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model produced by the deflex lexer.

A token wraps exactly one token type. Token types form a closed union:
literal and identifier payloads are small frozen dataclasses, and the fixed
sets (keywords, operators, punctuation) are enums whose values are their
source spelling.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class Keyword(enum.Enum):
    """Reserved words of the language."""

    DEFINE = "define"
    TRUE = "true"
    FALSE = "false"
    IF = "if"
    NULL = "null"


class Operator(enum.Enum):
    """Arithmetic, comparison and logical operators."""

    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    EQUALS = "="
    DOUBLE_EQUALS = "=="
    NOT_EQUALS = "!="
    BANG = "!"
    MOD = "%"
    GREATER = ">"
    LESS = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    AND = "&&"
    OR = "||"


class Punctuation(enum.Enum):
    """Structural single-character tokens."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    DOT = "."
    COMMA = ","
    SEMICOLON = ";"


@dataclass(frozen=True)
class StringLiteral:
    """A double-quoted string; ``text`` excludes the quotes."""

    text: str


@dataclass(frozen=True)
class NumberLiteral:
    """A decimal integer literal."""

    value: int


@dataclass(frozen=True)
class Identifier:
    """An alphanumeric name that is not a keyword."""

    text: str


TokenType = StringLiteral | NumberLiteral | Keyword | Operator | Identifier | Punctuation


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The classified content of the token.
    """

    type: TokenType

    @property
    def lexeme(self) -> str:
        """Return the canonical source spelling of this token.

        Lexing the returned text on its own yields an equal token, except for
        number literals that were wrapped to a negative value.
        """
        token_type = self.type
        if isinstance(token_type, StringLiteral):
            return f'"{token_type.text}"'
        if isinstance(token_type, NumberLiteral):
            return str(token_type.value)
        if isinstance(token_type, Identifier):
            return token_type.text
        return token_type.value
