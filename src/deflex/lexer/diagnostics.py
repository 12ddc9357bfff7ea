# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics for source spans the lexer drops."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class DiagnosticKind(enum.Enum):
    """Categories of dropped input."""

    UNTERMINATED_STRING = "unterminated-string"
    INVALID_OPERATOR = "invalid-operator"
    UNEXPECTED_CHARACTER = "unexpected-character"


@dataclass(frozen=True)
class Diagnostic:
    """A span of source text that produced no token.

    Attributes:
        kind: Why the span was dropped.
        message: Human-readable description.
        offset: 0-based character index where the span starts.
        text: The dropped source text.
    """

    kind: DiagnosticKind
    message: str
    offset: int
    text: str


class LexerError(Exception):
    """Raised in strict mode when the scanner would otherwise drop input.

    Attributes:
        diagnostic: The diagnostic that triggered the error.
        offset: 0-based character index of the offending span.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(f"Offset {diagnostic.offset}: {diagnostic.message}")
        self.diagnostic = diagnostic
        self.offset = diagnostic.offset
