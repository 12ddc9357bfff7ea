# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer for deflex source text."""

from deflex.lexer.config import CONFIG_FILE_NAME, LexerConfig, LexerConfigError, load_lexer_config
from deflex.lexer.diagnostics import Diagnostic, DiagnosticKind, LexerError
from deflex.lexer.scanner import iter_tokens, tokenize
from deflex.lexer.tokens import (
    Identifier,
    Keyword,
    NumberLiteral,
    Operator,
    Punctuation,
    StringLiteral,
    Token,
    TokenType,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "Diagnostic",
    "DiagnosticKind",
    "Identifier",
    "Keyword",
    "LexerConfig",
    "LexerConfigError",
    "LexerError",
    "NumberLiteral",
    "Operator",
    "Punctuation",
    "StringLiteral",
    "Token",
    "TokenType",
    "iter_tokens",
    "load_lexer_config",
    "tokenize",
]
