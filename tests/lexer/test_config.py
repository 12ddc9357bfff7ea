# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the lexer configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from deflex.lexer import (
    CONFIG_FILE_NAME,
    LexerConfig,
    LexerConfigError,
    NumberLiteral,
    Token,
    load_lexer_config,
    tokenize,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a lexer config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_file_name_constant() -> None:
    """CONFIG_FILE_NAME has the expected value."""
    assert CONFIG_FILE_NAME == ".deflex.yaml"


def test_defaults() -> None:
    """The default configuration is lenient and unbounded."""
    config = LexerConfig()
    assert config.strict is False
    assert config.integer_width is None


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty YAML file is treated as the default configuration."""
    config = load_lexer_config(_write_config(tmp_path, ""))
    assert config == LexerConfig()


def test_full_config(tmp_path: Path) -> None:
    """Both keys are read, using the hyphenated YAML spelling."""
    config = load_lexer_config(_write_config(tmp_path, "strict: true\ninteger-width: 32\n"))
    assert config.strict is True
    assert config.integer_width == 32


def test_loaded_config_drives_tokenize(tmp_path: Path) -> None:
    """A loaded integer width wraps number literals."""
    config = load_lexer_config(_write_config(tmp_path, "integer-width: 16\n"))
    assert tokenize("32768", config) == [Token(NumberLiteral(-32768))]


def test_config_is_frozen() -> None:
    """LexerConfig instances cannot be modified."""
    config = LexerConfig()
    with pytest.raises(ValidationError):
        config.strict = True  # type: ignore[misc]


# ###############
# Error Cases
# ###############


def test_file_not_found(tmp_path: Path) -> None:
    """Loading a non-existent file raises LexerConfigError."""
    with pytest.raises(LexerConfigError, match="not found"):
        load_lexer_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml_syntax(tmp_path: Path) -> None:
    """A file with invalid YAML raises LexerConfigError."""
    with pytest.raises(LexerConfigError, match="Invalid YAML"):
        load_lexer_config(_write_config(tmp_path, "strict: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    """A YAML document that is not a mapping raises LexerConfigError."""
    with pytest.raises(LexerConfigError, match="must be a YAML mapping"):
        load_lexer_config(_write_config(tmp_path, "- strict\n"))


def test_unknown_key(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(LexerConfigError, match="Invalid lexer config"):
        load_lexer_config(_write_config(tmp_path, "escape-sequences: true\n"))


@pytest.mark.parametrize("width", ["12", "0", "128", "wide"])
def test_unsupported_integer_width(tmp_path: Path, width: str) -> None:
    """Only 8, 16, 32 and 64 bit widths are accepted."""
    with pytest.raises(LexerConfigError, match="integer-width"):
        load_lexer_config(_write_config(tmp_path, f"integer-width: {width}\n"))
