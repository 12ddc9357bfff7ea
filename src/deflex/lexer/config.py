# Copyright 2026 Deflex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer configuration model and YAML loader."""

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".deflex.yaml"


class LexerConfigError(Exception):
    """Raised when a lexer configuration file cannot be read or is invalid."""


class LexerConfig(BaseModel):
    """Options controlling how the lexer treats malformed input and numbers.

    Attributes:
        strict: Raise LexerError instead of silently dropping malformed spans.
        integer_width: Bit width number literals wrap to (signed two's
            complement), or None for unbounded integers.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    strict: bool = False
    integer_width: Literal[8, 16, 32, 64] | None = Field(alias="integer-width", default=None)


def load_lexer_config(path: Path) -> LexerConfig:
    """Load and validate a lexer configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the `.deflex.yaml` file.

    Returns:
        A validated LexerConfig instance.

    Raises:
        LexerConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise LexerConfigError(f"Lexer config file not found: {path}") from None
    except OSError as exc:
        raise LexerConfigError(f"Cannot read lexer config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise LexerConfigError(f"Invalid YAML in lexer config '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise LexerConfigError(f"{path}: lexer config must be a YAML mapping")

    try:
        config = LexerConfig.model_validate(data)
    except ValidationError as exc:
        raise LexerConfigError(f"Invalid lexer config '{path}': {exc}") from exc

    logger.debug(f"Loaded lexer config from {path}: {config!r}")
    return config
