# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser options and the YAML configuration file they are loaded from."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jsoncheck.parser.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".jsoncheck.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ParserOptions(BaseModel):
    """Options controlling how strictly a document is parsed.

    Attributes:
        max_depth: Maximum number of nested objects and arrays, at most MAX_DEPTH_LIMIT.
        allow_trailing: Accept tokens after the top-level value.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    max_depth: int = Field(alias="max-depth", default=DEFAULT_MAX_DEPTH, gt=0, le=MAX_DEPTH_LIMIT)
    allow_trailing: bool = Field(alias="allow-trailing", default=False)


def load_config(path: Path) -> ParserOptions:
    """Load and validate a configuration file.

    An empty file is treated as a configuration with all defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ParserOptions instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ParserOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
