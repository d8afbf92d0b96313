# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration file loader."""

from pathlib import Path

import pytest

from jsoncheck.config.config import CONFIG_FILE_NAME, ConfigError, ParserOptions, load_config
from jsoncheck.parser.parser import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

# ###############
# Public Interface
# ###############


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(content, encoding="utf-8")
    return path


def test_config_file_name_constant() -> None:
    """CONFIG_FILE_NAME has the expected value."""
    assert CONFIG_FILE_NAME == ".jsoncheck.yaml"


def test_default_options() -> None:
    """ParserOptions defaults match the parser defaults."""
    options = ParserOptions()
    assert options.max_depth == DEFAULT_MAX_DEPTH
    assert options.allow_trailing is False


def test_load_empty_config(tmp_path: Path) -> None:
    """An empty YAML file yields the default options."""
    options = load_config(_write(tmp_path, ""))
    assert options == ParserOptions()


def test_load_full_config(tmp_path: Path) -> None:
    """Both dashed keys are read."""
    options = load_config(_write(tmp_path, "max-depth: 10\nallow-trailing: true\n"))
    assert options.max_depth == 10
    assert options.allow_trailing is True


def test_load_partial_config(tmp_path: Path) -> None:
    """Missing keys keep their defaults."""
    options = load_config(_write(tmp_path, "max-depth: 3\n"))
    assert options.max_depth == 3
    assert options.allow_trailing is False


def test_options_accept_field_names() -> None:
    """Options can be built in code by field name as well as by alias."""
    assert ParserOptions(max_depth=5).max_depth == 5


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Unparseable YAML raises ConfigError."""
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write(tmp_path, "max-depth: [1, 2\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write(tmp_path, "- 1\n- 2\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write(tmp_path, "strict: true\n"))


@pytest.mark.parametrize("value", ["0", "-1", "deep", str(MAX_DEPTH_LIMIT + 1)])
def test_invalid_max_depth_raises(tmp_path: Path, value: str) -> None:
    """max-depth must be a positive integer no larger than MAX_DEPTH_LIMIT."""
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, f"max-depth: {value}\n"))


def test_max_depth_at_limit_accepted(tmp_path: Path) -> None:
    """The largest configurable depth is MAX_DEPTH_LIMIT itself."""
    options = load_config(_write(tmp_path, f"max-depth: {MAX_DEPTH_LIMIT}\n"))
    assert options.max_depth == MAX_DEPTH_LIMIT
