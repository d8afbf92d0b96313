# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for jsoncheck."""

from jsoncheck.config.config import CONFIG_FILE_NAME, ConfigError, ParserOptions, load_config

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ParserOptions",
    "load_config",
]
