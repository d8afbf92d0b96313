# Copyright 2026 jsoncheck Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the jsoncheck command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from jsoncheck.config.config import CONFIG_FILE_NAME, ConfigError, ParserOptions, load_config
from jsoncheck.parser.lexer import TokenError, tokenize
from jsoncheck.parser.parser import MAX_DEPTH_LIMIT
from jsoncheck.validation.processor import InputError, process_file, process_str, read_input

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the jsoncheck CLI."""
    parser = argparse.ArgumentParser(
        prog="jsoncheck",
        description="jsoncheck - JSON validator",
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-f",
        "--file",
        help="Input JSON file",
    )
    input_group.add_argument(
        "-r",
        "--raw",
        help="Raw JSON input",
    )

    parser.add_argument(
        "-c",
        "--config",
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum nesting depth of objects and arrays",
    )
    parser.add_argument(
        "--allow-trailing",
        action="store_true",
        default=None,
        help="Accept tokens after the top-level value",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging to stderr",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print a message for valid input",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    sys.exit(_run(args))


# ################
# Implementation
# ################


def _run(args: argparse.Namespace) -> int:
    """Validate the selected input and return the process exit code."""
    try:
        options = _resolve_options(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.tokens:
        return _print_tokens(args)

    try:
        if args.file is not None:
            result = process_file(Path(args.file), options)
        else:
            result = process_str(args.raw, options)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not result.is_valid:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    if not args.quiet:
        print("JSON is valid")
    return 0


def _resolve_options(args: argparse.Namespace) -> ParserOptions:
    """Load the configuration file, if any, and apply command-line overrides."""
    if args.config is not None:
        options = load_config(Path(args.config))
    elif Path(CONFIG_FILE_NAME).exists():
        options = load_config(Path(CONFIG_FILE_NAME))
    else:
        options = ParserOptions()

    overrides: dict[str, object] = {}
    if args.max_depth is not None:
        if not 0 < args.max_depth <= MAX_DEPTH_LIMIT:
            raise ConfigError(f"--max-depth must be between 1 and {MAX_DEPTH_LIMIT}")
        overrides["max_depth"] = args.max_depth
    if args.allow_trailing is not None:
        overrides["allow_trailing"] = args.allow_trailing
    return options.model_copy(update=overrides)


def _print_tokens(args: argparse.Namespace) -> int:
    """Handle --tokens: print one token per line."""
    if args.file is not None:
        try:
            contents = read_input(Path(args.file))
        except InputError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        contents = args.raw

    try:
        tokens = tokenize(contents)
    except TokenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for tok in tokens:
        if tok.value is None:
            print(tok.type.name)
        else:
            print(f"{tok.type.name} {tok.value!r}")
    return 0
