"""
Argloom Argument Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line entry point: parse TOKENS against the arguments defined in a
YAML or TOML CONFIG file and print the captured values.

    argloom [--log-mode cli|json] [--log-file PATH] [-v] [--json] CONFIG [TOKENS ...]

Exit codes: 0 on success or help, 1 when the tokens are rejected,
2 when the config file or its definitions are invalid.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argloom.config import loader
from argloom.console import console
from argloom.exceptions import ArgumentDefinitionError, ConfigError
from argloom.logger import logger
from argloom.parser import ArgumentParser, ParseResult
from argloom.parser.utils import is_option_shaped
from argloom.utils import LOG_MODES, setup_logging


def get_root_parser() -> ArgumentParser:
    """Construct the parser for the argloom command itself."""
    parser = ArgumentParser(
        program="argloom",
        description="Parse TOKENS against the arguments defined in CONFIG.",
    )
    parser.add_argument("config", "YAML or TOML argument definition file")
    parser.add_argument("log_mode", "Logging output mode: cli or json").add_name(
        "--log-mode"
    ).fixed(1)
    parser.add_argument("log_file", "Also write debug logs to this file").add_name(
        "--log-file"
    ).fixed(1)
    parser.add_argument("verbose", "Enable debug logging").add_name("-v").add_name(
        "--verbose"
    ).fixed(0)
    parser.add_argument("json", "Print parsed values as JSON").add_name("--json").fixed(0)
    return parser


def split_argv(root: ArgumentParser, argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """
    Split argv after the CONFIG token.

    Everything up to and including the first positional token belongs to the
    root parser. Everything after it is handed untouched to the configured parser.
    """
    value_counts = {
        name: definition.arity.count
        for definition in root.arguments
        if definition.is_named
        for name in definition.names
    }
    argv = list(argv)
    index = 0
    while index < len(argv):
        token = argv[index]
        if token in value_counts:
            index += 1 + value_counts[token]
        elif is_option_shaped(token):
            index += 1
        else:
            return argv[: index + 1], argv[index + 1 :]
    return argv, []


def print_result(result: ParseResult, as_json: bool = False) -> None:
    values = result.to_dict()
    values.pop("help", None)
    if as_json:
        console.print_json(json.dumps(values))
        return
    table = Table("label", "values", title="Parsed arguments")
    for label, captured in values.items():
        table.add_row(escape(label), escape(" ".join(captured)) if captured else "-")
    console.print(table)


def report(result: ParseResult, parser: ArgumentParser) -> int:
    if result.error:
        console.print(f"[bold red]error:[/] {escape(result.message)}")
        return 1
    parser.render_help()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    root = get_root_parser()
    head, tokens = split_argv(root, sys.argv[1:] if argv is None else argv)
    root_result = root.parse_args_no_execute_filename(head)
    if root_result.should_exit:
        return report(root_result, root)

    log_mode = root_result.get("log_mode")
    log_file = root_result.get("log_file")
    mode = log_mode.value().get() if log_mode else None
    if mode is not None and mode not in LOG_MODES:
        console.print(f"[bold red]error:[/] Invalid log mode {escape(repr(mode))}")
        return 1
    try:
        setup_logging(
            mode=mode,
            log_filename=log_file.value().get() if log_file else None,
            console_log_level=logging.DEBUG if "verbose" in root_result else logging.WARNING,
        )
    except OSError as error:
        console.print(f"[bold red]error:[/] Cannot open log file: {escape(str(error))}")
        return 2

    config_path = root_result.get("config").value().get()
    try:
        parser = loader(config_path)
        result = parser.parse_args_no_execute_filename(tokens)
    except (FileNotFoundError, ConfigError, ArgumentDefinitionError) as error:
        logger.debug("Could not build parser from %s: %s", config_path, error)
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    if result.should_exit:
        return report(result, parser)

    print_result(result, as_json="json" in root_result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
