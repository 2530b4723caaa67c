"""
Flagspec

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line tool: parse a command line against definitions stored in a YAML
or TOML file and print the result.

    flagspec -c options.yaml -- --port 8080 ./public
    flagspec -c options.toml --json -- -p 8080
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from flagspec.config import loader
from flagspec.console import console, err_console
from flagspec.exceptions import SettingsError
from flagspec.parser import ParseConfig, ParseResult, parse
from flagspec.utils import get_program_invocation, setup_logging

CLI_OPTIONS = {
    "config": "-c,--config:string!; Definitions file (.yaml, .yml or .toml)",
    "json": "--json:boolean; Print the result as JSON",
    "verbose": "-v,--verbose:boolean; Log debug output",
    "help": "-h,--help:boolean; Show this help",
}


def render_result(result: ParseResult, as_json: bool = False) -> None:
    """Print targets, options and rest of a parse."""
    payload = {
        "targets": result.targets,
        "options": result.options,
        "rest": result.rest,
    }
    if as_json:
        console.print_json(data=payload)
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("option")
    table.add_column("value")
    for key, value in result.options.items():
        table.add_row(escape(key), escape(json.dumps(value)))
    console.print(table)
    console.print(f"[bold]targets:[/] {escape(json.dumps(result.targets))}")
    console.print(f"[bold]rest:[/] {escape(json.dumps(result.rest))}")


def main(argv: Sequence[str] | None = None) -> int:
    program = get_program_invocation()
    cli = parse(
        sys.argv[1:] if argv is None else argv,
        CLI_OPTIONS,
        ParseConfig(usage=f"{program} -c <file> [--json] [-v] -- [<arguments>...]"),
    )
    if cli.options["verbose"]:
        setup_logging(console_log_level=logging.DEBUG)

    try:
        definitions = loader(cli.options["config"])
    except (FileNotFoundError, ValueError) as error:
        err_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    try:
        result = parse(cli.rest, definitions.options, definitions.to_parse_config())
    except SettingsError as error:
        err_console.print(f"[bold red]invalid definitions:[/] {escape(str(error))}")
        return 2

    render_result(result, as_json=cli.options["json"])
    return 0


def entry_point() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
