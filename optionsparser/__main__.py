"""
optionsparser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line front end: loads an option schema and parses the arguments that
follow `--` against it, then prints the parsed values.

    optionsparser [-v] [--lenient] [--log-mode cli|json]
                  [--log-file FILE [--json-log-file]] SCHEMA -- ARGS...

Exit codes: 0 on success, 1 if ARGS do not satisfy the schema, 2 if the
front end's own arguments or the schema itself are invalid.
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from rich import box
from rich.markup import escape
from rich.table import Table

from optionsparser.config import load_parser
from optionsparser.console import console, error_console
from optionsparser.exceptions import OptionsParserError
from optionsparser.option_type import OptionType
from optionsparser.options_parser import END_OF_ARGUMENTS, OptionsParser
from optionsparser.utils import format_value, setup_logging

EXIT_OK = 0
EXIT_PARSE_FAILED = 1
EXIT_USAGE = 2


def get_cli_parser() -> OptionsParser:
    parser = OptionsParser(
        header="usage: optionsparser [options] SCHEMA -- ARGS...",
        footer="Arguments after the first '--' are parsed against SCHEMA.",
    )
    parser.add_option(
        "help", "h", OptionType.BOOLEAN, long_arg="help",
        help_text="Display this help text and exit",
    )
    parser.add_option(
        "verbose", "v", OptionType.BOOLEAN, long_arg="verbose",
        help_text="Log debug output of the parse",
    )
    parser.add_option(
        "lenient", "", OptionType.BOOLEAN, long_arg="lenient",
        help_text="Warn about unknown options instead of failing",
    )
    parser.add_option(
        "log_mode", "", OptionType.STRING, long_arg="log-mode", default="cli",
        help_text="Console log format, 'cli' or 'json'",
    )
    parser.add_option(
        "log_file", "", OptionType.FILE, long_arg="log-file",
        help_text="Also write debug logs to this file",
    )
    parser.add_option(
        "json_log_file", "", OptionType.BOOLEAN, long_arg="json-log-file",
        help_text="Write the log file as JSON lines",
    )
    parser.add_option(
        "schema", "", OptionType.FILE, required=True, must_exist=True,
        help_text="Option schema file (.yaml, .yml or .toml)",
    )
    return parser


def split_arguments(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first '--' into front-end and schema arguments."""
    argv = list(argv)
    if END_OF_ARGUMENTS in argv:
        index = argv.index(END_OF_ARGUMENTS)
        return argv[:index], argv[index + 1 :]
    return argv, []


def build_values_table(parser: OptionsParser) -> Table:
    table = Table(title="Parsed options", box=box.SIMPLE)
    table.add_column("Option")
    table.add_column("Type")
    table.add_column("Set")
    table.add_column("Value")
    for option in parser.options:
        table.add_row(
            escape(option.get_option_name()),
            str(option.type),
            "yes" if option.is_option_set() else "no",
            escape(format_value(option.value)),
        )
    return table


def main(argv: Sequence[str] | None = None) -> int:
    own_args, target_args = split_arguments(sys.argv[1:] if argv is None else argv)

    cli = get_cli_parser()
    ok = cli.parse_arguments(own_args)
    if cli.get_opt_boolean("help"):
        cli.render_help()
        return EXIT_OK
    if not ok:
        cli.print_diagnostics()
        return EXIT_USAGE

    try:
        setup_logging(
            mode=cli.get_opt_string("log_mode"),
            log_filename=(
                str(cli.get_opt_file("log_file"))
                if cli.is_option_set("log_file")
                else None
            ),
            json_log_to_file=cli.get_opt_boolean("json_log_file"),
            console_log_level=(
                logging.DEBUG if cli.get_opt_boolean("verbose") else logging.WARNING
            ),
        )
    except (OSError, ValueError) as error:
        error_console.print(f"[bold red]{escape(str(error))}[/]")
        return EXIT_USAGE

    try:
        parser = load_parser(cli.get_opt_file("schema"))
    except (OSError, ValueError, OptionsParserError) as error:
        error_console.print(f"[bold red]Invalid schema:[/] {escape(str(error))}")
        return EXIT_USAGE

    ok = parser.parse_arguments(
        target_args, fail_on_unknown_option=not cli.get_opt_boolean("lenient")
    )
    parser.print_diagnostics()
    if not ok:
        return EXIT_PARSE_FAILED

    help_option = parser.get_option("help")
    if (
        help_option
        and help_option.type is OptionType.BOOLEAN
        and parser.get_opt_boolean("help")
    ):
        parser.render_help()
        return EXIT_OK

    console.print(build_values_table(parser))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
