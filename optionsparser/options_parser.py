# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionsParser`, a small unix-style command-line parser
for console executables. It owns a registry of `Option` definitions, matches a
raw argument list against it, stores the values and collects a plain-text
report of anything that went wrong.

Unlike argparse, parsing never raises and never exits: `parse_arguments()`
returns a success flag and the caller decides what to do with the error text.

Key Features:
- Short (`-l`) and long (`--logfile`) flags, plus positional options
- `--` end-of-arguments marker; everything after it is positional
- Typed accessors that coerce lazily and never fail
- Relative FILE paths made absolute against the current directory
- Strict or lenient handling of unknown options
- Generated help text with aligned descriptions and defaults

Example Usage:
    options = OptionsParser(header="My console application")

    option = options.add_option("help", "h", OptionType.BOOLEAN)
    option.long_arg = "help"
    option.help_text = "Display this help text and exit"

    option = options.add_option("logfile", "l", OptionType.FILE)
    option.long_arg = "logfile"
    option.help_text = "Set a logfile to enable logging"

    if not options.parse_arguments(sys.argv[1:]):
        print(options.get_error_message())
        sys.exit(1)

    if options.get_opt_boolean("help"):
        print(options.get_help_text())
        sys.exit(0)

Design Notes:
Matching is first-match-wins in registration order. Registering two options
with the same spelling is allowed (a warning is logged), but only the first
one can ever be reached by that spelling.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from optionsparser.console import console, error_console
from optionsparser.exceptions import OptionDefinitionError
from optionsparser.logger import logger
from optionsparser.option import Option
from optionsparser.option_type import OptionType
from optionsparser.utils import (
    coerce_bool,
    coerce_float,
    coerce_int,
    coerce_path,
    format_value,
    resolve_path,
)

END_OF_ARGUMENTS = "--"


@dataclass(frozen=True)
class Diagnostic:
    """One line of the parse report."""

    message: str
    is_error: bool = True


class OptionsParser:
    """
    Parser for command line arguments in unix style.

    Options are added with `add_option()`, then `parse_arguments()` is called
    once with the argument list. Afterwards the typed getters return the
    parsed values, or the defaults for options that were not given.

    Attributes:
        header (str): Printed before the option lines in the help text.
        footer (str): Printed after the option lines in the help text.
    """

    def __init__(self, header: str = "", footer: str = "") -> None:
        self.header: str = header
        self.footer: str = footer
        self._options: list[Option] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def options(self) -> list[Option]:
        """Registered options in registration order."""
        return list(self._options)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Errors and warnings of the last parse."""
        return list(self._diagnostics)

    def add_option(
        self,
        option_id: str,
        arg: str,
        type: OptionType | str,
        required: bool = False,
        *,
        long_arg: str = "",
        help_text: str = "",
        default: Any = None,
        must_exist: bool = False,
    ) -> Option:
        """
        Create an option and append it to the registry.

        The returned `Option` stays owned by this parser; callers may set its
        `long_arg`, `help_text` and `value` (the default) afterwards.

        Args:
            option_id (str): Key used to query the option after parsing.
            arg (str): Short form without the leading "-", or "" for none.
            type (OptionType | str): Value type, or one of its aliases.
            required (bool): Whether parsing fails when the option is absent.
            long_arg (str): Long form without the leading "--".
            help_text (str): Description shown in the help text.
            default (Any): Value reported when the option is not given.
            must_exist (bool): For FILE options, require the path to exist.

        Returns:
            Option: The registered option.

        Raises:
            OptionDefinitionError: If `type` is not a valid option type.
        """
        if not isinstance(type, OptionType):
            try:
                type = OptionType(type)
            except ValueError as error:
                raise OptionDefinitionError(
                    f"Invalid type for option '{option_id}': {error}"
                ) from error
        if must_exist and type is not OptionType.FILE:
            logger.warning(
                "Option '%s' sets must_exist but is of type %s; it will be ignored.",
                option_id,
                type,
            )

        option = Option(
            option_id=option_id,
            arg=arg or "",
            type=type,
            long_arg=long_arg or "",
            help_text=help_text or "",
            required=required,
            must_exist=must_exist,
            value=default,
        )
        self._warn_on_conflicts(option)
        self._options.append(option)
        return option

    def _warn_on_conflicts(self, new: Option) -> None:
        for option in self._options:
            if option.option_id == new.option_id:
                logger.warning(
                    "Option id '%s' is already registered; lookups return the first one.",
                    new.option_id,
                )
            if new.arg and option.arg == new.arg:
                logger.warning(
                    "Short argument '-%s' of '%s' is already used by '%s'.",
                    new.arg,
                    new.option_id,
                    option.option_id,
                )
            if new.long_arg and option.long_arg == new.long_arg:
                logger.warning(
                    "Long argument '--%s' of '%s' is already used by '%s'.",
                    new.long_arg,
                    new.option_id,
                    option.option_id,
                )

    def get_option(self, option_id: str) -> Option | None:
        """Return the first option registered under `option_id`, if any."""
        return next((o for o in self._options if o.option_id == option_id), None)

    def _find_option(self, argument: str, end_of_arguments: bool) -> Option | None:
        """
        Resolve a token to an option.

        Positional options are filled right here: the first unset option with
        neither a short nor a long form takes the token as its value.
        """
        if self._is_bare_token(argument, end_of_arguments):
            for option in self._options:
                if option.positional and not option.is_option_set():
                    option.set_value(argument)
                    return option
            return None
        if argument.startswith("--"):
            name = argument[2:]
            return next((o for o in self._options if o.long_arg == name), None)
        name = argument[1:]
        return next((o for o in self._options if o.arg == name), None)

    @staticmethod
    def _is_bare_token(argument: str, end_of_arguments: bool) -> bool:
        return end_of_arguments or not argument.startswith("-")

    def _check_path_exists(self, option: Option, token: str, path: str) -> bool:
        if option.must_exist and not Path(path).exists():
            self._error(f"Path does not exist for argument {token}: {path}")
            return False
        return True

    def _error(self, message: str) -> None:
        logger.debug("Parse error: %s", message)
        self._diagnostics.append(Diagnostic(message, is_error=True))

    def _warning(self, message: str) -> None:
        logger.warning(message)
        self._diagnostics.append(Diagnostic(message, is_error=False))

    def parse_arguments(
        self,
        arguments: Sequence[str] | None = None,
        fail_on_unknown_option: bool = True,
    ) -> bool:
        """
        Read arguments and set them into the options.

        Values of options from an earlier call are dropped first, so the same
        parser can be run on several argument lists.

        Args:
            arguments (Sequence[str] | None): Tokens to parse, without the
                program name. Defaults to `sys.argv[1:]`.
            fail_on_unknown_option (bool): If True, unknown options are errors;
                otherwise they are ignored with a warning.

        Returns:
            bool: True if all tokens were understood and all required options
            are set. Details are available from `get_error_message()`.
        """
        if arguments is None:
            arguments = sys.argv[1:]
        arguments = list(arguments)

        self._diagnostics.clear()
        for option in self._options:
            option.reset()

        ok = True
        end_of_arguments = False
        pos = 0
        while pos < len(arguments):
            token = arguments[pos]
            if token == END_OF_ARGUMENTS and not end_of_arguments:
                end_of_arguments = True
                pos += 1
                continue

            option = self._find_option(token, end_of_arguments)
            if option is None:
                if fail_on_unknown_option:
                    self._error(f"Unknown option: {token}")
                    ok = False
                else:
                    self._warning(f"Ignoring unknown option: {token}")
            elif not option.is_option_set():
                if not option.type.takes_value:
                    option.set_value(True)
                elif pos + 1 < len(arguments):
                    pos += 1
                    if option.type is OptionType.FILE:
                        path = resolve_path(arguments[pos])
                        option.set_value(path)
                        ok = self._check_path_exists(option, token, path) and ok
                    else:
                        option.set_value(arguments[pos])
                elif option.type is OptionType.FILE:
                    self._error(f"Missing path for argument {token}")
                    ok = False
                else:
                    self._error(f"Missing value for argument {token}")
                    ok = False
                if option.is_option_set():
                    logger.debug(
                        "Option '%s' set to %r by '%s'.",
                        option.option_id,
                        option.value,
                        token,
                    )
            elif self._is_bare_token(token, end_of_arguments):
                logger.debug(
                    "Positional option '%s' set to %r.", option.option_id, token
                )
                if option.type is OptionType.FILE:
                    ok = (
                        self._check_path_exists(option, option.get_option_name(), token)
                        and ok
                    )
            else:
                logger.debug(
                    "Token '%s' matched option '%s' which is already set.",
                    token,
                    option.option_id,
                )
            pos += 1

        for option in self._options:
            if option.required and not option.is_option_set():
                self._error(f"Argument is required: {option.get_option_name()}")
                ok = False

        return ok

    def get_error_message(self) -> str:
        """Return errors and warnings of the last parse, one per line."""
        return "\n".join(diagnostic.message for diagnostic in self._diagnostics)

    def has_errors(self) -> bool:
        """Return True if the last parse recorded at least one error."""
        return any(diagnostic.is_error for diagnostic in self._diagnostics)

    def is_option_set(self, option_id: str) -> bool:
        """After parsing, check if a certain option was set by the user."""
        option = self.get_option(option_id)
        return option.is_option_set() if option else False

    def get_opt_string(self, option_id: str) -> str:
        """Return the value of an option as text."""
        option = self.get_option(option_id)
        return format_value(option.value) if option else ""

    def get_opt_file(self, option_id: str) -> Path:
        """Return the value of an option as a path. The path is not checked."""
        option = self.get_option(option_id)
        return coerce_path(option.value) if option else Path("")

    def get_opt_int(self, option_id: str) -> int:
        """Return the value of an option as an integer, 0 if it cannot be read."""
        option = self.get_option(option_id)
        return coerce_int(option.value) if option else 0

    def get_opt_double(self, option_id: str) -> float:
        """Return the value of an option as a float, 0.0 if it cannot be read."""
        option = self.get_option(option_id)
        return coerce_float(option.value) if option else 0.0

    def get_opt_boolean(self, option_id: str) -> bool:
        """Return the value of an option as a boolean."""
        option = self.get_option(option_id)
        return coerce_bool(option.value) if option else False

    def get_help_text(self) -> str:
        """Return the header, one line per option, then the footer."""
        text = self.header
        for option in self._options:
            if text:
                text += "\n"
            text += option.get_help_text()
        if self.footer:
            if text:
                text += "\n"
            text += self.footer
        return text

    def render_help(self) -> None:
        """Print the help text to the console."""
        console.print(
            self.get_help_text(), markup=False, highlight=False, soft_wrap=True
        )

    def print_diagnostics(self) -> None:
        """Print errors and warnings of the last parse to stderr."""
        for diagnostic in self._diagnostics:
            error_console.print(
                diagnostic.message,
                style="bold red" if diagnostic.is_error else "yellow",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert the registry into a serializable list of dicts.

        Returns:
            List of definitions, in the shape accepted by schema files.
        """
        return [
            {
                "id": option.option_id,
                "arg": option.arg,
                "long_arg": option.long_arg,
                "type": option.type.value,
                "required": option.required,
                "must_exist": option.must_exist,
                "default": option.default,
                "help": option.help_text,
            }
            for option in self._options
        ]

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(option.positional for option in self._options)
        required = sum(option.required for option in self._options)
        return (
            f"OptionsParser(options={len(self._options)}, "
            f"flagged={len(self._options) - positional}, "
            f"positional={positional}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
