# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionsParser` to represent one
registered command-line argument.

An option is matched by its short form (`-x`), its long form (`--name`), or,
when it has neither, by position: bare tokens fill unset positional options
in registration order.

Options are created through `OptionsParser.add_option()`, which returns the
instance so callers can fill in `long_arg`, `help_text` and a default `value`
afterwards. The parser owns the instance for its whole lifetime.

Key Attributes:
- `option_id`: Key used to look the option up after parsing
- `arg`: Short form, spelled `-<arg>` on the command line
- `long_arg`: Long form, spelled `--<long_arg>`
- `type`: `OptionType` deciding value consumption and help placeholder
- `value`: Default before parsing, parsed value after
- `required`: Whether parsing fails if the option is never given
- `must_exist`: For FILE options, whether the path must exist on disk
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from optionsparser.option_type import OptionType
from optionsparser.utils import format_value

HELP_COLUMN = 30


@dataclass
class Option:
    """
    Represents a command-line option.

    Attributes:
        option_id (str): Id to look up the option.
        arg (str): Short argument, prefixed by "-".
        long_arg (str): Long argument, prefixed by "--".
        type (OptionType): The kind of value the option carries.
        help_text (str): A text to explain the option.
        required (bool): Parsing fails if a required option is not set.
        must_exist (bool): For FILE options, the given path must exist.
        value (Any): Default value before parsing, parsed value afterwards.
    """

    option_id: str
    arg: str = ""
    type: OptionType = OptionType.STRING
    long_arg: str = ""
    help_text: str = ""
    required: bool = False
    must_exist: bool = False
    value: Any = None
    _is_set: bool = field(default=False, init=False, repr=False, compare=False)
    _default: Any = field(default=None, init=False, repr=False, compare=False)
    _parsed_value: Any = field(default=None, init=False, repr=False, compare=False)

    @property
    def positional(self) -> bool:
        """True if the option has neither a short nor a long form."""
        return not self.arg and not self.long_arg

    @property
    def default(self) -> Any:
        """The value the option had before parsing assigned one."""
        if self._is_set and self.value is self._parsed_value:
            return self._default
        return self.value

    def get_option_name(self) -> str:
        """Return the readable name of the option (arg and/or long_arg, else the id)."""
        if not self.arg:
            if self.long_arg:
                return self.long_arg
            return self.option_id
        if not self.long_arg:
            return self.arg
        return f"{self.arg} | {self.long_arg}"

    def get_variable_name(self) -> str:
        """Return a placeholder describing the expected value."""
        return {
            OptionType.STRING: "<name>",
            OptionType.FILE: "<filename>",
            OptionType.INTEGER: "<number>",
            OptionType.DOUBLE: "<number>",
        }.get(self.type, "")

    def get_help_text(self) -> str:
        """Return the help line for this option, with its default if still unset."""
        text = f"  -{self.arg}  " if self.arg else " " * 6
        if self.long_arg:
            text += f"--{self.long_arg}"
        text += f" {self.get_variable_name()}"

        if self.help_text:
            text = text.ljust(HELP_COLUMN) + self.help_text
        if self.value is not None and not self._is_set:
            text += f" (default: {format_value(self.value)})"
        return text

    def is_option_set(self) -> bool:
        """Return True once a value was assigned by parsing."""
        return self._is_set

    def set_value(self, value: Any) -> None:
        """Assign a parsed value and mark the option as set."""
        if not self._is_set:
            self._default = self.value
        self.value = value
        self._parsed_value = value
        self._is_set = True

    def reset(self) -> None:
        """
        Drop a parsed value, restoring the default the option had before parsing.

        A value written directly to `value` after parsing becomes the new default.
        """
        if self._is_set:
            if self.value is self._parsed_value:
                self.value = self._default
            self._is_set = False
            self._default = None
            self._parsed_value = None
