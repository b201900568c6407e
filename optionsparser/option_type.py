# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, the enum describing which kind of value an option carries.

The type decides how many tokens an option consumes while parsing (a boolean
flag consumes none, every other type consumes exactly one) and which
placeholder is shown in the rendered help line.

Supports alias coercion for config-friendly values, so schema files may write
`type: int` or `type: path` instead of the canonical member values.

Example:
    OptionType("integer") → OptionType.INTEGER
    OptionType("int")     → OptionType.INTEGER (via alias)
    OptionType("Path")    → OptionType.FILE (via alias, case-insensitive)
"""
from __future__ import annotations

from enum import Enum


class OptionType(Enum):
    """
    Value type of a registered option.

    Members:
        STRING: Store the following token verbatim.
        FILE: Store the following token as a path, made absolute against the cwd.
        INTEGER: Store the following token, read back as an int.
        DOUBLE: Store the following token, read back as a float.
        BOOLEAN: Flag without a value, stores `True` when present.

    Aliases:
        - "str" → "string"
        - "path", "filepath", "filename" → "file"
        - "int", "number" → "integer"
        - "float" → "double"
        - "bool", "flag" → "boolean"
    """

    STRING = "string"
    FILE = "file"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "path": "file",
            "filepath": "file",
            "filename": "file",
            "int": "integer",
            "number": "integer",
            "float": "double",
            "bool": "boolean",
            "flag": "boolean",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether an option of this type consumes the token following its flag."""
        return self is not OptionType.BOOLEAN

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value
