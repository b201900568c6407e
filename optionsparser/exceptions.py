# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in optionsparser.

Parsing itself never raises: unknown options, missing values and unmet
requirements are reported through the return value of
`OptionsParser.parse_arguments()` and its error message buffer. The
exceptions below are reserved for definition-time problems, where the
developer building the option registry made a mistake.

Exception Hierarchy:
- OptionsParserError
    ├── OptionDefinitionError
    └── SchemaLoadError
"""


class OptionsParserError(Exception):
    """Base exception for optionsparser."""


class OptionDefinitionError(OptionsParserError):
    """Exception raised when an option is defined with an invalid type or field."""


class SchemaLoadError(OptionsParserError):
    """Exception raised when an option schema file cannot be read or parsed."""
