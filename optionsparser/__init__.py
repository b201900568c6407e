"""
optionsparser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .config import build_parser, load_parser
from .exceptions import OptionDefinitionError, OptionsParserError, SchemaLoadError
from .logger import logger
from .option import Option
from .option_type import OptionType
from .options_parser import Diagnostic, OptionsParser

__all__ = [
    "OptionsParser",
    "Option",
    "OptionType",
    "Diagnostic",
    "OptionsParserError",
    "OptionDefinitionError",
    "SchemaLoadError",
    "build_parser",
    "load_parser",
    "logger",
]
