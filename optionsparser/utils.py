# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion, path normalization and logging setup for optionsparser.

Option values are stored type-erased: the parser keeps the raw token (or the
default a caller assigned) and only converts it when one of the typed
accessors asks for it. The functions here define those conversions. None of
them raise; a value that cannot be read as the requested type falls back to
that type's zero value.

Functions:
- format_value: Render a stored value as text.
- coerce_bool / coerce_int / coerce_float / coerce_path: Lazy typed reads.
- resolve_path: Make a relative path absolute against the current directory.
- setup_logging: Configure Rich or JSON log output for command-line use.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import pythonjsonlogger.json
from rich.logging import RichHandler

from optionsparser.logger import logger

TRUE_STRINGS = {"true", "t", "1", "yes", "y", "on"}
FALSE_STRINGS = {"false", "f", "0", "no", "n", "off", ""}


def format_value(value: Any) -> str:
    """
    Render a stored option value as text.

    `None` renders as an empty string and booleans as `true` / `false`.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def coerce_bool(value: Any) -> bool:
    """
    Convert a stored value to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes',
    '0', 'off', etc. Numeric strings are true when non-zero; anything else
    unrecognized is False.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUE_STRINGS:
        return True
    if text in FALSE_STRINGS:
        return False
    try:
        return float(text) != 0
    except ValueError:
        logger.debug("Cannot read %r as a boolean, using False.", value)
        return False


def coerce_int(value: Any) -> int:
    """
    Convert a stored value to an integer.

    Floats and float strings are truncated toward zero. Unparsable values
    yield 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if value is None:
        return 0
    try:
        if isinstance(value, float):
            return int(value)
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            return int(float(text))
    except (ValueError, OverflowError):
        logger.debug("Cannot read %r as an integer, using 0.", value)
        return 0


def coerce_float(value: Any) -> float:
    """Convert a stored value to a float. Unparsable values yield 0.0."""
    if isinstance(value, (bool, int, float)):
        return float(value)
    if value is None:
        return 0.0
    try:
        return float(str(value).strip())
    except ValueError:
        logger.debug("Cannot read %r as a float, using 0.0.", value)
        return 0.0


def coerce_path(value: Any) -> Path:
    """Wrap a stored value as a `Path`. No existence check is made."""
    if isinstance(value, Path):
        return value
    return Path(format_value(value))


def resolve_path(raw: str) -> str:
    """Return `raw` unchanged when absolute, else joined onto the current directory."""
    if os.path.isabs(raw):
        return raw
    return os.path.normpath(os.path.join(os.getcwd(), raw))


def setup_logging(
    mode: str = "cli",
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure logging for command-line use of optionsparser.

    The library itself never installs handlers; only the `optionsparser`
    entry point calls this.

    Args:
        mode (str):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default)
                - "json": machine-readable JSON logs
        log_filename (str | None):
            Path of a log file to also write to, at debug level. No file
            logging when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
