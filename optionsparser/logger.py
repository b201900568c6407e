# Optionsparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for optionsparser."""
import logging

logger: logging.Logger = logging.getLogger("optionsparser")
