"""Logger configuration with optional file and console handlers."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from env_option.constants.flags import DEBUG_VAR

# Create formatters
file_formatter = logging.Formatter(
    '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
)
console_formatter = logging.Formatter(
    '%(levelname)-8s | %(message)s'
)

_configured = False


def _debug_enabled() -> bool:
    return os.environ.get(DEBUG_VAR, "0") == "1"


def _apply_debug_toggle(logger: logging.Logger) -> None:
    # Conditionally set DEBUG level if environment variable is set
    logger.setLevel(logging.DEBUG if _debug_enabled() else logging.INFO)


def configure_logging(log_dir: Optional[Path | str] = None) -> logging.Logger:
    """Attach console (and optionally dated file) handlers to the package logger.

    Only the CLI calls this; importing the library never installs handlers.
    DEBUG_ENV_OPTION is re-read here, so call it after any .env file is loaded.
    """
    global _configured
    root_logger = logging.getLogger("env_option")

    # Loggers created at import time picked up the toggle before .env was read
    for name, existing in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("env_option.") and isinstance(existing, logging.Logger):
            _apply_debug_toggle(existing)

    if _configured:
        return root_logger

    root_logger.setLevel(logging.DEBUG)

    # Console handler with a less verbose format; DEBUG only when toggled on
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if _debug_enabled() else logging.INFO)
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        # File handler with current date in filename
        current_date = datetime.now().strftime("%Y-%m-%d")
        log_file = logs_dir / f"env_option_{current_date}.log"
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    _configured = True
    return root_logger


def get_logger(name):
    """Get a logger with the specified name, nested under ``env_option``."""
    logger = logging.getLogger(f"env_option.{name}")
    _apply_debug_toggle(logger)

    return logger


# Specialized loggers for different components
def get_reader_logger():
    """Get logger for environment lookups."""
    return get_logger("reader")


def get_check_logger():
    """Get logger for the declaration checker."""
    return get_logger("check")
