"""Logging configuration.

Sets up the 'kinecalc' logger namespace. Every module logs through
``logging.getLogger(__name__)``; the namespace is attached to them through
``LOGGER_NAMES``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Top-level packages live directly under src/, so their loggers are not
# children of "kinecalc" by name.
LOGGER_NAMES: tuple[str, ...] = ("kinecalc", "core", "adapters", "cli")


def resolve_level(level: int | str) -> int:
    """Accept either a logging constant or a level name such as "debug"."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(level: int | str = logging.INFO, log_file: Path | str | None = None) -> None:
    """
    Configures the application loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, "INFO")
        log_file: Optional path to save logs to a file.
    """
    numeric_level = resolve_level(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # 1. Console Handler (stderr, stdout is reserved for results / JSON)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    # 2. File Handler (Optional)
    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        # Avoid duplicate logs when the CLI is invoked repeatedly in-process
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("kinecalc").debug("Logging initialized.")
