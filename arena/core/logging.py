"""
Logging configuration module for the arena.

Provides centralized logging setup with colored output using rich, plus the
debug helper the engine uses to trace state changes. Warnings go through
catchery.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "arena"


def setup_logging(level: int = logging.INFO, width: int = 120) -> None:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The logging level to set. Defaults to logging.INFO.
        width (int): Width of the logging console. Defaults to 120.

    """
    console = Console(width=width, force_terminal=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )
    get_logger().setLevel(level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Gets a logger below the arena namespace.

    Args:
        name (str | None): Optional child name, e.g. "actions".

    Returns:
        logging.Logger: The configured logger instance.

    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


logger = get_logger()


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs a debug message with optional context.

    The message is only formatted when debug logging is enabled, since the
    engine calls this on every state change.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if context:
        # Format context as key=value pairs
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    logger.debug(message)
