"""Logging utilities with rich console output for the sync commands.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Processed 100 posts.")
    logger.warning("Could not get API data for post 12.")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared console so log lines and summary lines interleave correctly
console = Console()


def _rich_handler() -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # post titles and meta values may contain [brackets]
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """Get a logger that writes through rich.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level name. If None, uses LOG_LEVEL or defaults to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers or _root_has_rich_handler():
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler())

    # pytest caplog captures through propagation
    logger.propagate = True

    return logger


def _root_has_rich_handler() -> bool:
    return any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at the CLI entry point.

    Args:
        level: Default logging level for all modules (LOG_LEVEL wins if set)
        log_file: Optional file path to also log to a file
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    # Module loggers now print through the root handler only
    for existing in logging.Logger.manager.loggerDict.values():
        if not isinstance(existing, logging.Logger):
            continue
        rich_handlers = [h for h in existing.handlers if isinstance(h, RichHandler)]
        for handler in rich_handlers:
            existing.removeHandler(handler)
        if rich_handlers:
            existing.setLevel(logging.NOTSET)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success line with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error line with a red X to stderr."""
    Console(stderr=True).print(f"[red]✗[/red] Error: {message}")
