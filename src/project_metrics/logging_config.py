"""
Logging configuration for project-metrics.

Log records always go to stderr through rich, so `analyze --format json`
can be piped without log lines mixing into the document on stdout.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "project_metrics"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging with rich handler for colored output on stderr.

    Args:
        verbose: Enable DEBUG level logging, with source paths on each line
        quiet: Suppress all but ERROR level logging
        log_file: Optional file path to write logs to

    Returns:
        Configured logger instance for project_metrics
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            # Engine frames hold N x N matrices; dumping locals floods the terminal
            tracebacks_show_locals=False,
            tracebacks_suppress=[typer],
            markup=False,  # messages carry module paths, which may contain brackets
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    # Replace handlers left by an earlier call (repeated CLI invocations in one process)
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'project_metrics.engine' or 'engine')
              If None, returns the root project_metrics logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
