"""Logging configuration using loguru.

segpath is a library, so its records are disabled on import
(see ``segpath/__init__.py``). Applications that want them call
configure_logging, which re-enables the ``segpath`` namespace and
installs sinks.
"""

import logging
import sys
from typing import Any

from loguru import logger

from segpath.config.models import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class _InterceptHandler(logging.Handler):
    """Route standard library logging through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging internals to report the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(config: LoggingConfig, *, intercept_stdlib: bool = False) -> None:
    """
    Configure loguru logger based on configuration.

    Args:
        config: LoggingConfig with level, format, and file settings.
        intercept_stdlib: Also route stdlib ``logging`` records through loguru.
    """
    logger.remove()
    logger.enable("segpath")

    if config.format == "json":
        fmt = "{message}"
        serialize = True
    else:
        fmt = CONSOLE_FORMAT
        serialize = False

    logger.add(
        sys.stderr,
        format=fmt,
        level=config.level,
        serialize=serialize,
        colorize=config.format == "console",
    )

    if config.file:
        logger.add(
            config.file,
            format=fmt,
            level=config.level,
            serialize=serialize,
            rotation=config.rotation,
            retention=config.retention,
        )

    if intercept_stdlib:
        logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    logger.debug("Logging configured: level={} format={}", config.level, config.format)


def get_logger(name: str) -> Any:
    """
    Get a logger instance with context.

    Args:
        name: Logger name (typically module name).

    Returns:
        Bound loguru logger.
    """
    return logger.bind(name=name)
