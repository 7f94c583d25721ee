"""Logging configuration for commitgen.

Diagnostics go to stderr so stdout only carries the suggested message.
Configured from environment variables:
- COMMITGEN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default WARNING)
- COMMITGEN_LOG_FORMAT: simple, detailed (default simple)
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "commitgen"

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def configure_logging(
    level: Optional[str] = None,
    format_style: Optional[str] = None,
) -> None:
    """Configure the commitgen package logger.

    Args:
        level: Log level name. Defaults to COMMITGEN_LOG_LEVEL or WARNING.
        format_style: "simple" or "detailed". Defaults to COMMITGEN_LOG_FORMAT or simple.
    """
    log_level = (level or os.getenv("COMMITGEN_LOG_LEVEL", "WARNING")).upper()
    log_format = (format_style or os.getenv("COMMITGEN_LOG_FORMAT", "simple")).lower()

    if log_level not in _VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid COMMITGEN_LOG_LEVEL '{log_level}', defaulting to WARNING\n")
        log_level = "WARNING"

    numeric_level = getattr(logging, log_level)

    if log_format == "detailed":
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(fmt="%(levelname)s - %(message)s")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates on repeated calls
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    package_logger.debug("Logging configured: level=%s, format=%s", log_level, log_format)

    # SDK transports are chatty at DEBUG
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
