"""
Logging configuration for the usage tool.

Standard output carries the report, so every diagnostic goes to stderr.
"""
import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str,
    level: int = logging.WARNING,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (the package name, so module loggers inherit it)
        level: Console logging level (default: WARNING)
        log_file: Optional file path for detailed log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if log_file else level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Console handler with clean formatting
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # Clean format: [LEVEL] message
    console_formatter = logging.Formatter(
        fmt='[%(levelname)s] %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        file_formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
