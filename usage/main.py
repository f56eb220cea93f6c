#!/usr/bin/env python3
"""
Entry point for the usage tool.

Runs one command, waits for it, and prints its time and resource usage.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from usage.cli.cli import parse_usage_args
from usage.config import ConfigLoader
from usage.errors import ConfigError, UsageError
from usage.monitor.process_runner import ProcessRunner
from usage.util.log_config import setup_logger

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[Path] = None) -> ConfigLoader:
    loader = ConfigLoader(config_path)
    log_file = loader.config_data.log_file
    try:
        setup_logger("usage", level=loader.log_level,
                     log_file=Path(log_file).expanduser() if log_file else None)
    except OSError as e:
        raise ConfigError(f"Cannot open log file {log_file}: {e.strerror}",
                          context={'log_file': log_file}) from e
    return loader


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    1. Parse the command line
    2. Load configuration and set up logging
    3. Run the command and wait for it
    4. Print the report

    Returns:
        int: 0 when the measurement completed, the error's exit code otherwise
    """
    invocation = parse_usage_args(argv)

    try:
        loader = load_config()
    except ConfigError as e:
        setup_logger("usage")
        logger.error(e.message)
        return e.exit_code

    logger.debug(f"Configuration: {loader.config_data}")

    runner = ProcessRunner(invocation, divisor=loader.config_data.cpu_divisor)
    try:
        result = runner.run()
    except UsageError as e:
        logger.error(e.message)
        logger.debug(f"Error details: {e.to_dict()}")
        return e.exit_code

    if result.exec_error is not None:
        logger.error(result.exec_error.message)

    print(result.report.render(), flush=True)

    if result.exec_error is not None:
        return result.exec_error.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
