"""
Configuration loader for the usage tool.

This module provides the ConfigLoader class for loading and validating
the optional config.yaml. The file only tunes the tool itself; it never
affects the command being measured.
"""
import logging
from pathlib import Path
from typing import Optional

import yaml

from usage.config.usage_config import UsageConfig
from usage.consts.CpuDivisor import CpuDivisor
from usage.errors import ConfigError


def default_config_dir() -> Path:
    """~/.config/usage, resolved when called so HOME is read at run time."""
    return Path.home() / ".config" / "usage"


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path if config_path is not None else default_config_dir()
        self.config_data = self._load_config()

    def _load_config(self) -> UsageConfig:
        """
        Load and parse the configuration from config.yaml.
        A missing file yields the defaults.

        Returns:
            UsageConfig: Configured usage configuration instance
        """
        config = UsageConfig()

        config_file = self.config_path / "config.yaml"
        if not config_file.is_file():
            return config

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to read {config_file}: {e}",
                              context={'config_file': str(config_file)}) from e

        # An empty file parses to None
        if data is None:
            return config
        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping",
                              context={'config_file': str(config_file)})

        if "cpu_divisor" in data:
            try:
                config.cpu_divisor = CpuDivisor(str(data["cpu_divisor"]).lower())
            except ValueError as e:
                choices = ", ".join(d.value for d in CpuDivisor)
                raise ConfigError(f"Invalid cpu_divisor {data['cpu_divisor']!r} (expected one of: {choices})",
                                  context={'config_file': str(config_file)}) from e

        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ConfigError(f"Invalid log_level {data['log_level']!r}",
                                  context={'config_file': str(config_file)})
            config.log_level = level

        if data.get("log_file"):
            config.log_file = str(data["log_file"])

        return config

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.config_data.log_level)
