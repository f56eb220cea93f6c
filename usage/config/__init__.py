"""Configuration module for the usage tool."""

from .usage_config import UsageConfig
from .config_loader import ConfigLoader, default_config_dir

__all__ = ["UsageConfig", "ConfigLoader", "default_config_dir"]
