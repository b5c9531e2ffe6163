"""Configuration models and loaders for regcreds."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, OUTPUT_DIR_ENV, dump_example_config, load_config
from .models import LoggingConfig, OutputConfig, RegcredsConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "OUTPUT_DIR_ENV",
    "OutputConfig",
    "RegcredsConfig",
    "dump_example_config",
    "load_config",
]
