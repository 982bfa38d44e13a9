"""Configuration loading, validation and logging setup."""

from .loader import ConfigError, load_config, get_config_value
from .validator import ValidationError, validate_config
from .logging_setup import setup_logging
from .factory import create_decrypter

__all__ = [
    "ConfigError",
    "load_config",
    "get_config_value",
    "ValidationError",
    "validate_config",
    "setup_logging",
    "create_decrypter",
]
