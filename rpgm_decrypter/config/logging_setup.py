"""Logging setup from configuration."""

import logging
from pathlib import Path
from typing import Any, Dict

from rpgm_decrypter.config.loader import ConfigError


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary

    Raises:
        ConfigError: If the configured log file cannot be created
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = str(logging_config.get('level', 'INFO')).upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    if logging_config.get('console', True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            # Create parent directory if it doesn't exist
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except OSError as e:
            raise ConfigError(f"Could not create log file '{log_file}': {e}")

    # NullHandler keeps basicConfig from adding its own stderr handler
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )
