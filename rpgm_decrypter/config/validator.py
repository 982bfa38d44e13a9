"""Configuration validation."""

import logging
import string
from typing import Dict, Any, List

from rpgm_decrypter.core.constants import KEY_STR_LENGTH

logger = logging.getLogger(__name__)

# Accepted in place of a hex key to select DEFAULT_KEY
DEFAULT_KEY_ALIAS = 'default'


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    # Validate decrypter section
    errors.extend(_validate_decrypter(config.get('decrypter', {})))

    # Validate logging section
    errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_decrypter(section: Dict[str, Any]) -> List[str]:
    """Validate decrypter options section."""
    errors = []

    if not isinstance(section, dict):
        return ["decrypter must be a mapping"]

    key = section.get('key')
    if key is None:
        logger.debug("decrypter.key not set, key will be derived from data")
        return errors
    if key == DEFAULT_KEY_ALIAS:
        return errors

    if not isinstance(key, str):
        errors.append("decrypter.key must be a string")
    elif len(key) != KEY_STR_LENGTH:
        errors.append(
            f"decrypter.key must be {KEY_STR_LENGTH} hex characters "
            f"or '{DEFAULT_KEY_ALIAS}' (got {len(key)})"
        )
    elif any(c not in string.hexdigits for c in key):
        errors.append("decrypter.key must contain only hexadecimal characters")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    errors = []

    if not isinstance(section, dict):
        return ["logging must be a mapping"]

    # Validate level
    level = section.get('level', 'INFO')
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
    if level not in valid_levels:
        errors.append(f"logging.level must be one of: {', '.join(valid_levels)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors
