"""Build decrypters from configuration."""

import logging
from typing import Any, Dict

from rpgm_decrypter.config.loader import get_config_value
from rpgm_decrypter.config.validator import DEFAULT_KEY_ALIAS
from rpgm_decrypter.core.constants import DEFAULT_KEY
from rpgm_decrypter.core.decrypter import Decrypter

logger = logging.getLogger(__name__)


def create_decrypter(config: Dict[str, Any]) -> Decrypter:
    """
    Create a Decrypter from the decrypter section of the configuration.

    Args:
        config: Validated configuration dictionary

    Returns:
        Decrypter holding the configured key, or no key if decrypter.key
        is null (the key is then derived from the first decrypted file)

    Raises:
        InvalidKeyLengthError: If the configured key has the wrong length
        InvalidKeyError: If the configured key is not hexadecimal
    """
    key = get_config_value(config, 'decrypter.key')

    if key is None:
        logger.info("No encryption key configured, deriving it from asset data")
        return Decrypter()

    if key == DEFAULT_KEY_ALIAS:
        key = DEFAULT_KEY

    logger.info("Using configured encryption key")
    return Decrypter(key)
