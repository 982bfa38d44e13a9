"""Encryption settings stored in an RPG Maker project's System.json."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from rpgm_decrypter.core.errors import DecrypterError, SystemJsonError
from rpgm_decrypter.core.key import EncryptionKey

logger = logging.getLogger(__name__)


@dataclass
class SystemEncryption:
    """Encryption-related fields of System.json."""
    encryption_key: Optional[EncryptionKey] = None
    has_encrypted_images: bool = False
    has_encrypted_audio: bool = False


def read_system_encryption(text: str) -> SystemEncryption:
    """
    Parse the encryption settings out of System.json text.

    Args:
        text: Contents of data/System.json (a leading BOM is tolerated)

    Returns:
        SystemEncryption; encryption_key is None if the project has no key

    Raises:
        SystemJsonError: If text is not a JSON object or the key is malformed
    """
    try:
        data = json.loads(text.lstrip("\ufeff"))
    except json.JSONDecodeError as e:
        raise SystemJsonError(f"Invalid JSON in System.json: {e}")

    if not isinstance(data, dict):
        raise SystemJsonError("System.json must contain a JSON object")

    raw_key = data.get("encryptionKey")
    key = None
    if raw_key:
        if not isinstance(raw_key, str):
            raise SystemJsonError("System.json encryptionKey must be a string")
        try:
            key = EncryptionKey.from_hex(raw_key)
        except DecrypterError as e:
            raise SystemJsonError(f"Invalid encryptionKey in System.json: {e}")
    else:
        logger.debug("System.json has no encryptionKey")

    return SystemEncryption(
        encryption_key=key,
        has_encrypted_images=bool(data.get("hasEncryptedImages", False)),
        has_encrypted_audio=bool(data.get("hasEncryptedAudio", False)),
    )
