"""
Core package for rpgm_decrypter.

Key recovery and the header transform for RPG Maker encrypted assets.
"""

from .constants import DEFAULT_KEY, HEADER_LENGTH, RPGM_HEADER
from .decrypter import Decrypter, DecryptedView, EncryptedPayload, xor_header
from .errors import (
    DecrypterError,
    InvalidHeaderError,
    InvalidKeyError,
    InvalidKeyLengthError,
    KeyNotSetError,
    SystemJsonError,
    UnexpectedEOFError,
    UnsupportedExtensionError,
)
from .file_types import Engine, FileType
from .key import EncryptionKey
from .signatures import derive_key, derive_key_bytes
from .system_json import SystemEncryption, read_system_encryption

__all__ = [
    "DEFAULT_KEY",
    "HEADER_LENGTH",
    "RPGM_HEADER",
    "Decrypter",
    "DecryptedView",
    "EncryptedPayload",
    "xor_header",
    "DecrypterError",
    "InvalidHeaderError",
    "InvalidKeyError",
    "InvalidKeyLengthError",
    "KeyNotSetError",
    "SystemJsonError",
    "UnexpectedEOFError",
    "UnsupportedExtensionError",
    "Engine",
    "FileType",
    "EncryptionKey",
    "derive_key",
    "derive_key_bytes",
    "SystemEncryption",
    "read_system_encryption",
]
