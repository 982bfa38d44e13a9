"""Encryption key value type."""

import string
from dataclasses import dataclass

from rpgm_decrypter.core.constants import KEY_LENGTH, KEY_STR_LENGTH
from rpgm_decrypter.core.errors import InvalidKeyError, InvalidKeyLengthError

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class EncryptionKey:
    """
    A 16-byte RPG Maker encryption key.

    Holds both the human-readable form (32 hex characters, kept as given,
    as found in the `encryptionKey` field of System.json) and the raw bytes
    XORed onto asset headers. Instances are only built through the
    constructors below, so the two forms always agree.
    """
    hex: str
    raw: bytes

    @classmethod
    def from_hex(cls, key: str) -> "EncryptionKey":
        """
        Build a key from its hex string.

        Args:
            key: Exactly 32 hexadecimal characters, any case

        Returns:
            EncryptionKey holding key unchanged

        Raises:
            InvalidKeyLengthError: If key is not 32 characters long
            InvalidKeyError: If key contains non-hex characters
        """
        if len(key) != KEY_STR_LENGTH:
            raise InvalidKeyLengthError()

        if not _HEX_DIGITS.issuperset(key):
            raise InvalidKeyError()

        return cls(hex=key, raw=bytes.fromhex(key))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "EncryptionKey":
        """
        Build a key from its 16 raw bytes.

        Raises:
            InvalidKeyLengthError: If raw is not 16 bytes long
        """
        if len(raw) != KEY_LENGTH:
            raise InvalidKeyLengthError(f"Key must have a fixed length of {KEY_LENGTH} bytes.")

        return cls(hex=bytes(raw).hex(), raw=bytes(raw))

    def __str__(self) -> str:
        return self.hex
