"""
Decryption and encryption of RPG Maker MV/MZ assets.

Encryption is a XOR of the first 16 bytes of the file with the key, so
the same transform both encrypts and decrypts. Encrypted files carry the
RPG Maker header in front of the transformed data.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from rpgm_decrypter.core.constants import HEADER_LENGTH, RPGM_HEADER
from rpgm_decrypter.core.errors import (
    InvalidHeaderError,
    KeyNotSetError,
    UnexpectedEOFError,
)
from rpgm_decrypter.core.file_types import FileType
from rpgm_decrypter.core.key import EncryptionKey
from rpgm_decrypter.core.signatures import derive_key_bytes, has_rpgm_header

logger = logging.getLogger(__name__)

WritableBuffer = Union[bytearray, memoryview]


def xor_header(buffer: WritableBuffer, key: bytes) -> None:
    """
    XOR the first 16 bytes of a buffer with the key, in place.

    Bytes past the header are left untouched. Applying it twice with the
    same key restores the original data.

    Args:
        buffer: Writable buffer of at least 16 bytes
        key: 16 raw key bytes

    Raises:
        UnexpectedEOFError: If buffer is shorter than 16 bytes
    """
    if len(buffer) < HEADER_LENGTH:
        raise UnexpectedEOFError()

    for i in range(HEADER_LENGTH):
        buffer[i] ^= key[i]


def _writable_view(buffer: WritableBuffer) -> memoryview:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("In-place operations require a writable buffer such as bytearray")
    return view


@dataclass
class DecryptedView:
    """
    Result of Decrypter.decrypt_in_place.

    The buffer still holds the (now meaningless) RPG Maker header in its
    first 16 bytes. Only `data`, which starts past it, is the decrypted file.
    """
    buffer: WritableBuffer
    offset: int = HEADER_LENGTH

    @property
    def data(self) -> memoryview:
        """Decrypted file contents, a view into the original buffer."""
        return memoryview(self.buffer)[self.offset:]

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __len__(self) -> int:
        return len(self.buffer) - self.offset


@dataclass
class EncryptedPayload:
    """
    Result of Decrypter.encrypt_in_place.

    The buffer is encrypted but the RPG Maker header is not part of it.
    Write `header` before `body`, e.g. `f.writelines(payload.chunks())`.
    """
    body: WritableBuffer
    header: bytes = RPGM_HEADER

    def chunks(self) -> Tuple[bytes, WritableBuffer]:
        """Header and body, in file order."""
        return self.header, self.body

    def __bytes__(self) -> bytes:
        return self.header + bytes(self.body)

    def __len__(self) -> int:
        return len(self.header) + len(self.body)


class Decrypter:
    """
    Decrypts and encrypts RPG Maker MV/MZ PNG, Ogg and M4A assets.

    The key can be set from the `encryptionKey` field of System.json, or
    left unset: the first call to decrypt() recovers it from the data.
    Once set, the key is reused for every following call until replaced.

    Instances are not thread-safe. Share one only when key setting and
    decryption are externally synchronized, or use one per thread.

    Example:
        >>> decrypter = Decrypter()
        >>> png = decrypter.decrypt(encrypted, FileType.PNG)
        >>> decrypter.key
        'd41d8cd98f00b204e9800998ecf8427e'
    """

    def __init__(self, key: Optional[str] = None):
        """
        Initialize decrypter.

        Args:
            key: Optional 32-character hex key. If None, the key is derived
                 from the first decrypted file.

        Raises:
            InvalidKeyLengthError: If key is not 32 characters long
            InvalidKeyError: If key is not hexadecimal
        """
        self._key: Optional[EncryptionKey] = None
        if key is not None:
            self.set_key_from_str(key)

    @classmethod
    def from_system_json(cls, text: str) -> "Decrypter":
        """
        Create a decrypter keyed from the text of a System.json file.

        If the project has no encryption key, the decrypter is left without
        one and derives it from data.
        """
        from rpgm_decrypter.core.system_json import read_system_encryption

        encryption = read_system_encryption(text)
        decrypter = cls()
        if encryption.encryption_key is not None:
            decrypter._key = encryption.encryption_key
        return decrypter

    @property
    def key(self) -> Optional[str]:
        """Current key as 32 hex characters, or None if not set."""
        if self._key is None:
            return None
        return self._key.hex

    @property
    def has_key(self) -> bool:
        return self._key is not None

    def set_key_from_str(self, key: str) -> None:
        """
        Set the key from its hex string.

        On failure the previous key, if any, is kept.

        Raises:
            InvalidKeyLengthError: If key is not 32 characters long
            InvalidKeyError: If key is not hexadecimal
        """
        self._key = EncryptionKey.from_hex(key)
        logger.debug("Encryption key set from string")

    def set_key_from_file(self, file_content: bytes, file_type: FileType) -> str:
        """
        Set the key by recovering it from encrypted file data.

        Args:
            file_content: Encrypted data including the RPG Maker header
            file_type: Media type of the data

        Returns:
            The recovered key as 32 lowercase hex characters

        Raises:
            InvalidHeaderError: If data does not start with the RPG Maker header
            UnexpectedEOFError: If data ends before the key can be recovered
        """
        self._key = EncryptionKey.from_bytes(derive_key_bytes(file_content, file_type))
        return self._key.hex

    def _ensure_key(self, file_content: bytes, file_type: FileType) -> bytes:
        if not has_rpgm_header(file_content):
            raise InvalidHeaderError()

        if self._key is None:
            self.set_key_from_file(file_content, file_type)
            logger.debug(f"Key recovered from {file_type} data")

        return self._key.raw

    def decrypt(self, file_content: bytes, file_type: FileType) -> bytes:
        """
        Decrypt RPG Maker file data into a new buffer.

        Derives the key from the data if none is set. To avoid the copy,
        see decrypt_in_place().

        Args:
            file_content: Encrypted data including the RPG Maker header
            file_type: Media type of the data

        Returns:
            Decrypted file contents, without the RPG Maker header

        Raises:
            InvalidHeaderError: If data does not start with the RPG Maker header
            UnexpectedEOFError: If data ends unexpectedly
        """
        key = self._ensure_key(file_content, file_type)

        result = bytearray(file_content[HEADER_LENGTH:])
        xor_header(result, key)
        return bytes(result)

    def decrypt_in_place(self, buffer: WritableBuffer, file_type: FileType) -> DecryptedView:
        """
        Decrypt RPG Maker file data inside the passed buffer.

        Derives the key from the data if none is set. The decrypted file
        starts at offset 16; use the returned view instead of the buffer.

        Args:
            buffer: Writable encrypted data including the RPG Maker header
            file_type: Media type of the data

        Returns:
            DecryptedView over the decrypted part of buffer

        Raises:
            InvalidHeaderError: If data does not start with the RPG Maker header
            UnexpectedEOFError: If data ends unexpectedly
            TypeError: If buffer is read-only
        """
        view = _writable_view(buffer)
        key = self._ensure_key(view, file_type)

        xor_header(view[HEADER_LENGTH:], key)
        return DecryptedView(buffer)

    def _require_key(self) -> bytes:
        if self._key is None:
            raise KeyNotSetError()
        return self._key.raw

    def encrypt(self, file_content: bytes) -> bytes:
        """
        Encrypt PNG, Ogg or M4A file data into a new buffer.

        A key must be set first, either explicitly or by decrypting a file
        of the same project. To avoid the copy, see encrypt_in_place().

        Args:
            file_content: Plain file data

        Returns:
            RPG Maker header followed by the encrypted data

        Raises:
            KeyNotSetError: If no key is set
            UnexpectedEOFError: If data is shorter than 16 bytes
        """
        key = self._require_key()

        data = bytearray(file_content)
        xor_header(data, key)
        return RPGM_HEADER + bytes(data)

    def encrypt_in_place(self, buffer: WritableBuffer) -> EncryptedPayload:
        """
        Encrypt PNG, Ogg or M4A file data inside the passed buffer.

        The RPG Maker header is NOT prepended to the buffer; the returned
        payload pairs it with the buffer so both can be written in order.

        Raises:
            KeyNotSetError: If no key is set
            UnexpectedEOFError: If data is shorter than 16 bytes
            TypeError: If buffer is read-only
        """
        key = self._require_key()

        xor_header(_writable_view(buffer), key)
        return EncryptedPayload(buffer)
