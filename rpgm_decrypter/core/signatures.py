"""
Encryption key recovery from encrypted assets.

Only the first 16 bytes of an asset are encrypted, and those bytes are
(almost) the same in every file of a media type. XORing the encrypted
header with the expected plaintext header gives the key back.

PNG headers are constant. Ogg and M4A headers contain a per-file field,
which is rebuilt from the unencrypted part of the stream.
"""

import logging
import struct
from typing import Tuple

from rpgm_decrypter.core.constants import (
    HEADER_LENGTH,
    M4A_CHUNK_SIZE,
    M4A_HEADER_TEMPLATE,
    M4A_POST_HEADER_BOXES,
    M4A_SCAN_LENGTH,
    OGG_HEADER_TEMPLATE,
    OGG_PAGE_HEADER_LENGTH,
    OGG_PAGE_SEGMENT_COUNT_INDEX,
    OGG_PAGE_SERIALNO_SLICE,
    OGG_SERIALNO_OFFSET,
    PNG_HEADER,
    RPGM_HEADER,
)
from rpgm_decrypter.core.errors import InvalidHeaderError, UnexpectedEOFError
from rpgm_decrypter.core.file_types import FileType

logger = logging.getLogger(__name__)


def has_rpgm_header(file_content: bytes) -> bool:
    """Check if data starts with the RPG Maker header."""
    return bytes(file_content[:HEADER_LENGTH]) == RPGM_HEADER


def read_ogg_page_serialno(file_content: bytes, offset: int) -> Tuple[int, int]:
    """
    Read one Ogg page and return its bitstream serial number.

    Page layout: 27-byte header (serial number little-endian at bytes
    14-17, segment count at byte 26), then one lacing value per segment,
    then the payload whose length is the sum of the lacing values. The
    payload itself is not read, so the returned next-page offset may lie
    past the end of the buffer.

    Args:
        file_content: Buffer holding the Ogg stream
        offset: Offset of the page's capture pattern in file_content

    Returns:
        Tuple of (serial number, offset of the next page)

    Raises:
        UnexpectedEOFError: If the page header or lacing table extends past
            the end of the buffer
    """
    header_end = offset + OGG_PAGE_HEADER_LENGTH
    if header_end > len(file_content):
        raise UnexpectedEOFError()

    header = bytes(file_content[offset:header_end])
    segment_count = header[OGG_PAGE_SEGMENT_COUNT_INDEX]

    table_end = header_end + segment_count
    if table_end > len(file_content):
        raise UnexpectedEOFError()

    body_length = sum(file_content[header_end:table_end])
    next_offset = table_end + body_length

    (serialno,) = struct.unpack("<I", header[OGG_PAGE_SERIALNO_SLICE])
    return serialno, next_offset


def build_ogg_header(file_content: bytes) -> bytes:
    """
    Rebuild the plaintext header of an encrypted Ogg file.

    The serial number is constant across all pages of a stream, but the
    first page's copy sits in the encrypted region, so it is read from
    the second page instead.
    """
    # First page starts right after the RPG Maker header
    _, second_page = read_ogg_page_serialno(file_content, HEADER_LENGTH)
    if second_page > len(file_content):
        raise UnexpectedEOFError()

    # Only the second page's header is needed, its payload may be cut off
    serialno, _ = read_ogg_page_serialno(file_content, second_page)

    header = bytearray(OGG_HEADER_TEMPLATE)
    header[OGG_SERIALNO_OFFSET:HEADER_LENGTH] = struct.pack("<I", serialno)[:2]

    logger.debug(f"Ogg stream serial number: {serialno:#010x}")
    return bytes(header)


def build_m4a_header(file_content: bytes) -> bytes:
    """
    Rebuild the plaintext header of an encrypted M4A file.

    The ftyp box size is the only field decoders care about. The box that
    follows ftyp starts at offset `size`, so its type tag sits at `size + 4`.
    Finding the first known tag in the leading 64 bytes gives the size.

    If no tag is found, the template's default size (28) is kept. Decrypted
    output will then be wrong only if the real size differs.

    Raises:
        UnexpectedEOFError: If fewer than 64 bytes follow the RPG Maker header
    """
    file_start = file_content[HEADER_LENGTH:HEADER_LENGTH + M4A_SCAN_LENGTH]
    if len(file_start) < M4A_SCAN_LENGTH:
        raise UnexpectedEOFError()

    header = bytearray(M4A_HEADER_TEMPLATE)

    # Chunk 0 is the encrypted size field itself
    for i in range(1, M4A_SCAN_LENGTH // M4A_CHUNK_SIZE):
        chunk = bytes(file_start[i * M4A_CHUNK_SIZE:(i + 1) * M4A_CHUNK_SIZE])
        if chunk in M4A_POST_HEADER_BOXES:
            box_size = (i - 1) * M4A_CHUNK_SIZE
            header[:M4A_CHUNK_SIZE] = struct.pack(">I", box_size)
            logger.debug(f"M4A ftyp box size {box_size} (found '{chunk.decode('ascii')}' box)")
            # Only the box right after ftyp gives its size, later tags are payload
            break
    else:
        logger.debug("No known box after ftyp in M4A header, keeping default box size")

    return bytes(header)


def build_reference_header(file_content: bytes, file_type: FileType) -> bytes:
    """
    Get the expected plaintext header for an encrypted asset.

    Args:
        file_content: Encrypted data including the RPG Maker header
        file_type: Media type of the asset

    Returns:
        16 bytes of expected plaintext

    Raises:
        UnexpectedEOFError: If the data is too short to rebuild the header
    """
    if file_type is FileType.PNG:
        return PNG_HEADER
    if file_type is FileType.OGG:
        return build_ogg_header(file_content)
    if file_type is FileType.M4A:
        return build_m4a_header(file_content)

    raise ValueError(f"Unsupported file type: {file_type}")


def derive_key_bytes(file_content: bytes, file_type: FileType) -> bytes:
    """
    Recover the raw 16 key bytes from encrypted asset data.

    Args:
        file_content: Encrypted data including the RPG Maker header
        file_type: Media type of the asset

    Returns:
        16 raw key bytes

    Raises:
        InvalidHeaderError: If data does not start with the RPG Maker header
        UnexpectedEOFError: If data ends before the header can be recovered
    """
    if not has_rpgm_header(file_content):
        raise InvalidHeaderError()

    encrypted_header = bytes(file_content[HEADER_LENGTH:HEADER_LENGTH * 2])
    if len(encrypted_header) < HEADER_LENGTH:
        raise UnexpectedEOFError()

    reference = build_reference_header(file_content, file_type)
    key = bytes(a ^ b for a, b in zip(encrypted_header, reference))

    logger.debug(f"Derived key from {file_type} data")
    return key


def derive_key(file_content: bytes, file_type: FileType) -> str:
    """
    Recover the encryption key from encrypted asset data.

    Returns:
        Key as 32 lowercase hex characters

    Raises:
        InvalidHeaderError: If data does not start with the RPG Maker header
        UnexpectedEOFError: If data ends before the header can be recovered
    """
    return derive_key_bytes(file_content, file_type).hex()
