"""
Shared pytest fixtures and utilities for the rpgm_decrypter test suite.

Assets are built in memory: just enough PNG, Ogg and M4A structure for
key recovery, followed by filler bytes.
"""

import struct
from typing import Callable, List, Optional

import pytest

from rpgm_decrypter.core.constants import DEFAULT_KEY, PNG_HEADER, RPGM_HEADER


def xor_header_bytes(data: bytes, key_hex: str) -> bytes:
    """XOR the first 16 bytes of data with a hex key (reference implementation)."""
    key = bytes.fromhex(key_hex)
    head = bytes(b ^ k for b, k in zip(data[:16], key))
    return head + data[16:]


def build_ogg_page(
    serialno: int,
    segments: List[int],
    header_type: int = 0,
    sequence: int = 0,
    granule: int = 0,
) -> bytes:
    """Build one Ogg page with zero CRC and payload of 'x' bytes."""
    header = (
        b"OggS"
        + bytes([0, header_type])
        + struct.pack("<q", granule)
        + struct.pack("<I", serialno)
        + struct.pack("<I", sequence)
        + b"\x00\x00\x00\x00"
        + bytes([len(segments)])
    )
    return header + bytes(segments) + b"x" * sum(segments)


@pytest.fixture
def default_key() -> str:
    return DEFAULT_KEY


@pytest.fixture
def encrypt_asset() -> Callable[[bytes, str], bytes]:
    """
    Produce RPG Maker encrypted data the way the engine does.

    Usage:
        data = encrypt_asset(plain, key_hex)
    """

    def _encrypt(plain: bytes, key_hex: str = DEFAULT_KEY) -> bytes:
        return RPGM_HEADER + xor_header_bytes(plain, key_hex)

    return _encrypt


@pytest.fixture
def png_plain() -> bytes:
    """Minimal PNG: signature, IHDR chunk, and some trailing data."""
    ihdr_data = struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0)
    return PNG_HEADER + ihdr_data + b"\x00\x00\x00\x00" + b"IDAT-and-more" * 4


@pytest.fixture
def make_ogg_page() -> Callable[..., bytes]:
    """Expose build_ogg_page to tests."""
    return build_ogg_page


@pytest.fixture
def make_ogg() -> Callable[..., bytes]:
    """
    Build an Ogg stream of three pages sharing one serial number.

    Usage:
        data = make_ogg(serialno=0xDEADBEEF, first_segments=[30])
    """

    def _builder(
        serialno: int = 0x1234ABCD,
        first_segments: Optional[List[int]] = None,
        second_segments: Optional[List[int]] = None,
    ) -> bytes:
        first_segments = first_segments if first_segments is not None else [30]
        second_segments = second_segments if second_segments is not None else [255, 17]
        return (
            build_ogg_page(serialno, first_segments, header_type=0x02, sequence=0)
            + build_ogg_page(serialno, second_segments, sequence=1)
            + build_ogg_page(serialno, [8], header_type=0x04, sequence=2, granule=4410)
        )

    return _builder


@pytest.fixture
def make_m4a() -> Callable[..., bytes]:
    """
    Build the start of an M4A file: ftyp box followed by another box.

    Usage:
        data = make_m4a(brands=[b"M4A ", b"mp42"], next_box=b"mdat")
    """

    def _builder(brands: Optional[List[bytes]] = None, next_box: bytes = b"free") -> bytes:
        brands = brands if brands is not None else [b"M4A ", b"mp42", b"isom"]
        body = b"ftyp" + b"M4A " + b"\x00\x00\x02\x00" + b"".join(brands)
        ftyp = struct.pack(">I", len(body) + 4) + body
        following = struct.pack(">I", 8 + 64) + next_box + b"\x00" * 64
        return ftyp + following + b"\x00" * 32

    return _builder
