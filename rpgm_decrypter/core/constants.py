"""
Byte-level constants of the RPG Maker MV/MZ asset encryption.

RPG Maker takes the first 16 bytes of a PNG, Ogg or M4A file, XORs them
with an MD5 digest of the project's encryption key string and prepends
a fixed 16-byte marker. Most projects leave the key string empty, so the
digest is usually DEFAULT_KEY.
"""

from typing import Tuple

HEADER_LENGTH = 16

KEY_LENGTH = 16
KEY_STR_LENGTH = 32

# MD5 of an empty string, used when "Encryption key" is left unfilled
DEFAULT_KEY = "d41d8cd98f00b204e9800998ecf8427e"

# Every encrypted file starts with this marker
RPGM_HEADER = bytes([
    0x52, 0x50, 0x47, 0x4D, 0x56, 0x00, 0x00, 0x00,
    0x00, 0x03, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00,
])

# PNG signature + IHDR chunk length and type, identical in every PNG
PNG_HEADER = bytes([
    0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A,
    0x00, 0x00, 0x00, 0x0D, 0x49, 0x48, 0x44, 0x52,
])

# 0-3    OggS capture pattern
# 4      stream structure version, always 0
# 5      header type, 0x02 (beginning of stream) on the first page
# 6-13   granule position, zero since the first page carries no audio
# 14-15  low half of the bitstream serial number, differs per file
OGG_HEADER_TEMPLATE = bytes([
    0x4F, 0x67, 0x67, 0x53, 0x00, 0x02, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
])
OGG_SERIALNO_OFFSET = 14

OGG_PAGE_HEADER_LENGTH = 27
OGG_PAGE_SERIALNO_SLICE = slice(14, 18)
OGG_PAGE_SEGMENT_COUNT_INDEX = 26

# 0-3    ftyp box size, differs per file
# 4-7    "ftyp"
# 8-11   major brand "M4A "
# 12-15  minor version, not checked by decoders
M4A_HEADER_TEMPLATE = bytes([
    0x00, 0x00, 0x00, 0x1C, 0x66, 0x74, 0x79, 0x70,
    0x4D, 0x34, 0x41, 0x20, 0x00, 0x00, 0x02, 0x00,
])

# Box types that may follow the ftyp box
M4A_POST_HEADER_BOXES: Tuple[bytes, ...] = (
    b"moov", b"mdat", b"free", b"skip", b"wide", b"pnot",
)
M4A_SCAN_LENGTH = 64
M4A_CHUNK_SIZE = 4
