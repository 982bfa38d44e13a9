"""
rpgm_decrypter - RPG Maker MV/MZ asset decrypter

Recovers encryption keys from and decrypts/encrypts rpgmvp/png_,
rpgmvo/ogg_ and rpgmvm/m4a_ assets, working on in-memory buffers.
"""

__version__ = "0.1.0"

from rpgm_decrypter.core import (
    DEFAULT_KEY,
    RPGM_HEADER,
    Decrypter,
    DecrypterError,
    Engine,
    FileType,
)

__all__ = [
    "DEFAULT_KEY",
    "RPGM_HEADER",
    "Decrypter",
    "DecrypterError",
    "Engine",
    "FileType",
]
