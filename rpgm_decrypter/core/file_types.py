"""
Asset type definitions for rpgm_decrypter.

Maps RPG Maker MV and MZ encrypted asset extensions to media types and
to the extensions of their decrypted counterparts.
"""

from enum import Enum
from typing import Dict, List

from rpgm_decrypter.core.errors import UnsupportedExtensionError

MV_PNG_EXT = "rpgmvp"
MZ_PNG_EXT = "png_"
MV_OGG_EXT = "rpgmvo"
MZ_OGG_EXT = "ogg_"
MV_M4A_EXT = "rpgmvm"
MZ_M4A_EXT = "m4a_"

PNG_EXT = "png"
OGG_EXT = "ogg"
M4A_EXT = "m4a"

ENCRYPTED_ASSET_EXTS: List[str] = [
    MV_PNG_EXT, MV_OGG_EXT, MV_M4A_EXT, MZ_PNG_EXT, MZ_OGG_EXT, MZ_M4A_EXT,
]
DECRYPTED_ASSET_EXTS: List[str] = [PNG_EXT, OGG_EXT, M4A_EXT]


class Engine(Enum):
    """RPG Maker generation, which decides the encrypted extension scheme."""
    MV = "mv"
    MZ = "mz"


class FileType(Enum):
    """
    Media types of encrypted RPG Maker assets.

    The value is the extension of the decrypted file.
    """
    PNG = PNG_EXT       # Images
    OGG = OGG_EXT       # Ogg Vorbis audio
    M4A = M4A_EXT       # AAC audio in an MPEG-4 container

    def __str__(self) -> str:
        return self.value

    @property
    def decrypted_extension(self) -> str:
        """Extension of the decrypted file, without the leading dot."""
        return self.value

    def encrypted_extension(self, engine: Engine = Engine.MV) -> str:
        """
        Get the encrypted extension for this media type.

        Args:
            engine: RPG Maker generation (MV uses rpgmv*, MZ uses *_)

        Returns:
            Extension without the leading dot (e.g., 'rpgmvp', 'png_')
        """
        return _ENCRYPTED_EXTS_BY_ENGINE[engine][self]

    @classmethod
    def from_extension(cls, extension: str) -> "FileType":
        """
        Resolve the media type of an encrypted asset extension.

        Args:
            extension: Extension with or without the leading dot, any case

        Returns:
            Matching FileType

        Raises:
            UnsupportedExtensionError: If extension is not an encrypted asset extension
        """
        normalized = _normalize(extension)
        if normalized not in ENCRYPTED_EXTENSION_MAP:
            raise UnsupportedExtensionError(f"Extension not supported: {extension}")

        return ENCRYPTED_EXTENSION_MAP[normalized]

    @classmethod
    def from_decrypted_extension(cls, extension: str) -> "FileType":
        """
        Resolve the media type of a decrypted asset extension.

        Raises:
            UnsupportedExtensionError: If extension is not png, ogg or m4a
        """
        normalized = _normalize(extension)
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedExtensionError(f"Extension not supported: {extension}")


# Maps encrypted extensions of both generations to media types
ENCRYPTED_EXTENSION_MAP: Dict[str, FileType] = {
    MV_PNG_EXT: FileType.PNG,
    MZ_PNG_EXT: FileType.PNG,
    MV_OGG_EXT: FileType.OGG,
    MZ_OGG_EXT: FileType.OGG,
    MV_M4A_EXT: FileType.M4A,
    MZ_M4A_EXT: FileType.M4A,
}

_ENCRYPTED_EXTS_BY_ENGINE: Dict[Engine, Dict[FileType, str]] = {
    Engine.MV: {
        FileType.PNG: MV_PNG_EXT,
        FileType.OGG: MV_OGG_EXT,
        FileType.M4A: MV_M4A_EXT,
    },
    Engine.MZ: {
        FileType.PNG: MZ_PNG_EXT,
        FileType.OGG: MZ_OGG_EXT,
        FileType.M4A: MZ_M4A_EXT,
    },
}


def _normalize(extension: str) -> str:
    return extension.lstrip(".").lower()


def is_encrypted_extension(extension: str) -> bool:
    """Check if an extension belongs to an encrypted RPG Maker asset."""
    return _normalize(extension) in ENCRYPTED_EXTENSION_MAP


def is_decrypted_extension(extension: str) -> bool:
    """Check if an extension belongs to a decrypted (plain) asset."""
    return _normalize(extension) in DECRYPTED_ASSET_EXTS


def engine_for_extension(extension: str) -> Engine:
    """
    Determine which RPG Maker generation produced an encrypted extension.

    Args:
        extension: Encrypted extension (e.g., 'rpgmvo', '.ogg_')

    Returns:
        Engine.MV or Engine.MZ

    Raises:
        UnsupportedExtensionError: If extension is not an encrypted asset extension
    """
    normalized = _normalize(extension)
    for engine, extensions in _ENCRYPTED_EXTS_BY_ENGINE.items():
        if normalized in extensions.values():
            return engine

    raise UnsupportedExtensionError(f"Extension not supported: {extension}")
