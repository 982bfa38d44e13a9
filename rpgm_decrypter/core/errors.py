"""Errors raised while handling RPG Maker encrypted assets."""


class DecrypterError(Exception):
    """Base class for all decrypter errors."""
    pass


class KeyNotSetError(DecrypterError):
    """Encryption was requested before a key was set."""

    def __init__(self, message: str = (
        "Key must be set using any of `set_key` methods before calling `encrypt` function."
    )):
        super().__init__(message)


class InvalidKeyLengthError(DecrypterError):
    """Hex key string does not have exactly 32 characters."""

    def __init__(self, message: str = "Key must have a fixed length of 32 characters."):
        super().__init__(message)


class InvalidKeyError(DecrypterError):
    """Hex key string contains non-hexadecimal characters."""

    def __init__(self, message: str = "Key must consist of hexadecimal characters only."):
        super().__init__(message)


class InvalidHeaderError(DecrypterError):
    """Data does not start with the RPG Maker header."""

    def __init__(self, message: str = (
        "Passed data has invalid header. RPG Maker encrypted files should always "
        "start with RPGMV header. Either passed data is not RPG Maker data or it's corrupted."
    )):
        super().__init__(message)


class UnexpectedEOFError(DecrypterError):
    """Data ended before the structure being read was complete."""

    def __init__(self, message: str = (
        "Unexpected end of file encountered. Either passed data is not RPG Maker "
        "data or it's corrupted."
    )):
        super().__init__(message)


class UnsupportedExtensionError(DecrypterError, ValueError):
    """File extension is not an RPG Maker asset extension."""
    pass


class SystemJsonError(DecrypterError):
    """System.json content could not be parsed."""
    pass
