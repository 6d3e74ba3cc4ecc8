from .exceptions import (
    AgeWrapError,
    ConfigError,
    CryptoError,
    DecryptionError,
    InvalidLengthError,
    MalformedStanzaError,
)
from .secret import FILE_KEY_SIZE, FileKey, SecretBytes, wipe

__all__ = [
    "AgeWrapError",
    "ConfigError",
    "CryptoError",
    "DecryptionError",
    "InvalidLengthError",
    "MalformedStanzaError",
    "FILE_KEY_SIZE",
    "FileKey",
    "SecretBytes",
    "wipe",
]
