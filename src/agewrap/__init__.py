"""X25519 file-key wrapping for the age v1 header format."""

from .core.exceptions import (
    AgeWrapError,
    ConfigError,
    CryptoError,
    DecryptionError,
    InvalidLengthError,
    MalformedStanzaError,
)
from .core.secret import FileKey, SecretBytes
from .format.stanza import ParseOutcome, ParseStatus, Stanza
from .format.x25519 import X25519_RECIPIENT_TAG, RecipientLine, parse_stanza
from .recipients import X25519Identity, X25519Recipient

__version__ = "0.1.0"

__all__ = [
    "AgeWrapError",
    "ConfigError",
    "CryptoError",
    "DecryptionError",
    "FileKey",
    "InvalidLengthError",
    "MalformedStanzaError",
    "ParseOutcome",
    "ParseStatus",
    "RecipientLine",
    "SecretBytes",
    "Stanza",
    "X25519Identity",
    "X25519Recipient",
    "X25519_RECIPIENT_TAG",
    "parse_stanza",
    "__version__",
]
