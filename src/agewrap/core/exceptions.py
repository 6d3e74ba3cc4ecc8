from __future__ import annotations

"""Central exception hierarchy"""
class AgeWrapError(Exception):
    """Base exception for all failures"""


class CryptoError(AgeWrapError):
    """Raised for cryptographic misuse or integrity failures"""


class DecryptionError(CryptoError):
    """Raised when a wrapped file key cannot be opened.

    The message is fixed: a stanza addressed to someone else and a tampered
    stanza are indistinguishable to the caller.
    """

    def __init__(self) -> None:
        super().__init__("Failed to unwrap file key")


class InvalidLengthError(AgeWrapError, ValueError):
    """Raised when a fixed-size value has the wrong number of bytes"""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        super().__init__(f"{name} must be {expected} bytes, got {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class MalformedStanzaError(AgeWrapError):
    """Raised in strict mode when an X25519 stanza is structurally invalid"""


class ConfigError(AgeWrapError, ValueError):
    """Raised when a configuration file cannot be loaded"""
