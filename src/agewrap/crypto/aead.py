from __future__ import annotations

from typing import Final

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from ..core.exceptions import DecryptionError, InvalidLengthError

CHACHA20_KEY_SIZE: Final[int] = 32
NONCE_SIZE: Final[int] = 12
TAG_SIZE: Final[int] = 16
# Only valid for keys that encrypt exactly one message.
ZERO_NONCE: Final[bytes] = bytes(NONCE_SIZE)


def _cipher(key: bytes | bytearray) -> ChaCha20Poly1305:
    if len(key) != CHACHA20_KEY_SIZE:
        raise InvalidLengthError("ChaCha20-Poly1305 key", CHACHA20_KEY_SIZE, len(key))
    return ChaCha20Poly1305(key)


def aead_encrypt(key: bytes | bytearray, plaintext: bytes | memoryview) -> bytes:
    """ChaCha20-Poly1305 with the zero nonce; returns ``ciphertext || tag``."""
    return _cipher(key).encrypt(ZERO_NONCE, plaintext, None)


def aead_decrypt(key: bytes | bytearray, ciphertext: bytes) -> bytes:
    try:
        return _cipher(key).decrypt(ZERO_NONCE, bytes(ciphertext), None)
    except InvalidTag as exc:
        raise DecryptionError() from exc


__all__ = [
    "CHACHA20_KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "ZERO_NONCE",
    "aead_decrypt",
    "aead_encrypt",
]
