from __future__ import annotations

"""ECC helpers: X25519 key handling and ECDH.

Keys travel as raw 32-byte strings on the wire; inside the process they are
held as ``cryptography`` key objects. Every conversion from raw bytes is
length-checked and fails with ``InvalidLengthError``.
"""

import os
from typing import Final

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import x25519

from ..core.exceptions import CryptoError, InvalidLengthError
from ..core.secret import RandomSource, SecretBytes, wipe

X25519_KEY_SIZE: Final[int] = 32


def load_public_key(data: bytes) -> x25519.X25519PublicKey:
    if len(data) != X25519_KEY_SIZE:
        raise InvalidLengthError("X25519 public key", X25519_KEY_SIZE, len(data))
    return x25519.X25519PublicKey.from_public_bytes(bytes(data))


def load_private_key(data: bytes | bytearray | memoryview) -> x25519.X25519PrivateKey:
    if len(data) != X25519_KEY_SIZE:
        raise InvalidLengthError("X25519 secret key", X25519_KEY_SIZE, len(data))
    return x25519.X25519PrivateKey.from_private_bytes(bytes(data))


def public_bytes(pub: x25519.X25519PublicKey) -> bytes:
    return pub.public_bytes(serialization.Encoding.Raw, serialization.PublicFormat.Raw)


def generate_private_key(rng: RandomSource | None = None) -> x25519.X25519PrivateKey:
    """Draw a fresh scalar from ``rng`` (``os.urandom`` by default)."""
    raw = bytearray((rng or os.urandom)(X25519_KEY_SIZE))
    try:
        return load_private_key(raw)
    finally:
        wipe(raw)


def diffie_hellman(
    private: x25519.X25519PrivateKey, peer: x25519.X25519PublicKey
) -> bytearray:
    """X25519 shared secret; the caller wipes the returned buffer."""
    try:
        shared = private.exchange(peer)
    except ValueError as exc:
        # all-zero output: the peer key is a low-order point
        raise CryptoError("X25519 exchange produced a low-order shared secret") from exc
    return bytearray(shared)


class X25519KeyPair:
    def __init__(self, private: x25519.X25519PrivateKey | None = None, public=None):
        self._priv = private
        self._pub = public or (private.public_key() if private else None)

    @staticmethod
    def generate(rng: RandomSource | None = None) -> "X25519KeyPair":
        return X25519KeyPair(private=generate_private_key(rng))

    @property
    def private_key(self) -> x25519.X25519PrivateKey:
        if self._priv is None:
            raise CryptoError("Key pair has no private half")
        return self._priv

    @property
    def public_key(self) -> x25519.X25519PublicKey:
        return self._pub

    # Serialization
    def public_bytes(self) -> bytes:
        return public_bytes(self._pub)

    def private_bytes(self) -> SecretBytes:
        raw = self.private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
        return SecretBytes(raw)

    def __repr__(self) -> str:
        return f"X25519KeyPair(public={self.public_bytes().hex()})"


__all__ = [
    "X25519_KEY_SIZE",
    "X25519KeyPair",
    "diffie_hellman",
    "generate_private_key",
    "load_private_key",
    "load_public_key",
    "public_bytes",
]
