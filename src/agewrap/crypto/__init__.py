"""Primitive adapters: X25519 key agreement, HKDF and ChaCha20-Poly1305."""

from .aead import TAG_SIZE, aead_decrypt, aead_encrypt
from .ecc import X25519_KEY_SIZE, X25519KeyPair, diffie_hellman, load_private_key, load_public_key, public_bytes
from .kdf import hkdf

__all__ = [
    "TAG_SIZE",
    "X25519_KEY_SIZE",
    "X25519KeyPair",
    "aead_decrypt",
    "aead_encrypt",
    "diffie_hellman",
    "hkdf",
    "load_private_key",
    "load_public_key",
    "public_bytes",
]
