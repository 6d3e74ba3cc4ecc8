# HKDF-SHA256 key derivation with a per-recipient-type label.
from __future__ import annotations

from typing import Final

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

DERIVED_KEY_SIZE: Final[int] = 32


def hkdf(salt: bytes, label: bytes, ikm: bytes | bytearray, length: int = DERIVED_KEY_SIZE) -> bytearray:
    """Derive ``length`` bytes from ``ikm``; ``label`` is the HKDF info string.

    The result is returned as a mutable buffer so callers can wipe it.
    """
    kdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=salt, info=label)
    return bytearray(kdf.derive(bytes(ikm)))


__all__ = ["DERIVED_KEY_SIZE", "hkdf"]
