"""X25519 recipient and identity objects built on ``RecipientLine``."""
from __future__ import annotations

from typing import Optional

from cryptography.hazmat.primitives.asymmetric import x25519

from .config import AppConfig
from .core.secret import FileKey, RandomSource, SecretBytes
from .crypto.ecc import X25519KeyPair, load_private_key, load_public_key, public_bytes
from .format.stanza import Stanza
from .format.x25519 import RecipientLine


class X25519Recipient:
    """Public half: anyone holding it can wrap file keys to the identity."""

    def __init__(self, public_key: x25519.X25519PublicKey) -> None:
        self._public_key = public_key

    @classmethod
    def from_bytes(cls, data: bytes) -> "X25519Recipient":
        return cls(load_public_key(data))

    @property
    def public_key(self) -> x25519.X25519PublicKey:
        return self._public_key

    def to_bytes(self) -> bytes:
        return public_bytes(self._public_key)

    def wrap_file_key(self, file_key: FileKey, *, rng: RandomSource | None = None) -> Stanza:
        return RecipientLine.wrap_file_key(file_key, self._public_key, rng=rng).to_stanza()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, X25519Recipient):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"X25519Recipient({self.to_bytes().hex()})"


class X25519Identity:
    """Secret half: opens X25519 stanzas addressed to its public key."""

    def __init__(self, secret: x25519.X25519PrivateKey, *, strict: bool = False) -> None:
        self._keypair = X25519KeyPair(private=secret)
        self.strict = strict

    @classmethod
    def generate(cls, *, rng: RandomSource | None = None, strict: bool = False) -> "X25519Identity":
        return cls(X25519KeyPair.generate(rng).private_key, strict=strict)

    @classmethod
    def from_bytes(cls, data: bytes | SecretBytes, *, strict: bool = False) -> "X25519Identity":
        if isinstance(data, SecretBytes):
            return cls(load_private_key(data.expose_secret()), strict=strict)
        return cls(load_private_key(data), strict=strict)

    @classmethod
    def from_config(cls, data: bytes | SecretBytes, config: AppConfig) -> "X25519Identity":
        return cls.from_bytes(data, strict=config.stanza.strict)

    @property
    def secret_key(self) -> x25519.X25519PrivateKey:
        return self._keypair.private_key

    def to_bytes(self) -> SecretBytes:
        return self._keypair.private_bytes()

    def to_public(self) -> X25519Recipient:
        return X25519Recipient(self._keypair.public_key)

    def unwrap_stanza(self, stanza: Stanza) -> Optional[FileKey]:
        """``None`` if ``stanza`` is not an X25519 stanza; ``DecryptionError`` if it will not open."""
        line = RecipientLine.from_stanza(stanza, strict=self.strict)
        if line is None:
            return None
        return line.unwrap_file_key(self._keypair.private_key)

    def __repr__(self) -> str:
        return f"X25519Identity(public={self._keypair.public_bytes().hex()})"


__all__ = ["X25519Identity", "X25519Recipient"]
