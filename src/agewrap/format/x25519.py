"""The ``X25519`` recipient stanza: wrapping a file key to an X25519 public key.

Wrapping performs an ephemeral-static X25519 exchange, derives a
ChaCha20-Poly1305 key with HKDF-SHA256 over ``salt = epk || recipient_pk`` and
the label ``age-encryption.org/v1/X25519``, and seals the 16-byte file key
under the zero nonce. The zero nonce is sound only because every wrap draws a
fresh ephemeral key, so each derived key encrypts exactly one message.

On the wire the result is a single stanza::

    X25519 <base64(epk)>
    <base64(encrypted_file_key)>
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Final, Optional

import structlog
from cryptography.hazmat.primitives.asymmetric import x25519

from ..core.exceptions import CryptoError, DecryptionError, InvalidLengthError, MalformedStanzaError
from ..core.secret import FILE_KEY_SIZE, FileKey, RandomSource, wipe
from ..crypto.aead import TAG_SIZE, aead_decrypt, aead_encrypt
from ..crypto.ecc import X25519_KEY_SIZE, diffie_hellman, generate_private_key, load_public_key, public_bytes
from ..crypto.kdf import hkdf
from ..utils import b64d, b64e
from .stanza import ParseOutcome, ParseStatus, Stanza

logger = structlog.get_logger(__name__)

X25519_RECIPIENT_TAG: Final[str] = "X25519"
X25519_KEY_LABEL: Final[bytes] = b"age-encryption.org/v1/X25519"

EPK_SIZE: Final[int] = X25519_KEY_SIZE
WRAPPED_KEY_SIZE: Final[int] = FILE_KEY_SIZE + TAG_SIZE


def _fingerprint(epk: bytes) -> str:
    return hashlib.sha256(epk).hexdigest()[:16]


def _wrapping_key(shared_secret: bytearray, epk: bytes, recipient_pk: bytes) -> bytearray:
    salt = epk + recipient_pk
    return hkdf(salt, X25519_KEY_LABEL, shared_secret)


@dataclass(frozen=True, slots=True)
class RecipientLine:
    epk: bytes
    encrypted_file_key: bytes

    def __post_init__(self) -> None:
        if len(self.epk) != EPK_SIZE:
            raise InvalidLengthError("ephemeral public key", EPK_SIZE, len(self.epk))
        if len(self.encrypted_file_key) != WRAPPED_KEY_SIZE:
            raise InvalidLengthError(
                "encrypted file key", WRAPPED_KEY_SIZE, len(self.encrypted_file_key)
            )
        object.__setattr__(self, "epk", bytes(self.epk))
        object.__setattr__(self, "encrypted_file_key", bytes(self.encrypted_file_key))

    @property
    def ephemeral_public_key(self) -> x25519.X25519PublicKey:
        return load_public_key(self.epk)

    # ------------------------------------------------------------------
    # Key wrapping
    # ------------------------------------------------------------------

    @classmethod
    def wrap_file_key(
        cls,
        file_key: FileKey,
        recipient: x25519.X25519PublicKey,
        *,
        rng: RandomSource | None = None,
    ) -> "RecipientLine":
        """Wrap ``file_key`` to ``recipient`` under a fresh ephemeral key.

        ``rng`` supplies the ephemeral scalar and defaults to ``os.urandom``.
        Raises ``CryptoError`` if ``recipient`` is a low-order point.
        """
        if len(file_key) != FILE_KEY_SIZE:
            raise InvalidLengthError("file key", FILE_KEY_SIZE, len(file_key))

        esk = generate_private_key(rng)
        epk = public_bytes(esk.public_key())
        recipient_pk = public_bytes(recipient)
        try:
            shared_secret = diffie_hellman(esk, recipient)
        except CryptoError:
            logger.debug("x25519.wrap.rejected", reason="low_order_recipient")
            raise
        finally:
            del esk

        enc_key = _wrapping_key(shared_secret, epk, recipient_pk)
        wipe(shared_secret)
        try:
            encrypted_file_key = aead_encrypt(enc_key, file_key.expose_secret())
        finally:
            wipe(enc_key)

        logger.debug("x25519.wrap", epk=_fingerprint(epk))
        return cls(epk=epk, encrypted_file_key=encrypted_file_key)

    def unwrap_file_key(self, identity: x25519.X25519PrivateKey) -> FileKey:
        """Recover the file key with the recipient's static secret.

        Raises the opaque ``DecryptionError`` whether the stanza was addressed
        to another key or was corrupted in transit.
        """
        own_pk = public_bytes(identity.public_key())
        try:
            shared_secret = diffie_hellman(identity, self.ephemeral_public_key)
        except CryptoError:
            logger.debug("x25519.unwrap.failed", epk=_fingerprint(self.epk))
            raise DecryptionError() from None

        enc_key = _wrapping_key(shared_secret, self.epk, own_pk)
        wipe(shared_secret)
        try:
            plaintext = aead_decrypt(enc_key, self.encrypted_file_key)
        except DecryptionError:
            logger.debug("x25519.unwrap.failed", epk=_fingerprint(self.epk))
            raise
        finally:
            wipe(enc_key)

        logger.debug("x25519.unwrap", epk=_fingerprint(self.epk))
        return FileKey(plaintext)

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------

    @classmethod
    def from_stanza(cls, stanza: Stanza, *, strict: bool = False) -> Optional["RecipientLine"]:
        """Try ``stanza``; ``None`` means "not an X25519 stanza, try the next parser".

        By default a stanza tagged ``X25519`` with bad arguments or body is
        also reported as ``None``. With ``strict=True`` it raises
        ``MalformedStanzaError`` instead.
        """
        outcome = parse_stanza(stanza)
        if outcome.ok:
            return outcome.value
        if strict and outcome.status is ParseStatus.MALFORMED:
            raise MalformedStanzaError(outcome.reason or "malformed X25519 stanza")
        return None

    def to_stanza(self) -> Stanza:
        return Stanza(
            tag=X25519_RECIPIENT_TAG,
            args=(b64e(self.epk),),
            body=self.encrypted_file_key,
        )

    def serialize(self) -> str:
        return f"{X25519_RECIPIENT_TAG} {b64e(self.epk)}\n{b64e(self.encrypted_file_key)}"

    def __str__(self) -> str:
        return self.serialize()


def parse_stanza(stanza: Stanza) -> ParseOutcome[RecipientLine]:
    """Three-way parse of a tokenized stanza into a ``RecipientLine``."""
    if stanza.tag != X25519_RECIPIENT_TAG:
        return ParseOutcome.not_this_type()

    outcome = _parse_matching(stanza)
    if not outcome.ok:
        logger.debug("x25519.stanza.rejected", reason=outcome.reason)
    return outcome


def _parse_matching(stanza: Stanza) -> ParseOutcome[RecipientLine]:
    if len(stanza.args) != 1:
        return ParseOutcome.malformed(f"expected 1 argument, got {len(stanza.args)}")
    try:
        epk = b64d(stanza.args[0])
    except ValueError:
        return ParseOutcome.malformed("ephemeral share is not canonical base64")
    if len(epk) != EPK_SIZE:
        return ParseOutcome.malformed(f"ephemeral share must be {EPK_SIZE} bytes, got {len(epk)}")
    if len(stanza.body) != WRAPPED_KEY_SIZE:
        return ParseOutcome.malformed(
            f"body must be {WRAPPED_KEY_SIZE} bytes, got {len(stanza.body)}"
        )
    return ParseOutcome.success(RecipientLine(epk=epk, encrypted_file_key=stanza.body))


__all__ = [
    "WRAPPED_KEY_SIZE",
    "EPK_SIZE",
    "RecipientLine",
    "X25519_KEY_LABEL",
    "X25519_RECIPIENT_TAG",
    "parse_stanza",
]
