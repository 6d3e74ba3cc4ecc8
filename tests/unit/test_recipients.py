import pytest

from agewrap.config import AppConfig, StanzaConfig
from agewrap.core.exceptions import DecryptionError, MalformedStanzaError
from agewrap.core.secret import FileKey, SecretBytes
from agewrap.format.stanza import Stanza
from agewrap.recipients import X25519Identity, X25519Recipient


def test_identity_round_trip(identity: X25519Identity, file_key: FileKey) -> None:
    stanza = identity.to_public().wrap_file_key(file_key)
    assert stanza.tag == "X25519"
    assert identity.unwrap_stanza(stanza) == file_key


def test_identity_rejects_foreign_stanza(
    identity: X25519Identity, second_identity: X25519Identity, file_key: FileKey
) -> None:
    stanza = second_identity.to_public().wrap_file_key(file_key)
    with pytest.raises(DecryptionError):
        identity.unwrap_stanza(stanza)


def test_identity_skips_other_stanza_types(identity: X25519Identity) -> None:
    assert identity.unwrap_stanza(Stanza.create("scrypt", ["salt", "18"], bytes(32))) is None


def test_identity_lenient_skips_malformed(identity: X25519Identity) -> None:
    assert identity.unwrap_stanza(Stanza.create("X25519", [], bytes(32))) is None


def test_identity_strict_reports_malformed() -> None:
    strict = X25519Identity.generate(strict=True)
    with pytest.raises(MalformedStanzaError):
        strict.unwrap_stanza(Stanza.create("X25519", [], bytes(32)))


def test_identity_from_config_honours_strict() -> None:
    config = AppConfig(stanza=StanzaConfig(strict=True))
    identity = X25519Identity.from_config(bytes(range(32)), config)
    assert identity.strict is True


def test_identity_bytes_round_trip(identity: X25519Identity) -> None:
    with identity.to_bytes() as raw:
        assert isinstance(raw, SecretBytes)
        restored = X25519Identity.from_bytes(raw)
    assert restored.to_public() == identity.to_public()


def test_identity_from_plain_bytes() -> None:
    raw = bytearray(32)
    raw[0] = 1
    a = X25519Identity.from_bytes(bytes(raw))
    b = X25519Identity.from_bytes(SecretBytes(raw))
    assert a.to_public() == b.to_public()


def test_identity_generate_with_rng() -> None:
    rng = lambda size: b"\x33" * size
    assert X25519Identity.generate(rng=rng).to_public() == X25519Identity.generate(rng=rng).to_public()


def test_recipient_bytes_round_trip(identity: X25519Identity) -> None:
    recipient = identity.to_public()
    assert X25519Recipient.from_bytes(recipient.to_bytes()) == recipient
    assert len(recipient.to_bytes()) == 32
    assert hash(recipient) == hash(X25519Recipient.from_bytes(recipient.to_bytes()))


def test_repr_never_contains_secret(identity: X25519Identity) -> None:
    with identity.to_bytes() as raw:
        secret_hex = bytes(raw.expose_secret()).hex()
    assert secret_hex not in repr(identity)
    assert identity.to_public().to_bytes().hex() in repr(identity)


def test_recipient_wrap_with_injected_rng(identity: X25519Identity, file_key: FileKey) -> None:
    rng = lambda size: b"\x44" * size
    recipient = identity.to_public()
    assert recipient.wrap_file_key(file_key, rng=rng) == recipient.wrap_file_key(file_key, rng=rng)
