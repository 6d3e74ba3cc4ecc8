import json
import logging

import pytest
import structlog
from cryptography.hazmat.primitives.asymmetric import x25519
from structlog.testing import capture_logs

from agewrap.config import AppConfig, LoggingConfig
from agewrap.core.exceptions import DecryptionError
from agewrap.core.secret import FileKey, SecretBytes
from agewrap.format.stanza import Stanza
from agewrap.format.x25519 import RecipientLine
from agewrap.logging import configure_from_config, configure_logging, redact_secrets


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def test_redact_secrets_scrubs_sensitive_keys() -> None:
    event = {
        "event": "x",
        "file_key": "00ff",
        "shared_secret": b"abc",
        "blob": SecretBytes(b"abc"),
        "epk": "public",
    }
    redacted = redact_secrets(None, "debug", event)
    assert redacted["file_key"] == "[REDACTED]"
    assert redacted["shared_secret"] == "[REDACTED]"
    assert redacted["blob"] == "[REDACTED]"
    assert redacted["epk"] == "public"


def test_configure_logging_emits_json(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(LoggingConfig(level="DEBUG", json=True))
    structlog.get_logger("agewrap.test").info("hello", file_key="deadbeef", count=2)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["msg"] == "hello"
    assert payload["level"] == "info"
    assert payload["component"] == "agewrap.test"
    assert payload["file_key"] == "[REDACTED]"
    assert payload["count"] == 2
    assert "ts" in payload


def test_configure_logging_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning")
    structlog.get_logger("agewrap.test").info("quiet")
    assert "quiet" not in capsys.readouterr().out
    assert logging.getLogger().level == logging.WARNING


def test_wrap_and_unwrap_logs_carry_no_secrets() -> None:
    file_key = FileKey(b"\x5a" * 16)
    sk = x25519.X25519PrivateKey.generate()
    other = x25519.X25519PrivateKey.generate()
    with capture_logs() as logs:
        line = RecipientLine.wrap_file_key(file_key, sk.public_key())
        line.unwrap_file_key(sk)
        with pytest.raises(DecryptionError):
            line.unwrap_file_key(other)

    events = [entry["event"] for entry in logs]
    assert events == ["x25519.wrap", "x25519.unwrap", "x25519.unwrap.failed"]
    rendered = repr(logs)
    assert ("5a" * 16) not in rendered
    assert line.encrypted_file_key.hex() not in rendered


def test_rejected_stanza_is_logged_with_reason() -> None:
    with capture_logs() as logs:
        RecipientLine.from_stanza(Stanza.create("X25519", [], bytes(32)))
        RecipientLine.from_stanza(Stanza.create("scrypt", [], bytes(32)))
    assert len(logs) == 1
    assert logs[0]["event"] == "x25519.stanza.rejected"
    assert logs[0]["reason"] == "expected 1 argument, got 0"
    assert logs[0]["log_level"] == "debug"


def test_configure_from_config_applies_env_level(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("agewrap.config.runtime_config_dir", lambda: tmp_path / "user")
    monkeypatch.setenv("AGEWRAP_LOG_LEVEL", "error")
    config = configure_from_config()
    assert config.logging.level == "ERROR"
    assert logging.getLogger().level == logging.ERROR


def test_configure_from_config_uses_given_config() -> None:
    config = AppConfig(logging=LoggingConfig(level="DEBUG"))
    assert configure_from_config(config) is config
    assert logging.getLogger().level == logging.DEBUG
