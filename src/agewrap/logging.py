"""Structured logging setup for agewrap.

Applications call ``configure_from_config()`` once at startup; it loads the
configuration (including the ``AGEWRAP_LOG_LEVEL`` override) and applies its
``logging`` section. ``configure_logging`` takes an explicit level or section.
"""
from __future__ import annotations

import logging
import sys
from typing import Dict

import structlog

from .config import AppConfig, LoggingConfig, load_config
from .core.secret import SecretBytes

_DEFAULT_LEVEL = "info"
_REDACTED = "[REDACTED]"

SENSITIVE_KEYS = frozenset(
    {
        "file_key",
        "key",
        "enc_key",
        "secret",
        "static_secret",
        "shared_secret",
        "ephemeral_secret",
        "identity",
        "plaintext",
    }
)


def configure_logging(config: LoggingConfig | str | None = None) -> None:
    """Configure structlog for the application.

    The configuration emits lines with the keys ``level``, ``ts``, ``msg`` and
    ``component``. Values under sensitive keys, and any ``SecretBytes``
    wherever it appears, are replaced before rendering.
    """

    if isinstance(config, LoggingConfig):
        log_level, as_json = config.level.lower(), config.json_output
    else:
        log_level, as_json = (config or _DEFAULT_LEVEL).lower(), True
    numeric_level = _level_from_str(log_level)

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            redact_secrets,
            _rename_event_to_msg,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def configure_from_config(config: AppConfig | None = None) -> AppConfig:
    """Configure logging from ``config``, loading it with ``load_config`` if omitted."""

    if config is None:
        config = load_config()
    configure_logging(config.logging)
    return config


def redact_secrets(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Scrub key material from the event before it reaches a renderer."""

    for name, value in event_dict.items():
        if name in SENSITIVE_KEYS or isinstance(value, SecretBytes):
            event_dict[name] = _REDACTED
    return event_dict


def _component_processor(
    logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Ensure every log record carries a ``component`` field."""

    component = event_dict.get("component")
    if component is None:
        logger_name = getattr(logger, "name", None) or "agewrap"
        event_dict["component"] = logger_name
    return event_dict


def _rename_event_to_msg(
    _logger: structlog.BoundLoggerBase, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    """Normalize the event field to ``msg`` for downstream consumers."""

    if "msg" not in event_dict:
        event = event_dict.pop("event", "")
        event_dict["msg"] = event
    return event_dict


def _level_from_str(level: str) -> int:
    mapping: Dict[str, int] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
    }
    return mapping.get(level, logging.INFO)


__all__ = ["SENSITIVE_KEYS", "configure_from_config", "configure_logging", "redact_secrets"]
