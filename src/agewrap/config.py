"""Configuration loading utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.exceptions import ConfigError
from .paths import runtime_config_dir

LOG_LEVEL_ENV = "AGEWRAP_LOG_LEVEL"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")
    json_output: bool = Field(default=True, alias="json", description="Render log lines as JSON")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class StanzaConfig(BaseModel):
    strict: bool = Field(
        default=False,
        description="Raise on malformed X25519 stanzas instead of skipping them",
    )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    stanza: StanzaConfig = Field(default_factory=StanzaConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".agewrap" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    config = _load_file(path)
    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        try:
            config.logging = LoggingConfig(level=level, json=config.logging.json_output)
        except ValidationError as exc:
            raise ConfigError(f"Invalid {LOG_LEVEL_ENV}: {level}") from exc
    return config


def _load_file(path: Optional[Path]) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json", by_alias=True), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "LOG_LEVEL_ENV",
    "LoggingConfig",
    "StanzaConfig",
    "config_search_paths",
    "dump_default_config",
    "load_config",
]
