"""Configuration for anki-splitter (pydantic-settings with optional YAML file)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import DifficultyThresholds
from .utils.logging import get_logger


class Config(BaseSettings):
    """Settings loaded from ``ANKI_SPLITTER_*`` environment variables, ``.env`` and YAML."""

    model_config = SettingsConfigDict(
        env_prefix="ANKI_SPLITTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    # Difficulty thresholds
    min_lapses: int = Field(default=3, ge=0, description="Minimum lapses to flag a card")
    max_ease_factor: int = Field(
        default=2100, ge=0, description="Maximum ease (per-mille) to flag a card"
    )
    min_reps: int = Field(
        default=5, ge=0, description="Minimum reviews before failure rate is reported"
    )

    # Splitting
    source_title: str = Field(
        default="Original card",
        min_length=1,
        description="Label used in back-links from split cards to their source card",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case and validate the log level name."""
        level = str(v or "WARNING").upper()
        if level not in {"TRACE", "DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def parse_log_file(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return Path(str(v)).expanduser()

    def difficulty_thresholds(self) -> DifficultyThresholds:
        return DifficultyThresholds(
            min_lapses=self.min_lapses,
            max_ease_factor=self.max_ease_factor,
            min_reps=self.min_reps,
        )


_config: Config | None = None


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from an optional YAML file plus the environment.

    The file is taken from ``config_path``, then ``ANKI_SPLITTER_CONFIG``.
    Values from the file take precedence over environment variables.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or a value
            fails validation
    """
    logger = get_logger(__name__)

    if config_path is None:
        env_path = os.getenv("ANKI_SPLITTER_CONFIG")
        config_path = Path(env_path).expanduser() if env_path else None

    yaml_data: dict[str, Any] = {}
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(
                "config_yaml_load_error",
                config_path=str(config_path),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise ConfigurationError(
                f"Failed to read config file: {config_path}",
                suggestion="Check that the file exists and is valid UTF-8 YAML.",
                context={"config_path": str(config_path)},
            ) from e

        if not isinstance(yaml_data, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {config_path}",
                context={"config_path": str(config_path)},
            )
        logger.debug("config_yaml_loaded", config_path=str(config_path), keys=len(yaml_data))

    try:
        return Config(**yaml_data)
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            context={"config_path": str(config_path) if config_path else None},
        ) from e


def get_config() -> Config:
    """Return the active configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Config) -> None:
    global _config
    _config = config


def reset_config() -> None:
    global _config
    _config = None
