"""Settings for mdcards using pydantic-settings, with optional YAML file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .error_codes import ErrorCode
from .exceptions import ConfigurationError
from .utils.logging import get_logger

_settings: Settings | None = None


class Settings(BaseSettings):
    """Runtime configuration. Environment variables use the ``MDCARDS_`` prefix."""

    model_config = SettingsConfigDict(
        env_prefix="MDCARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional JSON log file")
    default_format: Literal["html", "anki"] = Field(
        default="html", description="Export format when none is given"
    )
    overwrite: bool = Field(
        default=False, description="Allow exports to replace existing files"
    )
    html_lang: str = Field(default="en", description="lang attribute of HTML exports")
    anki_notetype: str = Field(default="Basic", description="Anki notetype header")
    encoding: str = Field(default="utf-8", description="Document file encoding")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"}:
            msg = f"Invalid log level: {v}"
            raise ValueError(msg)
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def parse_log_file(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return Path(str(v)).expanduser()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from an optional YAML file, overridden by the environment.

    Raises:
        ConfigurationError: If the YAML file cannot be parsed or holds invalid values
    """
    logger = get_logger(__name__)
    yaml_data: dict[str, Any] = {}

    if config_path is not None:
        try:
            with open(config_path.expanduser(), encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse config file: {config_path}",
                suggestion=(
                    "Check YAML syntax (indentation, colons, quotes). "
                    f"Original error: {e}"
                ),
                error_code=ErrorCode.CFG_LOAD_FAILED.value,
                context={"config_path": str(config_path)},
            ) from e
        if not isinstance(yaml_data, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping: {config_path}",
                error_code=ErrorCode.CFG_LOAD_FAILED.value,
                context={"config_path": str(config_path)},
            )
        logger.debug("config_yaml_loaded", config_path=str(config_path), keys_count=len(yaml_data))

    try:
        # Environment wins over YAML values
        env_settings = Settings()
        overrides = env_settings.model_dump(exclude_unset=True)
        settings = Settings.model_validate({**yaml_data, **overrides})
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e}",
            error_code=ErrorCode.CFG_INVALID_VALUE.value,
            context={"config_path": str(config_path) if config_path else None},
        ) from e

    logger.debug("config_loaded", **settings.model_dump(mode="json"))
    return settings


def get_settings() -> Settings:
    """Get the cached settings instance, loading defaults on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the cached settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset the cached settings instance (for testing only)."""
    global _settings
    _settings = None


__all__ = ["Settings", "get_settings", "load_settings", "reset_settings", "set_settings"]
