"""Configuration loading and validation."""

import logging
import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_SIGNAL = "SIGTERM"


class Config(BaseModel):
    """Per-call kill configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Ignored on Windows, which terminates through a handle instead
    signal: str = DEFAULT_SIGNAL
    include_target: bool = True

    @field_validator("signal")
    @classmethod
    def normalize_signal(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("signal must not be empty")
        return v


class KillTreeSettings(BaseSettings):
    """Environment-level defaults (KILL_TREE_SIGNAL, KILL_TREE_INCLUDE_TARGET, ...)."""

    model_config = SettingsConfigDict(env_prefix="KILL_TREE_", extra="ignore")

    signal: str = DEFAULT_SIGNAL
    include_target: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_config(self) -> Config:
        return Config(signal=self.signal, include_target=self.include_target)


def load_config(
    config_path: Optional[Path] = None,
    settings: Optional[KillTreeSettings] = None,
) -> Config:
    """Load a kill Config from YAML, falling back to environment defaults.

    Keys missing from the file keep their environment (or built-in) value.
    String values of the form ``${VAR}`` are expanded from the environment.
    """
    settings = settings or KillTreeSettings()
    defaults = settings.to_config()

    if config_path is None:
        return defaults

    if not config_path.exists():
        logger.warning(
            f"Config file not found: {config_path}. Using default configuration."
        )
        return defaults

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    data = _expand_env_vars(data)
    return Config(**{**defaults.model_dump(), **data})


def _expand_env_vars(data: Any, _path: str = "") -> Any:
    """Recursively expand ``${VAR}`` strings in config data.

    Args:
        data: Config data to process
        _path: Internal tracking for error messages (e.g., "signal")
    """
    if isinstance(data, dict):
        return {k: _expand_env_vars(v, f"{_path}.{k}" if _path else k) for k, v in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item, f"{_path}[{i}]") for i, item in enumerate(data)]
    elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
        env_var = data[2:-1]
        value = os.environ.get(env_var)
        if value is None:
            logger.warning(
                f"Environment variable '{env_var}' not set (referenced at config path: {_path or 'root'}). "
                f"The literal string '{data}' will be used, which may cause errors."
            )
            return data
        return value
    return data
