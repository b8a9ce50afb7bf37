"""User preferences configuration loading.

Loads optional user preferences from ~/.config/benchreport/config.yaml
(XDG-compliant path via platformdirs). Missing file silently applies all
defaults. Invalid YAML or schema raises ConfigError.

Precedence (low → high):
  built-in defaults < config file < env vars < explicit function arguments
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from benchreport.constants import CONFIG_APP_NAME, CONFIG_FILENAME
from benchreport.exceptions import ConfigError

_TRUTHY = ("1", "true", "yes", "on")


class UserParsingConfig(BaseModel):
    """Parsing preferences."""

    model_config = {"extra": "forbid"}

    format: Literal["wrk", "hey"] = Field(
        default="wrk", description="Load-testing tool whose output is parsed"
    )
    strict: bool = Field(
        default=False, description="Reject output in which no metric could be located"
    )


class UserUIConfig(BaseModel):
    """User interface preferences."""

    model_config = {"extra": "forbid"}

    verbosity: Literal["quiet", "normal", "verbose"] = Field(default="normal")


class UserConfig(BaseModel):
    """User preferences loaded from ~/.config/benchreport/config.yaml.

    All fields are optional. A missing file or missing fields fall back to
    built-in defaults. Invalid values raise ConfigError via load_user_config().
    """

    model_config = {"extra": "forbid"}

    parsing: UserParsingConfig = Field(default_factory=UserParsingConfig)
    ui: UserUIConfig = Field(default_factory=UserUIConfig)


def get_user_config_path() -> Path:
    """Return the XDG-compliant user config path.

    Linux:   ~/.config/benchreport/config.yaml
    macOS:   ~/Library/Application Support/benchreport/config.yaml
    Windows: %APPDATA%\\benchreport\\config.yaml
    """
    from platformdirs import user_config_dir

    return Path(user_config_dir(CONFIG_APP_NAME)) / CONFIG_FILENAME


def _apply_env_overrides(config: UserConfig) -> UserConfig:
    """Apply BENCHREPORT_* environment variable overrides to user config.

    Raises:
        ConfigError: If an env var holds a value the schema rejects.
    """
    parsing_updates: dict[str, Any] = {}
    if val := os.environ.get("BENCHREPORT_FORMAT"):
        parsing_updates["format"] = val.lower()
    if val := os.environ.get("BENCHREPORT_STRICT"):
        parsing_updates["strict"] = val.lower() in _TRUTHY

    ui_updates: dict[str, Any] = {}
    if val := os.environ.get("BENCHREPORT_VERBOSITY"):
        ui_updates["verbosity"] = val.lower()

    if not parsing_updates and not ui_updates:
        return config

    # model_copy skips validation, so re-validate the merged data
    data = config.model_dump()
    data["parsing"].update(parsing_updates)
    data["ui"].update(ui_updates)
    try:
        return UserConfig.model_validate(data)
    except ValidationError as e:
        errors = [f"  {err['loc']}: {err['msg']}" for err in e.errors()]
        raise ConfigError("Invalid BENCHREPORT_* environment override:\n" + "\n".join(errors)) from e


def load_user_config(config_path: Path | None = None) -> UserConfig:
    """Load user configuration from ~/.config/benchreport/config.yaml.

    Missing file: silently applies all defaults, no error.
    Invalid YAML: raises ConfigError with parse error detail.
    Invalid schema: raises ConfigError with field path context.

    Args:
        config_path: Explicit path override (for testing). None = XDG default.

    Returns:
        UserConfig with file values merged over defaults, env vars applied on top.
    """
    path = config_path or get_user_config_path()

    if not path.exists():
        return _apply_env_overrides(UserConfig())

    try:
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"User config must be a YAML mapping: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in user config {path}: {e}") from e

    try:
        config = UserConfig.model_validate(data)
    except ValidationError as e:
        errors = [f"  {err['loc']}: {err['msg']}" for err in e.errors()]
        raise ConfigError(f"Invalid user config {path}:\n" + "\n".join(errors)) from e

    return _apply_env_overrides(config)


__all__ = ["UserConfig", "get_user_config_path", "load_user_config"]
