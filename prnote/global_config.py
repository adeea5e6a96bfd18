"""Global configuration management for prnote.

Handles user-level configuration stored in ~/.prnote/config.yaml:

    editor: "code --wait"     # editor used instead of git's
    push: false               # behave as if --push was given
    open: false               # behave as if --open was given
    copy: false               # behave as if --copy was given
    protected_branches:       # refused in addition to master and main
      - develop
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from prnote.exceptions import ConfigError


class GlobalConfigError(ConfigError):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".prnote"


class GlobalConfig(BaseModel):
    """Validated contents of ~/.prnote/config.yaml."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    editor: Optional[str] = None
    push: bool = False
    open_browser: bool = Field(False, alias="open")
    copy_url: bool = Field(False, alias="copy")
    protected_branches: list[str] = []

    @field_validator("editor")
    @classmethod
    def blank_editor_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty editor string as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("protected_branches", mode="before")
    @classmethod
    def ensure_branch_list(cls, v):
        """Accept a single branch name or null."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v


def get_global_config_dir() -> Path:
    """Get the global prnote configuration directory.

    Returns:
        Path to ~/.prnote/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.prnote/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.prnote/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def get_global_settings() -> GlobalConfig:
    """Load and validate the global configuration.

    Raises:
        GlobalConfigError: If the file is unreadable or has invalid values.
    """
    try:
        return GlobalConfig.model_validate(load_global_config())
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid config in {get_config_file_path()}: {e}")

