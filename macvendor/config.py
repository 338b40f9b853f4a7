"""Pydantic settings for macvendor configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_yaml_config() -> dict[str, Any]:
    """Load config from ~/.macvendor/config.yaml, falling back to project config.yaml."""
    user_cfg = Path.home() / ".macvendor" / "config.yaml"
    if user_cfg.exists():
        with open(user_cfg) as f:
            return yaml.safe_load(f) or {}
    project_cfg = Path(__file__).parent.parent / "config.yaml"
    if project_cfg.exists():
        with open(project_cfg) as f:
            return yaml.safe_load(f) or {}
    return {}


class Settings(BaseSettings):
    """macvendor settings.

    Priority (highest → lowest): environment variables → config.yaml → defaults.
    """

    model_config = SettingsConfigDict(env_prefix="MACVENDOR_")

    # Reference table
    table_path: str | None = None

    # Formatting
    default_separator: str = ":"

    # Logging
    log_level: str = "WARNING"

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        yaml_values = _load_yaml_config()
        merged = {**yaml_values, **{k: v for k, v in values.items() if v is not None}}
        return merged

    @property
    def resolved_table_path(self) -> Path | None:
        if self.table_path:
            return Path(self.table_path).expanduser()
        return None


def get_settings(**overrides: Any) -> Settings:
    """Create a Settings instance, optionally with overrides."""
    return Settings(**overrides)
