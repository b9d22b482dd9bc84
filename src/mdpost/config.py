"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MDPOST_"


class Settings(BaseModel):
    app_name:       str = "mdpost"
    layouts:        list[str] = Field(default=["post", "page"], description="Allowed layout names")
    title_required: list[str] = Field(default=["post"],         description="Layouts that need a non-empty title")
    extensions:     list[str] = Field(default=[".md", ".markdown"], description="File suffixes to check")
    workers:        int = Field(default=4, ge=1, description="Threads used by batch checks")

    @field_validator("layouts", "title_required", "extensions", mode="before")
    @classmethod
    def _split_csv(cls, value: Any) -> Any:
        """Accept 'post,page' (env vars) as well as a YAML list."""
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPOST_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def default_config_text() -> str:
    """YAML text for a fresh config.yaml holding the default settings."""
    defaults = Settings().model_dump(exclude={"app_name"})
    return yaml.safe_dump(defaults, default_flow_style=False, sort_keys=False)
