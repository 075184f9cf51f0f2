"""Application configuration: settings schema and ddiff.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "ddiff.yaml"


class Settings(BaseModel):
    context:      int  = Field(default=3, ge=0, description="Unchanged lines shown around each change")
    color:        bool = Field(default=True,  description="Colorize diff output")
    recursive:    bool = Field(default=False, description="Descend into subdirectories")
    binary:       bool = Field(default=False, description="Report differing binary files")
    ignore_space: bool = Field(default=False, description="Ignore whitespace changes")
    stats:        bool = Field(default=False, description="Print insertion/deletion counts")
    log_level:    str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from ddiff.yaml, then DDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
