"""Pydantic models for .pixweave.yaml configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_CONFIG_PATH = Path(".pixweave.yaml")


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING", description="Root log level")
    rich_tracebacks: bool = Field(
        default=False, description="Render tracebacks with rich"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


class ReportSettings(BaseModel):
    """Console reporting for the combine command."""

    show_dimensions: bool = Field(
        default=True, description="Print the reconciled output dimensions"
    )
    show_stages: bool = Field(
        default=False, description="Print each pipeline stage as it is reached"
    )


class PixweaveConfig(BaseModel):
    """Complete configuration for .pixweave.yaml."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    @classmethod
    def load(cls, path: str | Path) -> "PixweaveConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
