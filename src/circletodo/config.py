"""Configuration models for circletodo."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Configuration for how the screen is drawn."""

    circle_rows: int = Field(default=7, ge=3, le=31)
    label_style: str = "bold white"
    delete_style: str = "bold white on red"
    placeholder: str = "Enter a task"
    clear_screen: bool = True


class ColorsConfig(BaseModel):
    """Configuration for task color selection."""

    seed: int | None = None


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class AppConfig(BaseModel):
    """Main configuration for circletodo."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> AppConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
APP_DIR = Path(".circletodo")
CONFIG_FILE = APP_DIR / "config.json"
