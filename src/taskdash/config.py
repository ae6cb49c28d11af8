"""Configuration models for taskdash."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Configuration for console output."""

    show_banner: bool = True
    title: str = "Task Dashboard"
    author: str | None = None
    style: Literal["table", "plain"] = "table"


class MenuConfig(BaseModel):
    """Configuration for the main menu."""

    template: Literal["default", "compact"] = "default"
    custom_path: str | None = None


class TaskdashConfig(BaseModel):
    """Main configuration for taskdash."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    menu: MenuConfig = Field(default_factory=MenuConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskdashConfig:
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
TASKDASH_DIR = Path(".taskdash")
CONFIG_FILE = TASKDASH_DIR / "config.json"
