"""Configuration models for tasktrack."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    """Configuration for how tasks are shown."""

    style: Literal["table", "plain"] = "table"
    id_length: int = Field(default=6, ge=1, le=36)
    verbose_errors: bool = False


class LookupConfig(BaseModel):
    """Configuration for resolving id prefixes."""

    require_unique_prefix: bool = False


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TrackerConfig(BaseModel):
    """Main configuration for tasktrack."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TrackerConfig:
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
TRACKER_DIR = Path(".tasktrack")
CONFIG_FILE = TRACKER_DIR / "config.json"
