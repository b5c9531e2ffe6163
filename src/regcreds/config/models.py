"""Pydantic models describing regcreds configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class OutputConfig(BaseModel):
    """Where output files are written and looked up."""

    model_config = ConfigDict(extra="allow")

    directory: str = ""


class LoggingConfig(BaseModel):
    """Handlers attached to the ``regcreds`` logger."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_path: Optional[Path] = None


class RegcredsConfig(BaseModel):
    """Root configuration object for the regcreds CLI."""

    model_config = ConfigDict(extra="allow")

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["LoggingConfig", "OutputConfig", "RegcredsConfig"]
