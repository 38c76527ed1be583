"""Validation schema for Klondike engine configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from .history import DEFAULT_HISTORY_LIMIT

HISTORY_LIMIT_ENV = "KLONDIKE_HISTORY_LIMIT"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class GameConfig(BaseModel):
    history_limit: int = Field(
        DEFAULT_HISTORY_LIMIT,
        ge=1,
        description="Number of prior states kept for undo.",
    )
    seed: Optional[int] = Field(None, description="Seed for the shuffle; None draws from the OS.")
    log_level: str = Field("WARNING", description="Level passed to logging.basicConfig by the CLI.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


def load_config(path: Union[str, Path, None] = None) -> GameConfig:
    """Read configuration from a JSON file (if given) and apply environment overrides."""
    data: dict = {}
    if path is not None:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    override = os.environ.get(HISTORY_LIMIT_ENV)
    if override:
        data["history_limit"] = override
    return GameConfig.model_validate(data)
