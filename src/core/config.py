"""Runtime settings for the terminal game (colors, logging)."""

import logging
import os
from typing import Optional, Self

from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "CHECKERS_LOG_LEVEL"
NO_COLOR_ENV = "NO_COLOR"


class Settings(BaseModel):
    use_color: bool = True
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Defaults, overridden by the environment. (`NO_COLOR` follows the no-color.org convention: any value disables colors)"""
        values: dict[str, object] = {}
        if os.environ.get(NO_COLOR_ENV):
            values["use_color"] = False
        if LOG_LEVEL_ENV in os.environ:
            values["log_level"] = os.environ[LOG_LEVEL_ENV]
        return cls.model_validate(values)
