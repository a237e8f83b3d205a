"""Module with settings.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from typing import ClassVar, Literal

from pydantic import BaseModel, Field, model_validator


class Settings(BaseModel):
    """Settings of the configuration validation core."""

    DEBUG: bool = False

    LOG_LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_DIR: str = "logs"
    LOG_RETENTION: str = "10 days"
    LOG_ROTATION: str = "1d"
    LOG_NAME: ClassVar[str] = "KeaValidator"

    DEFAULT_SERVICE: Literal["dhcp4", "dhcp6"] = "dhcp4"

    TR069_MIN_INFORM_INTERVAL: int = Field(60, ge=0)
    TR069_MAX_INFORM_INTERVAL: int = Field(86400, ge=0)

    # Warnings block submission as well
    WARNINGS_AS_ERRORS: bool = False

    @model_validator(mode="after")
    def check_inform_bounds(self) -> "Settings":
        """Validate TR-069 inform interval bounds."""
        if self.TR069_MIN_INFORM_INTERVAL > self.TR069_MAX_INFORM_INTERVAL:
            raise ValueError(
                "TR069_MIN_INFORM_INTERVAL exceeds TR069_MAX_INFORM_INTERVAL",
            )
        return self

    @property
    def log_path(self) -> str:
        """Rotating log file path template."""
        return os.path.join(
            self.LOG_DIR,
            "kea_validator_{time:DD-MM-YYYY}.log",
        )

    @classmethod
    def from_os(cls) -> "Settings":
        """Get cls from environ."""
        return Settings(**os.environ)
