"""Test main config.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from config import Settings
from kea_protocol.dhcp import ConfigValidator


@pytest.fixture
def settings() -> Settings:
    """Get default settings."""
    return Settings()


@pytest.fixture
def validator(settings: Settings) -> ConfigValidator:
    """Get validator with default settings."""
    return ConfigValidator(settings)


@pytest.fixture
def strict_validator() -> ConfigValidator:
    """Get validator treating warnings as errors."""
    return ConfigValidator(Settings(WARNINGS_AS_ERRORS=True))
