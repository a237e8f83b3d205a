"""Test validator logging.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

import pytest
from loguru import logger

from config import Settings
from kea_protocol.dhcp import ConfigValidator, setup_logging


def test_rejected_fragment_is_logged(tmp_path: Path) -> None:
    """Test rejected fragments land in the rotating log file."""
    settings = Settings(LOG_DIR=str(tmp_path), DEBUG=True)
    handler_id = setup_logging(settings)

    try:
        ConfigValidator(settings).validate_subnet(
            {"subnet": "192.168.1.0/33"},
        )
        logger.bind(name="other").info("unrelated record")
    finally:
        logger.remove(handler_id)

    (log_file,) = tmp_path.glob("kea_validator_*.log")
    content = log_file.read_text()

    assert "Calling 'validate_subnet'" in content
    assert "validate_subnet rejected fragment: subnet: Invalid CIDR" in content
    assert "unrelated record" not in content


def test_settings_inform_bounds() -> None:
    """Test inform interval bounds must be ordered."""
    with pytest.raises(ValueError):  # noqa: PT011
        Settings(
            TR069_MIN_INFORM_INTERVAL=100,
            TR069_MAX_INFORM_INTERVAL=10,
        )


def test_settings_from_os(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings are read from environment."""
    monkeypatch.setenv("DEFAULT_SERVICE", "dhcp6")
    monkeypatch.setenv("WARNINGS_AS_ERRORS", "true")

    settings = Settings.from_os()

    assert settings.DEFAULT_SERVICE == "dhcp6"
    assert settings.WARNINGS_AS_ERRORS
