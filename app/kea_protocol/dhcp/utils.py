"""Logging utils for DHCP configuration validation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import functools
from typing import Any, Callable

from loguru import logger as loguru_logger

from config import Settings

from .dataclasses import ValidationResult

log = loguru_logger.bind(name=Settings.LOG_NAME)


def setup_logging(settings: Settings) -> int:
    """Add rotating file sink for validator records.

    :return int: loguru handler id, pass to ``logger.remove`` to detach
    """
    return loguru_logger.add(
        settings.log_path,
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
        filter=lambda rec: rec["extra"].get("name") == Settings.LOG_NAME,
        retention=settings.LOG_RETENTION,
        rotation=settings.LOG_ROTATION,
        colorize=False,
        delay=True,
    )


def logger_wraps(func: Callable[..., ValidationResult]) -> Callable:
    """Log validator calls and rejected fragments."""
    name = func.__name__

    @functools.wraps(func)
    def wrapped(*args: Any, **kwargs: Any) -> ValidationResult:
        logger = log.opt(depth=1)

        logger.debug(f"Calling '{name}'")
        result = func(*args, **kwargs)

        if not result.success:
            errors = "; ".join(result.errors)
            logger.info(f"{name} rejected fragment: {errors}")
        elif result.warnings:
            logger.warning(f"{name}: {'; '.join(result.warnings)}")

        return result

    return wrapped
