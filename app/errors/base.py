"""Errors base.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum
from typing import Any


class BaseDomainException(Exception):  # noqa N818
    """Base exception.

    Every subclass declares a stable ``code``; ``value`` keeps the
    offending input so callers can point at it.
    """

    code: IntEnum

    def __init__(self, message: str = "", value: Any = None) -> None:
        """Store message and offending value."""
        super().__init__(message)
        self.value = value

    def __init_subclass__(cls) -> None:
        """Initialize subclass."""
        super().__init_subclass__()

        if not hasattr(cls, "code"):
            raise AttributeError("code must be set")
