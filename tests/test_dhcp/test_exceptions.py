"""Tests for DHCP exceptions.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from collections import Counter

import pytest

from errors import BaseDomainException
from kea_protocol.dhcp.exceptions import (
    DHCPError,
    DHCPSchemaError,
    ErrorCodes,
    InvalidMacError,
    InvalidPoolError,
    PoolStartAfterEndError,
    error_for_code,
)


class TestErrorCodeUniqueness:
    """Test that all ErrorCodes values are unique."""

    def test_all_error_code_values_are_unique(self) -> None:
        """Test that all ErrorCodes enum values are unique."""
        value_counts = Counter(error_code.value for error_code in ErrorCodes)

        duplicates = {
            value: count for value, count in value_counts.items() if count > 1
        }

        assert not duplicates, (
            f"Found duplicate ErrorCodes values: {duplicates}. "
            f"Each error code must have a unique numeric value."
        )

    def test_error_codes_are_sequential(self) -> None:
        """Test that codes start from zero without gaps."""
        values = sorted(error_code.value for error_code in ErrorCodes)
        assert values == list(range(len(values)))


def test_base_domain_exception_requires_code() -> None:
    """Test that BaseDomainException requires code attribute."""
    with pytest.raises(
        AttributeError,
        match="code must be set",
    ):

        class InvalidError(BaseDomainException):
            """Invalid error without code."""


def test_error_exception_message() -> None:
    """Test that exceptions keep message and offending value."""
    error = InvalidMacError("Invalid MAC address format", value="aa:bb")

    assert str(error) == "Invalid MAC address format"
    assert error.value == "aa:bb"
    assert error.code == ErrorCodes.INVALID_MAC
    assert isinstance(error, DHCPError)


def test_pool_start_after_end_code() -> None:
    """Test reversed pool error is an invalid pool error."""
    assert issubclass(PoolStartAfterEndError, InvalidPoolError)
    assert PoolStartAfterEndError.code == ErrorCodes.INVALID_POOL


def test_error_for_code() -> None:
    """Test every non-base code has a reporting exception."""
    for code in ErrorCodes:
        if code == ErrorCodes.BASE_ERROR:
            continue
        assert error_for_code(code).code == code

    assert error_for_code(ErrorCodes.INVALID_POOL) is InvalidPoolError
    assert error_for_code(ErrorCodes.BASE_ERROR) is DHCPSchemaError
