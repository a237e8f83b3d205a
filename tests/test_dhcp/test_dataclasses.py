"""Test option identifiers and validation results.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from kea_protocol.dhcp import (
    Both,
    ByCode,
    ByName,
    ErrorCodes,
    InvalidMacError,
    MissingIdentifierError,
    OptionInstance,
    ValidationResult,
    make_identifier,
)
from kea_protocol.dhcp.schemas import OptionData
from kea_protocol.dhcp.schemas6 import Option6Data


@pytest.mark.parametrize(
    ("name", "code", "expected"),
    [
        ("routers", None, ByName("routers")),
        (None, 3, ByCode(3)),
        ("routers", 3, Both("routers", 3)),
        ("", 3, ByCode(3)),
    ],
)
def test_make_identifier(
    name: str | None,
    code: int | None,
    expected: object,
) -> None:
    """Test identifier kind follows present keys."""
    assert make_identifier(name, code) == expected


@pytest.mark.parametrize(("name", "code"), [(None, None), ("", 0)])
def test_make_identifier_missing(name: str | None, code: int | None) -> None:
    """Test option without name and code is rejected."""
    with pytest.raises(MissingIdentifierError):
        make_identifier(name, code)


def test_option_instance_keys() -> None:
    """Test name and code accessors of each identifier kind."""
    by_name = OptionInstance(identifier=ByName("routers"), data="10.0.0.1")
    by_code = OptionInstance(identifier=ByCode(3), data="10.0.0.1")
    both = OptionInstance(identifier=Both("routers", 3), data="10.0.0.1")

    assert (by_name.name, by_name.code) == ("routers", None)
    assert (by_code.name, by_code.code) == (None, 3)
    assert (both.name, both.code) == ("routers", 3)


def test_option_data_to_instance() -> None:
    """Test parsed option data converts to an instance."""
    option = OptionData.model_validate(
        {"code": 43, "data": "010141", "always-send": True},
    )
    instance = option.to_instance()

    assert instance.identifier == ByCode(43)
    assert instance.always_send
    assert not instance.never_send
    assert instance.space == "dhcp4"


def test_validation_result() -> None:
    """Test errors clear success, warnings do not."""
    result = ValidationResult()
    result.add_warning("odd")
    assert result.success

    result.add_error(InvalidMacError("Invalid MAC address format"), "mac")
    assert not result.success
    assert result.errors == ["mac: Invalid MAC address format"]
    assert result.codes == [ErrorCodes.INVALID_MAC]


def test_option6_data_to_instance() -> None:
    """Test parsed DHCPv6 option data keeps its space and flags."""
    option = Option6Data.model_validate(
        {"name": "dns-servers", "data": "2001:db8::1", "never-send": True},
    )
    instance = option.to_instance()

    assert instance.identifier == ByName("dns-servers")
    assert instance.space == "dhcp6"
    assert instance.never_send
    assert not instance.always_send
    assert instance.csv_format is None
