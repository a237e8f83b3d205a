"""Test IPv4 address arithmetic.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from kea_protocol.dhcp import (
    InvalidAddressError,
    InvalidCidrError,
    InvalidPoolError,
    PoolStartAfterEndError,
    cidr_range,
    int_to_ip,
    ip_to_int,
    parse_pool,
)


def test_ip_to_int() -> None:
    """Test dotted quad conversion."""
    assert ip_to_int("192.168.1.1") == 3232235777
    assert ip_to_int("0.0.0.0") == 0
    assert ip_to_int("255.255.255.255") == 0xFFFFFFFF


@pytest.mark.parametrize(
    ("address"),
    [
        "256.1.1.1",
        "1.2.3",
        "1.2.3.4.5",
        "a.b.c.d",
        "",
        "1..2.3",
        "1234.1.1.1",
        " 1.2.3.4",
        "1.2.3.-4",
    ],
)
def test_ip_to_int_invalid(address: str) -> None:
    """Test malformed addresses are rejected."""
    with pytest.raises(InvalidAddressError):
        ip_to_int(address)


@pytest.mark.parametrize(
    ("address"),
    ["10.0.0.1", "192.168.1.1", "172.31.255.254", "8.8.4.4"],
)
def test_int_to_ip_inverse(address: str) -> None:
    """Test int_to_ip restores canonical address."""
    assert int_to_ip(ip_to_int(address)) == address


@pytest.mark.parametrize(("value"), [-1, 2**32])
def test_int_to_ip_out_of_range(value: int) -> None:
    """Test values outside of 32 bits are rejected."""
    with pytest.raises(InvalidAddressError):
        int_to_ip(value)


def test_cidr_range() -> None:
    """Test network and broadcast of CIDR blocks."""
    assert cidr_range("192.168.1.0/30") == (
        ip_to_int("192.168.1.0"),
        ip_to_int("192.168.1.3"),
    )
    assert cidr_range("192.168.1.77/24") == (
        ip_to_int("192.168.1.0"),
        ip_to_int("192.168.1.255"),
    )
    assert cidr_range("0.0.0.0/0") == (0, 0xFFFFFFFF)
    assert cidr_range("10.1.2.3/32") == (
        ip_to_int("10.1.2.3"),
        ip_to_int("10.1.2.3"),
    )


@pytest.mark.parametrize(("prefix"), [0, 1, 8, 24, 31, 32])
def test_cidr_range_size(prefix: int) -> None:
    """Test block holds 2^(32-prefix) addresses."""
    network, broadcast = cidr_range(f"10.0.0.0/{prefix}")
    assert broadcast - network + 1 == 2 ** (32 - prefix)


@pytest.mark.parametrize(
    ("cidr"),
    [
        "192.168.1.0",
        "192.168.1.0/33",
        "192.168.1.0/08",
        "192.168.1.0/-1",
        "192.168.1.0/",
        "300.1.1.1/24",
        "1.1.1.1/24/1",
    ],
)
def test_cidr_range_invalid(cidr: str) -> None:
    """Test malformed CIDR blocks are rejected."""
    with pytest.raises(InvalidCidrError):
        cidr_range(cidr)


def test_parse_pool() -> None:
    """Test range and single address pools."""
    assert parse_pool("192.168.1.100-192.168.1.200") == (
        ip_to_int("192.168.1.100"),
        ip_to_int("192.168.1.200"),
    )
    assert parse_pool("10.0.0.1 - 10.0.0.9") == (
        ip_to_int("10.0.0.1"),
        ip_to_int("10.0.0.9"),
    )
    assert parse_pool(" 10.0.0.5 ") == (
        ip_to_int("10.0.0.5"),
        ip_to_int("10.0.0.5"),
    )


def test_parse_pool_start_after_end() -> None:
    """Test reversed pool gets its own error kind."""
    with pytest.raises(PoolStartAfterEndError) as exc_info:
        parse_pool("192.168.1.200-192.168.1.100")

    assert isinstance(exc_info.value, InvalidPoolError)
    assert exc_info.value.value == "192.168.1.200-192.168.1.100"


@pytest.mark.parametrize(
    ("pool"),
    [
        "10.0.0.1-10.0.0.2-10.0.0.3",
        "garbage",
        "10.0.0.1-",
        "10.0.0.256",
        "",
    ],
)
def test_parse_pool_invalid(pool: str) -> None:
    """Test malformed pools are rejected."""
    with pytest.raises(InvalidPoolError):
        parse_pool(pool)
