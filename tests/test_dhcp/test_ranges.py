"""Test pool and subnet range relations.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from kea_protocol.dhcp import (
    find_overlapping_pools,
    pool_within_cidr,
    pools_overlap,
    subnets_overlap,
)


@pytest.mark.parametrize(
    ("pool", "cidr", "expected"),
    [
        ("192.168.1.10-192.168.1.20", "192.168.1.0/24", True),
        ("192.168.1.0-192.168.1.255", "192.168.1.0/24", True),
        ("192.168.1.5", "192.168.1.0/24", True),
        ("192.168.2.10-192.168.2.20", "192.168.1.0/24", False),
        ("192.168.1.250-192.168.2.5", "192.168.1.0/24", False),
        ("10.0.0.1-10.0.0.9", "10.0.0.0/30", False),
    ],
)
def test_pool_within_cidr(pool: str, cidr: str, expected: bool) -> None:
    """Test pool placement inside a subnet."""
    assert pool_within_cidr(pool, cidr) is expected


@pytest.mark.parametrize(
    ("pools", "expected"),
    [
        ([], False),
        (["10.0.0.1-10.0.0.10"], False),
        (["10.0.0.1-10.0.0.10", "10.0.0.10-10.0.0.20"], True),
        (["10.0.0.1-10.0.0.10", "10.0.0.11-10.0.0.20"], False),
        (["10.0.0.50-10.0.0.60", "10.0.0.1-10.0.0.55"], True),
        (["10.0.0.1-10.0.0.100", "10.0.0.20-10.0.0.30"], True),
        (["10.0.0.5", "10.0.0.1-10.0.0.9"], True),
    ],
)
def test_pools_overlap(pools: list[str], expected: bool) -> None:
    """Test overlap detection, touching ranges do not overlap."""
    assert pools_overlap(pools) is expected


def test_find_overlapping_pools() -> None:
    """Test every overlapping pair is reported in input order."""
    pools = [
        "10.0.0.1-10.0.0.10",
        "10.0.0.20-10.0.0.30",
        "10.0.0.5-10.0.0.6",
        "10.0.0.25",
    ]

    assert find_overlapping_pools(pools) == [
        ("10.0.0.1-10.0.0.10", "10.0.0.5-10.0.0.6"),
        ("10.0.0.20-10.0.0.30", "10.0.0.25"),
    ]
    assert find_overlapping_pools(pools[:2]) == []


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("10.0.0.0/8", "10.1.0.0/16", True),
        ("10.1.0.0/16", "10.0.0.0/8", True),
        ("192.168.1.0/24", "192.168.2.0/24", False),
        ("192.168.1.0/25", "192.168.1.128/25", False),
        ("192.168.1.0/24", "192.168.1.0/24", True),
    ],
)
def test_subnets_overlap(first: str, second: str, expected: bool) -> None:
    """Test CIDR intersection."""
    assert subnets_overlap(first, second) is expected
