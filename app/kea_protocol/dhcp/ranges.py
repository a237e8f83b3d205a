"""Pool and subnet interval checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from itertools import combinations
from typing import Iterable

from .address import cidr_range, parse_pool


def pool_within_cidr(pool: str, cidr: str) -> bool:
    """Check that both pool ends lie inside the CIDR block."""
    start, end = parse_pool(pool)
    network, broadcast = cidr_range(cidr)
    return network <= start and end <= broadcast


def pools_overlap(pools: Iterable[str]) -> bool:
    """Check if any two pools share an address.

    Intervals are sorted by start and only neighbours are compared,
    touching ranges (``end + 1 == next_start``) do not overlap.
    """
    ranges = sorted(parse_pool(pool) for pool in pools)

    for prev, cur in zip(ranges, ranges[1:]):
        if cur[0] <= prev[1]:
            return True

    return False


def find_overlapping_pools(pools: list[str]) -> list[tuple[str, str]]:
    """Get every overlapping pair of pools in input order."""
    parsed = [(pool, parse_pool(pool)) for pool in pools]

    return [
        (first, second)
        for (first, (a_start, a_end)), (second, (b_start, b_end))
        in combinations(parsed, 2)
        if a_start <= b_end and b_start <= a_end
    ]  # fmt: skip


def subnets_overlap(first: str, second: str) -> bool:
    """Check if two CIDR blocks intersect."""
    a_network, a_broadcast = cidr_range(first)
    b_network, b_broadcast = cidr_range(second)
    return a_network <= b_broadcast and b_network <= a_broadcast
