"""IPv4 address arithmetic.

Addresses are handled as unsigned 32-bit integers so that pools and
CIDR blocks reduce to closed integer intervals.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from .exceptions import (
    InvalidAddressError,
    InvalidCidrError,
    InvalidPoolError,
    PoolStartAfterEndError,
)

MAX_IPV4 = 0xFFFFFFFF

_OCTET_RE = re.compile(r"[0-9]{1,3}")
_PREFIX_RE = re.compile(r"[0-9]|[1-2][0-9]|3[0-2]")


def ip_to_int(address: str) -> int:
    """Convert dotted-quad IPv4 address to integer.

    >>> ip_to_int("192.168.1.1")
    3232235777

    :raises InvalidAddressError: not exactly 4 decimal octets in 0-255
    """
    parts = address.split(".")
    if len(parts) != 4:
        raise InvalidAddressError("Invalid IPv4", value=address)

    value = 0
    for part in parts:
        if not _OCTET_RE.fullmatch(part) or int(part) > 255:
            raise InvalidAddressError("Invalid IPv4", value=address)
        value = (value << 8) | int(part)

    return value


def int_to_ip(value: int) -> str:
    """Convert integer to dotted-quad IPv4 address."""
    if not 0 <= value <= MAX_IPV4:
        raise InvalidAddressError("IPv4 value out of range", value=value)

    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def prefix_mask(prefix: int) -> int:
    """Netmask with the top ``prefix`` bits set."""
    return (MAX_IPV4 << (32 - prefix)) & MAX_IPV4


def cidr_range(cidr: str) -> tuple[int, int]:
    """Get network and broadcast integers of a CIDR block.

    :raises InvalidCidrError: no prefix, prefix not in 0-32 or bad address
    """
    parts = cidr.split("/")
    if len(parts) != 2 or not _PREFIX_RE.fullmatch(parts[1]):
        raise InvalidCidrError("Invalid CIDR", value=cidr)

    try:
        base = ip_to_int(parts[0])
    except InvalidAddressError as err:
        raise InvalidCidrError("Invalid CIDR", value=cidr) from err

    mask = prefix_mask(int(parts[1]))
    network = base & mask
    broadcast = network | (~mask & MAX_IPV4)
    return network, broadcast


def parse_pool(pool: str) -> tuple[int, int]:
    """Parse ``start-end`` or single address pool into an interval.

    :raises PoolStartAfterEndError: start is greater than end
    :raises InvalidPoolError: any other malformed pool
    """
    if "-" in pool:
        parts = [part.strip() for part in pool.split("-")]
        if len(parts) != 2:
            raise InvalidPoolError("Pool must be start-end", value=pool)
        start_str, end_str = parts
    else:
        start_str = end_str = pool.strip()

    try:
        start, end = ip_to_int(start_str), ip_to_int(end_str)
    except InvalidAddressError as err:
        raise InvalidPoolError(
            'Invalid pool format. Use "start-end" or single IP',
            value=pool,
        ) from err

    if start > end:
        raise PoolStartAfterEndError(
            "Pool start must be <= end",
            value=pool,
        )

    return start, end
