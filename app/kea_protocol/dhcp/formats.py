"""String grammar checks for DHCP entity fields.

Each ``ensure_*`` returns the value unchanged or raises a domain error.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .address import cidr_range, ip_to_int
from .constants import (
    DUID_RE,
    HEX_RE,
    IPV6_PREFIX_RE,
    IPV6_RE,
    MAC_RE,
    NAME_RE,
)
from .exceptions import (
    InvalidDUIDError,
    InvalidHexError,
    InvalidIPv6Error,
    InvalidMacError,
    InvalidNameError,
)


def strip_hex_prefix(data: str) -> str:
    """Drop optional ``0x`` prefix."""
    return data.removeprefix("0x")


def is_hex_payload(data: str) -> bool:
    """Check even-length hex digits with optional ``0x`` prefix."""
    return HEX_RE.fullmatch(strip_hex_prefix(data)) is not None


def ensure_ipv4(address: str) -> str:
    ip_to_int(address)
    return address


def ensure_cidr(cidr: str) -> str:
    cidr_range(cidr)
    return cidr


def ensure_mac(mac: str) -> str:
    if not MAC_RE.fullmatch(mac):
        raise InvalidMacError("Invalid MAC address format", value=mac)
    return mac


def ensure_hex(data: str) -> str:
    if not is_hex_payload(data):
        raise InvalidHexError("Invalid data format for option type", data)
    return data


def ensure_duid(duid: str) -> str:
    if not DUID_RE.fullmatch(duid):
        raise InvalidDUIDError("Invalid DUID format", value=duid)
    return duid


def ensure_name(name: str, kind: str = "class") -> str:
    """Check identifier grammar: leading letter, then ``[A-Za-z0-9_-]``."""
    if not NAME_RE.fullmatch(name):
        raise InvalidNameError(f"Invalid {kind} name format", value=name)
    return name


def ensure_ipv6(address: str) -> str:
    if not IPV6_RE.fullmatch(address):
        raise InvalidIPv6Error("Invalid IPv6 address", value=address)
    return address


def ensure_ipv6_prefix(prefix: str) -> str:
    if not IPV6_PREFIX_RE.fullmatch(prefix):
        raise InvalidIPv6Error("Invalid IPv6 prefix format", value=prefix)
    return prefix


def ensure_ipv6_pool(pool: str) -> str:
    """Check ``start-end`` IPv6 range or ``prefix/len`` pool."""
    if "-" in pool:
        parts = pool.split("-")
        if len(parts) == 2 and all(
            IPV6_RE.fullmatch(part.strip()) for part in parts
        ):
            return pool
    elif IPV6_PREFIX_RE.fullmatch(pool.strip()):
        return pool

    raise InvalidIPv6Error(
        'Invalid IPv6 pool format. Use "start-end" or prefix/length',
        value=pool,
    )
