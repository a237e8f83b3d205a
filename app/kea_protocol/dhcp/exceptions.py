"""Exceptions for DHCP configuration validation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique

from errors import BaseDomainException


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    INVALID_ADDRESS = 1
    INVALID_CIDR = 2
    INVALID_POOL = 3
    INVALID_MAC = 4
    INVALID_HEX = 5
    MISSING_IDENTIFIER = 6
    DUPLICATE_OPTION_CODE = 7
    DUPLICATE_OPTION_NAME = 8
    POOL_OUT_OF_RANGE = 9
    OVERLAPPING_POOLS = 10
    PAYLOAD_TOO_LONG = 11
    STANDARD_OPTION_MISMATCH = 12
    INVALID_SUBOPTION = 13
    INVALID_IPV6 = 14
    INVALID_DUID = 15
    INVALID_NAME = 16
    OVERLAPPING_SUBNETS = 17
    DUPLICATE_CLIENT_CLASS = 18
    CONFLICTING_OPTION_FLAGS = 19
    TEMPLATE_NOT_FOUND = 20
    SCHEMA_ERROR = 21


class DHCPError(BaseDomainException):
    """DHCP base exception."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR


class InvalidAddressError(DHCPError):
    """Malformed IPv4 address."""

    code = ErrorCodes.INVALID_ADDRESS


class InvalidCidrError(DHCPError):
    """Malformed CIDR block."""

    code = ErrorCodes.INVALID_CIDR


class InvalidPoolError(DHCPError):
    """Malformed address pool."""

    code = ErrorCodes.INVALID_POOL


class PoolStartAfterEndError(InvalidPoolError):
    """Pool start address is greater than its end address."""


class InvalidMacError(DHCPError):
    """Malformed hardware address."""

    code = ErrorCodes.INVALID_MAC


class InvalidHexError(DHCPError):
    """Malformed hex payload."""

    code = ErrorCodes.INVALID_HEX


class MissingIdentifierError(DHCPError):
    """Option has neither name nor code."""

    code = ErrorCodes.MISSING_IDENTIFIER


class DuplicateOptionCodeError(DHCPError):
    """Option code used twice in one scope."""

    code = ErrorCodes.DUPLICATE_OPTION_CODE


class DuplicateOptionNameError(DHCPError):
    """Option name used twice in one scope."""

    code = ErrorCodes.DUPLICATE_OPTION_NAME


class PoolOutOfRangeError(DHCPError):
    """Pool is not within its subnet."""

    code = ErrorCodes.POOL_OUT_OF_RANGE


class OverlappingPoolsError(DHCPError):
    """Pools of one subnet share addresses."""

    code = ErrorCodes.OVERLAPPING_POOLS


class PayloadTooLongError(DHCPError):
    """TLV value does not fit into a length byte."""

    code = ErrorCodes.PAYLOAD_TOO_LONG


class StandardOptionMismatchError(DHCPError):
    """Reserved option code used with a non-standard name."""

    code = ErrorCodes.STANDARD_OPTION_MISMATCH


class InvalidSuboptionError(DHCPError):
    """Sub-option type or value cannot be encoded."""

    code = ErrorCodes.INVALID_SUBOPTION


class InvalidIPv6Error(DHCPError):
    """Malformed IPv6 address or prefix."""

    code = ErrorCodes.INVALID_IPV6


class InvalidDUIDError(DHCPError):
    """Malformed DUID."""

    code = ErrorCodes.INVALID_DUID


class InvalidNameError(DHCPError):
    """Malformed class or shared network name."""

    code = ErrorCodes.INVALID_NAME


class OverlappingSubnetsError(DHCPError):
    """Two subnets share addresses."""

    code = ErrorCodes.OVERLAPPING_SUBNETS


class DuplicateClientClassError(DHCPError):
    """Client class name used twice."""

    code = ErrorCodes.DUPLICATE_CLIENT_CLASS


class ConflictingOptionFlagsError(DHCPError):
    """Option is both always-send and never-send."""

    code = ErrorCodes.CONFLICTING_OPTION_FLAGS


class TemplateNotFoundError(DHCPError):
    """Unknown option template."""

    code = ErrorCodes.TEMPLATE_NOT_FOUND


class DHCPSchemaError(DHCPError):
    """Generic schema violation reported by pydantic."""

    code = ErrorCodes.SCHEMA_ERROR


def error_for_code(code: ErrorCodes) -> type[DHCPError]:
    """Get exception class reporting ``code``."""
    for cls in DHCPError.__subclasses__():
        if cls.code == code:
            return cls
    return DHCPSchemaError
