"""Kea DHCP configuration validation core.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .address import cidr_range, int_to_ip, ip_to_int, parse_pool
from .commands import (
    build_command,
    config_test_command,
    dump_option,
    dump_reservation,
    dump_subnet,
    reservation_add_command,
    subnet6_add_command,
    subnet_add_command,
)
from .dataclasses import (
    Both,
    ByCode,
    ByName,
    OptionIdentifier,
    OptionInstance,
    Suboption,
    ValidationResult,
    make_identifier,
)
from .enums import EntityKind, KeaDHCPCommands, TLVSuboption
from .exceptions import (
    DHCPError,
    DHCPSchemaError,
    ErrorCodes,
    InvalidAddressError,
    InvalidCidrError,
    InvalidHexError,
    InvalidMacError,
    InvalidPoolError,
    InvalidSuboptionError,
    MissingIdentifierError,
    PayloadTooLongError,
    PoolStartAfterEndError,
    TemplateNotFoundError,
)
from .ranges import (
    find_overlapping_pools,
    pool_within_cidr,
    pools_overlap,
    subnets_overlap,
)
from .templates import (
    ALL_TEMPLATES,
    OptionTemplate,
    apply_template,
    get_template,
    validate_template_parameters,
)
from .utils import setup_logging
from .validator import ConfigValidator, validate_option_codes
from .vendor_options import (
    encode_raw_hex,
    encode_tlv_option,
    encode_tr069_suboptions,
)

__all__ = [
    "ip_to_int",
    "int_to_ip",
    "cidr_range",
    "parse_pool",
    "pool_within_cidr",
    "pools_overlap",
    "find_overlapping_pools",
    "subnets_overlap",
    "ConfigValidator",
    "validate_option_codes",
    "ValidationResult",
    "EntityKind",
    "encode_tlv_option",
    "encode_tr069_suboptions",
    "encode_raw_hex",
    "Suboption",
    "TLVSuboption",
    "OptionIdentifier",
    "OptionInstance",
    "ByName",
    "ByCode",
    "Both",
    "make_identifier",
    "OptionTemplate",
    "ALL_TEMPLATES",
    "get_template",
    "validate_template_parameters",
    "apply_template",
    "KeaDHCPCommands",
    "build_command",
    "dump_option",
    "dump_subnet",
    "dump_reservation",
    "subnet_add_command",
    "subnet6_add_command",
    "reservation_add_command",
    "config_test_command",
    "setup_logging",
    "ErrorCodes",
    "DHCPError",
    "DHCPSchemaError",
    "InvalidAddressError",
    "InvalidCidrError",
    "InvalidPoolError",
    "PoolStartAfterEndError",
    "InvalidMacError",
    "InvalidHexError",
    "MissingIdentifierError",
    "PayloadTooLongError",
    "InvalidSuboptionError",
    "TemplateNotFoundError",
]
