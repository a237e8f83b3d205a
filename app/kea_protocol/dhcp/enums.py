"""Enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, StrEnum


class OptionType(StrEnum):
    """DHCPv4 option definition types."""

    EMPTY = "empty"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    STRING = "string"
    FQDN = "fqdn"
    IPV4_ADDRESS = "ipv4-address"
    IPV6_ADDRESS = "ipv6-address"
    PSID = "psid"
    TUPLE = "tuple"
    RECORD = "record"
    BINARY = "binary"


class Option6Type(StrEnum):
    """DHCPv6 option definition types."""

    EMPTY = "empty"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    STRING = "string"
    FQDN = "fqdn"
    IPV6_ADDRESS = "ipv6-address"
    IPV6_PREFIX = "ipv6-prefix"
    PSID = "psid"
    TUPLE = "tuple"
    RECORD = "record"
    BINARY = "binary"


class OptionSpace(StrEnum):
    """DHCPv4 option spaces."""

    DHCP4 = "dhcp4"
    DHCP6 = "dhcp6"
    VENDOR_ENCAPSULATED = "vendor-encapsulated-options"
    CABLELABS = "vendor-4491"
    UBIQUITI = "vendor-25506"
    MICROSOFT = "vendor-311"
    CISCO = "vendor-3561"


class Option6Space(StrEnum):
    """DHCPv6 option spaces."""

    DHCP6 = "dhcp6"
    CABLELABS = "vendor-4491"
    UBIQUITI = "vendor-25506"
    MICROSOFT = "vendor-311"
    CISCO = "vendor-3561"


class KeaService(StrEnum):
    """Kea daemons reachable through the control agent."""

    DHCP4 = "dhcp4"
    DHCP6 = "dhcp6"


class KeaDHCPCommands(StrEnum):
    """Kea DHCP API commands."""

    VERSION_GET = "version-get"
    CONFIG_GET = "config-get"
    CONFIG_TEST = "config-test"
    CONFIG_SET = "config-set"
    CONFIG_WRITE = "config-write"
    CONFIG_RELOAD = "config-reload"
    SUBNET4_ADD = "subnet4-add"
    SUBNET4_UPDATE = "subnet4-update"
    SUBNET6_ADD = "subnet6-add"
    SUBNET6_UPDATE = "subnet6-update"
    LEASE4_GET_ALL = "lease4-get-all"
    RESERVATION_ADD = "reservation-add"


class TLVSuboption(IntEnum):
    """TR-069 option 43 sub-option types."""

    ACS_URL = 1
    PROVISIONING_CODE = 2
    USERNAME = 3
    PASSWORD = 4
    PERIODIC_INFORM_INTERVAL = 5


class TemplateCategory(StrEnum):
    """Option template categories."""

    TR069 = "tr069"
    PXE = "pxe"
    VENDOR = "vendor"
    NETWORK = "network"
    CUSTOM = "custom"


class ParameterType(StrEnum):
    """Option template parameter types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SELECT = "select"


class EntityKind(StrEnum):
    """Configuration fragments a form can ask to validate."""

    POOL = "pool"
    SUBNET = "subnet"
    RESERVATION = "reservation"
    CLIENT_CLASS = "client-class"
    OPTION_DATA = "option-data"
    OPTION_DEF = "option-def"
    SHARED_NETWORK = "shared-network"
    DHCP_CONFIG = "dhcp-config"
    TR069 = "tr069"
    SUBNET6 = "subnet6"
    PD_POOL = "pd-pool"
    RESERVATION6 = "reservation6"
    CLIENT_CLASS6 = "client-class6"
    OPTION6_DATA = "option6-data"
    OPTION6_DEF = "option6-def"
