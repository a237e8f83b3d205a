"""Constants for DHCP configuration validation.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re
from typing import Final

# Partial table, codes outside of it are not checked against names.
STANDARD_OPTION_CODES: Final[dict[int, str]] = {
    1: "subnet-mask",
    3: "routers",
    6: "domain-name-servers",
    12: "host-name",
    15: "domain-name",
    42: "ntp-servers",
    43: "vendor-encapsulated-options",
    60: "vendor-class-identifier",
    66: "tftp-server-name",
    67: "boot-file-name",
    125: "vendor-identifying-vendor-specific-information",
    138: "capwap-ac-v4",
}

VENDOR_HEX_OPTION_CODES: Final[frozenset[int]] = frozenset({43, 125})

MAX_OPTION4_CODE: Final = 254
MAX_OPTION6_CODE: Final = 65535
MAX_TLV_VALUE_LENGTH: Final = 255

MAC_RE = re.compile(r"([0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}")
HEX_RE = re.compile(r"(?:[0-9A-Fa-f]{2})+")
DUID_RE = re.compile(r"[0-9A-Fa-f:]+")
NAME_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")
_IPV6_GROUPS = r"[0-9a-fA-F]{1,4}(?::[0-9a-fA-F]{1,4})*"
_IPV6_ADDRESS = (
    r"(?:[0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}"
    rf"|(?:{_IPV6_GROUPS})?::(?:{_IPV6_GROUPS})?"
)
IPV6_RE = re.compile(_IPV6_ADDRESS)
IPV6_PREFIX_RE = re.compile(
    rf"(?:{_IPV6_ADDRESS})/(?:[0-9]|[1-9][0-9]|1[0-1][0-9]|12[0-8])",
)

TEST_EXPRESSION_PATTERNS: Final = (
    re.compile(r'option\[\d+\]\.text\s*==\s*"[^"]*"'),
    re.compile(r"option\[\d+\]\.hex\s*==\s*0x[0-9A-Fa-f]+"),
    re.compile(
        r'substring\(option\[\d+\]\.text,\s*\d+,\s*\d+\)\s*==\s*"[^"]*"',
    ),
    re.compile(r"member\('[^']*'\)"),
    re.compile(r"client\.classes\s*==\s*'[^']*'"),
)

LOOPBACK_NETWORK: Final = "127.0.0.0/8"
MULTICAST_START: Final = "224.0.0.0"
