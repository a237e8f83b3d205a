"""Vendor option payload encoders.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import struct
from typing import Any, Iterable, Mapping

from .constants import MAX_TLV_VALUE_LENGTH
from .dataclasses import Suboption
from .enums import TLVSuboption
from .exceptions import InvalidSuboptionError, PayloadTooLongError
from .schemas import TR069Params


def encode_tlv_option(suboptions: Iterable[Suboption]) -> str:
    """Serialize sub-options as ``type | length | value`` lowercase hex.

    >>> encode_tlv_option([Suboption(type=1, value=b"A")])
    '010141'

    :raises InvalidSuboptionError: type does not fit in one byte
    :raises PayloadTooLongError: value longer than 255 bytes
    """
    payload = bytearray()

    for suboption in suboptions:
        if not 0 <= suboption.type <= 0xFF:
            raise InvalidSuboptionError(
                f"Sub-option type {suboption.type} does not fit in one byte",
                value=suboption.type,
            )

        if len(suboption.value) > MAX_TLV_VALUE_LENGTH:
            raise PayloadTooLongError(
                f"Sub-option {suboption.type} value is "
                f"{len(suboption.value)} bytes, "
                f"limit is {MAX_TLV_VALUE_LENGTH}",
                value=suboption.type,
            )

        payload.append(suboption.type)
        payload.append(len(suboption.value))
        payload.extend(suboption.value)

    return payload.hex()


def encode_tr069_suboptions(
    params: TR069Params | Mapping[str, Any],
) -> str:
    """Encode TR-069 ACS settings as option 43 sub-options.

    Only present fields are emitted, always in sub-option type order.
    Empty strings and a zero interval count as absent.
    """
    if not isinstance(params, TR069Params):
        params = TR069Params.model_validate(params)

    suboptions = [
        Suboption(type=kind, value=text.encode())
        for kind, text in (
            (TLVSuboption.ACS_URL, params.acs_url),
            (TLVSuboption.PROVISIONING_CODE, params.provisioning_code),
            (TLVSuboption.USERNAME, params.username),
            (TLVSuboption.PASSWORD, params.password),
        )
        if text
    ]

    if params.periodic_inform_interval:
        try:
            interval = struct.pack(">I", params.periodic_inform_interval)
        except struct.error as err:
            raise InvalidSuboptionError(
                "Periodic inform interval must fit in 4 unsigned bytes",
                value=params.periodic_inform_interval,
            ) from err

        suboptions.append(
            Suboption(
                type=TLVSuboption.PERIODIC_INFORM_INTERVAL,
                value=interval,
            ),
        )

    return encode_tlv_option(suboptions)


def encode_raw_hex(text: str) -> str:
    """Encode bare UTF-8 string as hex, e.g. a UniFi inform URL."""
    return text.encode().hex()
