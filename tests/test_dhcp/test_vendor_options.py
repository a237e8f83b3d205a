"""Test option 43 sub-option encoding.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import pytest

from kea_protocol.dhcp import (
    InvalidSuboptionError,
    PayloadTooLongError,
    Suboption,
    encode_raw_hex,
    encode_tlv_option,
    encode_tr069_suboptions,
)
from kea_protocol.dhcp.schemas import TR069Params


def test_encode_tlv_option() -> None:
    """Test type, length and value bytes in order."""
    assert encode_tlv_option([Suboption(type=1, value=b"A")]) == "010141"
    assert encode_tlv_option([]) == ""
    assert encode_tlv_option(
        [
            Suboption(type=2, value=b"ab"),
            Suboption(type=1, value=b""),
        ],
    ) == "0202616201" + "00"


def test_encode_tlv_option_length_limit() -> None:
    """Test value of 255 bytes fits, 256 bytes does not."""
    encoded = encode_tlv_option([Suboption(type=1, value=b"x" * 255)])
    assert encoded.startswith("01ff")
    assert len(encoded) == (2 + 255) * 2

    with pytest.raises(PayloadTooLongError):
        encode_tlv_option([Suboption(type=1, value=b"x" * 256)])


@pytest.mark.parametrize(("kind"), [-1, 256])
def test_encode_tlv_option_bad_type(kind: int) -> None:
    """Test sub-option type must fit in one byte."""
    with pytest.raises(InvalidSuboptionError):
        encode_tlv_option([Suboption(type=kind, value=b"A")])


def test_encode_tr069_suboptions() -> None:
    """Test ACS URL with periodic inform interval."""
    encoded = encode_tr069_suboptions(
        {"acsUrl": "http://a", "periodicInformInterval": 300},
    )
    assert encoded == "0108" + b"http://a".hex() + "0504" + "0000012c"


def test_encode_tr069_suboptions_order() -> None:
    """Test sub-options follow type order, not input order."""
    encoded = encode_tr069_suboptions(
        {
            "periodicInformInterval": 3600,
            "password": "p",
            "username": "u",
            "provisioningCode": "c",
            "acsUrl": "a",
        },
    )
    assert encoded == "010161" "020163" "030175" "040170" "050400000e10"


def test_encode_tr069_suboptions_skips_empty() -> None:
    """Test empty strings and zero interval are not emitted."""
    encoded = encode_tr069_suboptions(
        {"acsUrl": "u", "username": "", "periodicInformInterval": 0},
    )
    assert encoded == "010175"
    assert encode_tr069_suboptions({}) == ""


def test_encode_tr069_suboptions_model() -> None:
    """Test validated params model is accepted as is."""
    params = TR069Params(acs_url="u", password="p")
    assert encode_tr069_suboptions(params) == "010175040170"


def test_encode_tr069_suboptions_length_in_bytes() -> None:
    """Test length byte counts UTF-8 bytes."""
    assert encode_tr069_suboptions({"username": "é"}) == "0302c3a9"


@pytest.mark.parametrize(("interval"), [-1, 2**32])
def test_encode_tr069_suboptions_bad_interval(interval: int) -> None:
    """Test interval must fit in 4 unsigned bytes."""
    with pytest.raises(InvalidSuboptionError):
        encode_tr069_suboptions({"periodicInformInterval": interval})


def test_encode_raw_hex() -> None:
    """Test bare UTF-8 hex without TLV wrapper."""
    assert encode_raw_hex("AB") == "4142"
    assert encode_raw_hex("") == ""
    assert encode_raw_hex("http://u:8080/inform") == (
        b"http://u:8080/inform".hex()
    )
