"""Schemas for DHCPv6 configuration fragments.

IPv6 values are checked by shape only.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Annotated, Self

from pydantic import AfterValidator, Field, model_validator
from pydantic_core import PydanticCustomError

from .constants import MAX_OPTION6_CODE
from .dataclasses import OptionInstance, make_identifier
from .enums import Option6Space, Option6Type
from .exceptions import DHCPError, ErrorCodes, MissingIdentifierError
from .formats import (
    ensure_duid,
    ensure_ipv6,
    ensure_ipv6_pool,
    ensure_ipv6_prefix,
)
from .schemas import (
    ClassNameStr,
    KeaModel,
    MacStr,
    as_pydantic_error,
    domain_check,
)

IPv6Str = Annotated[str, AfterValidator(domain_check(ensure_ipv6))]
IPv6PrefixStr = Annotated[
    str,
    AfterValidator(domain_check(ensure_ipv6_prefix)),
]
IPv6PoolStr = Annotated[str, AfterValidator(domain_check(ensure_ipv6_pool))]
DuidStr = Annotated[str, AfterValidator(domain_check(ensure_duid))]


class Option6Data(KeaModel):
    """DHCPv6 option instance."""

    name: str | None = None
    code: int | None = Field(None, ge=1, le=MAX_OPTION6_CODE)
    data: str = Field(min_length=1)
    space: Option6Space = Option6Space.DHCP6
    always_send: bool | None = None
    never_send: bool | None = None
    csv_format: bool | None = None

    @model_validator(mode="after")
    def check_identifier(self) -> Self:
        try:
            make_identifier(self.name, self.code)
        except DHCPError as err:
            raise as_pydantic_error(err) from err
        return self

    def to_instance(self) -> OptionInstance:
        return OptionInstance(
            identifier=make_identifier(self.name, self.code),
            data=self.data,
            space=self.space,
            always_send=bool(self.always_send),
            never_send=bool(self.never_send),
            csv_format=self.csv_format,
        )


class Option6Def(KeaModel):
    """DHCPv6 option definition, no standard name table."""

    name: str = Field(min_length=1)
    code: int = Field(ge=1, le=MAX_OPTION6_CODE)
    type: Option6Type
    space: Option6Space = Option6Space.DHCP6
    record_types: str | None = None
    encapsulate: str | None = None
    array: bool | None = None


class Pool6(KeaModel):
    """IA_NA address pool."""

    pool: IPv6PoolStr
    client_class: str | None = None
    require_client_classes: list[str] | None = None
    option_data: list[Option6Data] | None = None


class PdPool(KeaModel):
    """Prefix delegation pool."""

    prefix: IPv6PrefixStr
    prefix_len: int = Field(ge=1, le=128)
    delegated_len: int = Field(ge=1, le=128)
    client_class: str | None = None
    require_client_classes: list[str] | None = None
    option_data: list[Option6Data] | None = None

    @model_validator(mode="after")
    def check_delegated_len(self) -> Self:
        if self.delegated_len < self.prefix_len:
            raise PydanticCustomError(
                ErrorCodes.SCHEMA_ERROR.name.lower(),
                "Delegated length must be greater than or equal to "
                "prefix length",
            )
        return self


class Relay6Config(KeaModel):
    ip_addresses: list[IPv6Str]


class Subnet6(KeaModel):
    """DHCPv6 subnet."""

    id: int | None = Field(None, ge=1)
    subnet: IPv6PrefixStr
    pools: list[Pool6] = Field(default_factory=list)
    pd_pools: list[PdPool] = Field(default_factory=list)
    option_data: list[Option6Data] | None = None
    client_class: str | None = None
    require_client_classes: list[str] | None = None
    preferred_lifetime: int | None = Field(None, ge=0)
    valid_lifetime: int | None = Field(None, ge=0)
    renew_timer: int | None = Field(None, ge=0)
    rebind_timer: int | None = Field(None, ge=0)
    rapid_commit: bool | None = None
    relay: Relay6Config | None = None


class ClientClass6(KeaModel):
    name: ClassNameStr
    test: str = Field(min_length=1)
    option_data: list[Option6Data] | None = None
    only_if_required: bool | None = None


class Reservation6(KeaModel):
    """DHCPv6 host reservation."""

    duid: DuidStr | None = None
    hw_address: MacStr | None = None
    ip_addresses: list[IPv6Str] | None = None
    prefixes: list[IPv6PrefixStr] | None = None
    hostname: str | None = None
    option_data: list[Option6Data] | None = None

    @model_validator(mode="after")
    def check_identifier(self) -> Self:
        if not self.duid and not self.hw_address:
            raise as_pydantic_error(
                MissingIdentifierError(
                    "Either DUID or MAC address must be specified",
                ),
            )
        return self
