"""Schemas for DHCPv4 configuration fragments.

Field names follow Kea's kebab-case keys through aliases, unknown keys
are kept so a fragment survives a validate-and-dump round.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from functools import partial
from typing import Annotated, Any, Callable, Literal, Self, TypeVar

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .address import parse_pool
from .constants import (
    MAX_OPTION4_CODE,
    STANDARD_OPTION_CODES,
    VENDOR_HEX_OPTION_CODES,
)
from .dataclasses import OptionIdentifier, OptionInstance, make_identifier
from .enums import OptionSpace, OptionType
from .exceptions import DHCPError, StandardOptionMismatchError
from .formats import (
    ensure_cidr,
    ensure_hex,
    ensure_ipv4,
    ensure_mac,
    ensure_name,
)

_T = TypeVar("_T")


def to_kebab(name: str) -> str:
    return name.replace("_", "-")


def as_pydantic_error(err: DHCPError) -> PydanticCustomError:
    """Report domain error through pydantic, keeping its code as type."""
    return PydanticCustomError(err.code.name.lower(), str(err))


def domain_check(check: Callable[[_T], Any]) -> Callable[[_T], _T]:
    """Adapt raising format check to a pydantic validator."""

    def validator(value: _T) -> _T:
        try:
            check(value)
        except DHCPError as err:
            raise as_pydantic_error(err) from err
        return value

    return validator


_shared_network_name = partial(ensure_name, kind="shared network")

IPv4Str = Annotated[str, AfterValidator(domain_check(ensure_ipv4))]
CidrStr = Annotated[str, AfterValidator(domain_check(ensure_cidr))]
PoolStr = Annotated[str, AfterValidator(domain_check(parse_pool))]
MacStr = Annotated[str, AfterValidator(domain_check(ensure_mac))]
ClassNameStr = Annotated[str, AfterValidator(domain_check(ensure_name))]
SharedNetworkNameStr = Annotated[
    str,
    AfterValidator(domain_check(_shared_network_name)),
]


class KeaModel(BaseModel):
    """Base for Kea configuration entities."""

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="allow",
    )

    def to_kea(self) -> dict[str, Any]:
        """Dump with Kea keys, leaving out unset fields."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
        )


class OptionData(KeaModel):
    """Option instance attached to a scope."""

    name: str | None = None
    code: int | None = Field(None, ge=1, le=MAX_OPTION4_CODE)
    data: str = Field(min_length=1)
    space: OptionSpace = OptionSpace.DHCP4
    always_send: bool | None = None
    never_send: bool | None = None
    csv_format: bool | None = None

    @model_validator(mode="after")
    def check_identifier_and_payload(self) -> Self:
        """Require name or code, vendor options carry hex payload."""
        try:
            make_identifier(self.name, self.code)
            if self.code in VENDOR_HEX_OPTION_CODES:
                ensure_hex(self.data)
        except DHCPError as err:
            raise as_pydantic_error(err) from err

        return self

    @property
    def identifier(self) -> OptionIdentifier:
        return make_identifier(self.name, self.code)

    def to_instance(self) -> OptionInstance:
        return OptionInstance(
            identifier=self.identifier,
            data=self.data,
            space=self.space,
            always_send=bool(self.always_send),
            never_send=bool(self.never_send),
            csv_format=self.csv_format,
        )


class OptionDef(KeaModel):
    """Custom option definition."""

    name: str = Field(min_length=1)
    code: int = Field(ge=1, le=MAX_OPTION4_CODE)
    type: OptionType
    space: OptionSpace = OptionSpace.DHCP4
    record_types: str | None = None
    encapsulate: str | None = None
    array: bool | None = None

    @model_validator(mode="after")
    def check_standard_name(self) -> Self:
        """Reserved codes keep their canonical names."""
        standard_name = STANDARD_OPTION_CODES.get(self.code)
        if standard_name and self.name != standard_name:
            raise as_pydantic_error(
                StandardOptionMismatchError(
                    "Option code does not match standard option name",
                    value=self.code,
                ),
            )
        return self


class Pool(KeaModel):
    """Dynamic address pool."""

    pool: PoolStr
    client_class: str | None = None
    require_client_classes: list[str] | None = None
    option_data: list[OptionData] | None = None


class RelayAgentInfo(KeaModel):
    """Relay agent information (option 82) settings."""

    link_selection: CidrStr | None = None
    server_id_override: bool | None = None
    circuit_id: str | None = None
    remote_id: str | None = None


class SubnetSelection(KeaModel):
    giaddr_based: bool | None = None
    client_class_based: bool | None = None


class RelayConfig(KeaModel):
    ip_addresses: list[IPv4Str]


class Subnet(KeaModel):
    """DHCPv4 subnet."""

    id: int | None = Field(None, ge=1)
    subnet: CidrStr
    pools: list[Pool] = Field(default_factory=list)
    option_data: list[OptionData] | None = None
    client_class: str | None = None
    require_client_classes: list[str] | None = None
    shared_network_name: str | None = None
    relay: RelayConfig | None = None
    relay_agent_info: RelayAgentInfo | None = None
    subnet_selection: SubnetSelection | None = None


class ClientClass(KeaModel):
    """Client classification rule."""

    name: ClassNameStr
    test: str = Field(min_length=1)
    option_data: list[OptionData] | None = None
    only_if_required: bool | None = None
    boot_file_name: str | None = None
    server_hostname: str | None = None
    next_server: IPv4Str | None = None


class Reservation(KeaModel):
    """Host reservation."""

    hw_address: MacStr
    ip_address: IPv4Str
    hostname: str | None = None
    client_id: str | None = None
    option_data: list[OptionData] | None = None


class SharedNetwork(KeaModel):
    """Named group of subnets."""

    name: SharedNetworkNameStr
    subnet4: list[Subnet]
    option_data: list[OptionData] | None = None
    relay: RelayConfig | None = None
    client_class: str | None = None
    require_client_classes: list[str] | None = None


class LeaseDatabase(KeaModel):
    type: Literal["memfile", "mysql", "postgresql"]
    name: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None


class HooksLibrary(KeaModel):
    library: str
    parameters: dict[str, Any] | None = None


class Dhcp4Config(KeaModel):
    """DHCPv4 server configuration."""

    subnet4: list[Subnet] = Field(default_factory=list)
    shared_networks: list[SharedNetwork] | None = None
    option_def: list[OptionDef] | None = None
    option_data: list[OptionData] | None = None
    client_classes: list[ClientClass] | None = None
    reservations: list[Reservation] | None = None
    lease_database: LeaseDatabase | None = None
    hooks_libraries: list[HooksLibrary] | None = None


class TR069Params(BaseModel):
    """TR-069 option 43 parameters, camelCase keys as sent by forms."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acs_url: str | None = None
    provisioning_code: str | None = None
    username: str | None = None
    password: str | None = None
    periodic_inform_interval: int | None = None
    connection_request_url: str | None = None
    connection_request_username: str | None = None
    connection_request_password: str | None = None


class TR069Config(BaseModel):
    """TR-069 CPE management settings checked before encoding."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acs_url: AnyUrl
    provisioning_code: str | None = None
    username: str | None = None
    password: str | None = None
    periodic_inform_interval: int | None = None
    connection_request_url: AnyUrl | None = None
    connection_request_username: str | None = None
    connection_request_password: str | None = None
