"""Data classes for DHCP configuration.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from typing import Any

from .exceptions import DHCPError, ErrorCodes, MissingIdentifierError


@dataclass(frozen=True)
class ByName:
    """Option identified by name only."""

    name: str


@dataclass(frozen=True)
class ByCode:
    """Option identified by code only."""

    code: int


@dataclass(frozen=True)
class Both:
    """Option identified by name and code."""

    name: str
    code: int


OptionIdentifier = ByName | ByCode | Both


def make_identifier(
    name: str | None = None,
    code: int | None = None,
) -> OptionIdentifier:
    """Build option identifier, at least one of name or code is required.

    Empty name and zero code count as absent.
    """
    match (name or None, code or None):
        case (None, None):
            raise MissingIdentifierError(
                "Either option name or code must be specified",
            )
        case (str() as name_, None):
            return ByName(name_)
        case (None, int() as code_):
            return ByCode(code_)
        case (str() as name_, int() as code_):
            return Both(name_, code_)

    raise TypeError(f"Unsupported option identifier: {name!r}, {code!r}")


@dataclass(frozen=True)
class OptionInstance:
    """Option value attached to a scope."""

    identifier: OptionIdentifier
    data: str
    space: str = "dhcp4"
    always_send: bool = False
    never_send: bool = False
    csv_format: bool | None = None

    @property
    def name(self) -> str | None:
        match self.identifier:
            case ByName(name=name) | Both(name=name):
                return name
        return None

    @property
    def code(self) -> int | None:
        match self.identifier:
            case ByCode(code=code) | Both(code=code):
                return code
        return None


@dataclass(frozen=True)
class Suboption:
    """Single TLV sub-option."""

    type: int
    value: bytes


@dataclass
class KeaOptionData:
    """Kea ``option-data`` entry."""

    data: str
    name: str | None = None
    code: int | None = None
    space: str = "dhcp4"
    always_send: bool = False
    never_send: bool = False
    csv_format: bool | None = None


@dataclass
class KeaCommandRequest:
    """Control agent command envelope."""

    command: str
    service: list[str]
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Accumulated outcome of validating one configuration fragment."""

    success: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    codes: list[ErrorCodes] = field(default_factory=list)

    def add_error(self, error: DHCPError, path: str = "") -> None:
        """Record blocking error."""
        self.errors.append(f"{path}: {error}" if path else str(error))
        self.codes.append(error.code)
        self.success = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
