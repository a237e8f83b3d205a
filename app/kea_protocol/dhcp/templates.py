"""Option templates for common vendor equipment and services.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from .dataclasses import OptionInstance, make_identifier
from .enums import ParameterType, TemplateCategory
from .exceptions import TemplateNotFoundError
from .schemas import TR069Params
from .vendor_options import encode_raw_hex, encode_tr069_suboptions

Renderer = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class TemplateParameter:
    """Operator input required by a template."""

    key: str
    label: str
    type: ParameterType = ParameterType.STRING
    required: bool = False
    placeholder: str | None = None
    choices: tuple[str, ...] = ()
    default: Any = None


@dataclass(frozen=True)
class TemplateOption:
    """Option recipe, ``data`` is either literal or rendered."""

    data: str | Renderer
    name: str | None = None
    code: int | None = None
    always_send: bool = False

    def render(self, params: Mapping[str, Any]) -> str:
        if callable(self.data):
            return self.data(params)
        return self.data


@dataclass(frozen=True)
class OptionTemplate:
    """Reusable option preset."""

    id: str
    name: str
    description: str
    category: TemplateCategory
    options: tuple[TemplateOption, ...]
    parameters: tuple[TemplateParameter, ...] = field(default_factory=tuple)
    vendor: str | None = None


def _param(key: str) -> Renderer:
    def render(params: Mapping[str, Any]) -> str:
        value = params.get(key)
        return "" if value is None else str(value)

    return render


_TR069_FIELDS = (
    "acsUrl",
    "provisioningCode",
    "username",
    "password",
    "periodicInformInterval",
)


def _raw_hex(key: str) -> Renderer:
    def render(params: Mapping[str, Any]) -> str:
        return encode_raw_hex(_param(key)(params))

    return render


def _tr069(keys: tuple[str, ...]) -> Renderer:
    def render(params: Mapping[str, Any]) -> str:
        return encode_tr069_suboptions(
            TR069Params.model_validate(
                {key: params.get(key) for key in keys},
            ),
        )

    return render


_ACS_URL = TemplateParameter(
    key="acsUrl",
    label="ACS URL",
    required=True,
    placeholder="https://acs.example.com:7547/acs",
)

TR069_TEMPLATES = (
    OptionTemplate(
        id="tr069-basic",
        name="TR-069 Basic ACS",
        description="Basic TR-069 configuration with ACS URL only",
        vendor="Generic TR-069",
        category=TemplateCategory.TR069,
        options=(
            TemplateOption(
                code=43,
                data=_tr069(("acsUrl",)),
                always_send=True,
            ),
        ),
        parameters=(_ACS_URL,),
    ),
    OptionTemplate(
        id="tr069-full",
        name="TR-069 Full Configuration",
        description="Complete TR-069 setup with credentials and provisioning",
        vendor="Generic TR-069",
        category=TemplateCategory.TR069,
        options=(
            TemplateOption(
                code=43,
                data=_tr069(_TR069_FIELDS),
                always_send=True,
            ),
        ),
        parameters=(
            _ACS_URL,
            TemplateParameter(
                key="provisioningCode",
                label="Provisioning Code",
                placeholder="PROV123",
            ),
            TemplateParameter(
                key="username",
                label="CPE Username",
                placeholder="cpe_user",
            ),
            TemplateParameter(
                key="password",
                label="CPE Password",
                placeholder="cpe_password",
            ),
            TemplateParameter(
                key="periodicInformInterval",
                label="Periodic Inform Interval (seconds)",
                type=ParameterType.NUMBER,
                default=3600,
            ),
        ),
    ),
)

PXE_TEMPLATES = (
    OptionTemplate(
        id="pxe-basic",
        name="PXE Boot Basic",
        description="Basic PXE boot with TFTP server and boot file",
        category=TemplateCategory.PXE,
        options=(
            TemplateOption(name="tftp-server-name", data=_param("tftpServer")),
            TemplateOption(name="boot-file-name", data=_param("bootFile")),
        ),
        parameters=(
            TemplateParameter(
                key="tftpServer",
                label="TFTP Server IP",
                required=True,
                placeholder="10.0.0.5",
            ),
            TemplateParameter(
                key="bootFile",
                label="Boot File Name",
                required=True,
                placeholder="pxelinux.0",
            ),
        ),
    ),
    OptionTemplate(
        id="pxe-uefi",
        name="PXE Boot UEFI",
        description="PXE boot configuration for UEFI systems",
        category=TemplateCategory.PXE,
        options=(
            TemplateOption(name="tftp-server-name", data=_param("tftpServer")),
            TemplateOption(name="boot-file-name", data=_param("bootFile")),
            TemplateOption(code=60, data="PXEClient"),
        ),
        parameters=(
            TemplateParameter(
                key="tftpServer",
                label="TFTP Server IP",
                required=True,
                placeholder="10.0.0.5",
            ),
            TemplateParameter(
                key="bootFile",
                label="UEFI Boot File",
                required=True,
                placeholder="bootx64.efi",
            ),
        ),
    ),
)

VENDOR_TEMPLATES = (
    OptionTemplate(
        id="unifi-controller",
        name="Ubiquiti UniFi Controller",
        description="UniFi device provisioning with controller inform URL",
        vendor="Ubiquiti",
        category=TemplateCategory.VENDOR,
        options=(
            TemplateOption(
                code=43,
                data=_raw_hex("informUrl"),
                always_send=True,
            ),
        ),
        parameters=(
            TemplateParameter(
                key="informUrl",
                label="Controller Inform URL",
                required=True,
                placeholder="http://unifi.example.com:8080/inform",
            ),
        ),
    ),
    OptionTemplate(
        id="mikrotik-capsman",
        name="MikroTik CAPsMAN",
        description="MikroTik wireless device provisioning",
        vendor="MikroTik",
        category=TemplateCategory.VENDOR,
        options=(TemplateOption(code=138, data=_param("capsmanAddress")),),
        parameters=(
            TemplateParameter(
                key="capsmanAddress",
                label="CAPsMAN Address",
                required=True,
                placeholder="10.0.0.1",
            ),
        ),
    ),
)

NETWORK_TEMPLATES = (
    OptionTemplate(
        id="ntp-servers",
        name="NTP Time Servers",
        description="Network Time Protocol server configuration",
        category=TemplateCategory.NETWORK,
        options=(
            TemplateOption(name="ntp-servers", data=_param("ntpServers")),
        ),
        parameters=(
            TemplateParameter(
                key="ntpServers",
                label="NTP Server IPs (comma-separated)",
                required=True,
                placeholder="10.0.0.1,10.0.0.2",
            ),
        ),
    ),
    OptionTemplate(
        id="dns-servers",
        name="DNS Servers",
        description="Domain Name System server configuration",
        category=TemplateCategory.NETWORK,
        options=(
            TemplateOption(
                name="domain-name-servers",
                data=_param("dnsServers"),
            ),
            TemplateOption(name="domain-search", data=_param("domainSearch")),
        ),
        parameters=(
            TemplateParameter(
                key="dnsServers",
                label="DNS Server IPs (comma-separated)",
                required=True,
                placeholder="8.8.8.8,8.8.4.4",
            ),
            TemplateParameter(
                key="domainSearch",
                label="Domain Search List",
                placeholder="example.com,local",
            ),
        ),
    ),
)

ALL_TEMPLATES = (
    *TR069_TEMPLATES,
    *PXE_TEMPLATES,
    *VENDOR_TEMPLATES,
    *NETWORK_TEMPLATES,
)


def get_template(template_id: str) -> OptionTemplate:
    """Get template by id.

    :raises TemplateNotFoundError: unknown id
    """
    for template in ALL_TEMPLATES:
        if template.id == template_id:
            return template

    raise TemplateNotFoundError(
        f"Option template {template_id} not found",
        value=template_id,
    )


def _is_integer(value: Any) -> bool:
    """Whole number, as int, integral float or decimal string."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer()
    try:
        int(value)
    except (TypeError, ValueError):
        return False
    return True


def validate_template_parameters(
    template: OptionTemplate,
    params: Mapping[str, Any],
) -> list[str]:
    """Check operator parameters of a template."""
    errors: list[str] = []

    for param in template.parameters:
        value = params.get(param.key)

        if param.required and not value:
            errors.append(f"{param.label} is required")

        if (
            param.type == ParameterType.NUMBER
            and value
            and not _is_integer(value)
        ):
            errors.append(f"{param.label} must be a number")

    return errors


def apply_template(
    template: OptionTemplate,
    params: Mapping[str, Any],
) -> list[OptionInstance]:
    """Render template into option instances.

    Options that render to empty data are skipped, Kea rejects them.
    """
    instances = []

    for option in template.options:
        data = option.render(params)
        if not data:
            continue

        instances.append(
            OptionInstance(
                identifier=make_identifier(option.name, option.code),
                data=data,
                always_send=option.always_send,
            ),
        )

    return instances
