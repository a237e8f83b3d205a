"""Kea control agent command envelopes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Any, Mapping

from config import Settings

from .dataclasses import KeaCommandRequest, KeaOptionData, OptionInstance
from .enums import KeaDHCPCommands, KeaService
from .retorts import command_retort, option_data_retort
from .schemas import Dhcp4Config, Reservation, Subnet
from .schemas6 import Subnet6


def build_command(
    command: KeaDHCPCommands | str,
    arguments: Mapping[str, Any] | None = None,
    service: KeaService | str | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Wrap arguments into ``{command, service, arguments}`` envelope.

    :param str | None service: target daemon, configured default if None
    """
    if service is None:
        service = (settings or Settings()).DEFAULT_SERVICE

    request = KeaCommandRequest(
        command=str(command),
        service=[str(service)],
        arguments=dict(arguments or {}),
    )
    return command_retort.dump(request)


def dump_option(option: OptionInstance) -> dict[str, Any]:
    """Get Kea ``option-data`` entry, unset flags are left out."""
    return option_data_retort.dump(
        KeaOptionData(
            data=option.data,
            name=option.name,
            code=option.code,
            space=str(option.space),
            always_send=option.always_send,
            never_send=option.never_send,
            csv_format=option.csv_format,
        ),
    )


def dump_subnet(subnet: Subnet | Subnet6) -> dict[str, Any]:
    return subnet.to_kea()


def dump_reservation(reservation: Reservation) -> dict[str, Any]:
    return reservation.to_kea()


def subnet_add_command(subnet: Subnet) -> dict[str, Any]:
    return build_command(
        KeaDHCPCommands.SUBNET4_ADD,
        {"subnet4": [dump_subnet(subnet)]},
        service=KeaService.DHCP4,
    )


def subnet6_add_command(subnet: Subnet6) -> dict[str, Any]:
    return build_command(
        KeaDHCPCommands.SUBNET6_ADD,
        {"subnet6": [dump_subnet(subnet)]},
        service=KeaService.DHCP6,
    )


def reservation_add_command(
    reservation: Reservation,
    subnet_id: int,
) -> dict[str, Any]:
    """Build host_cmds ``reservation-add`` for a validated reservation."""
    payload = dump_reservation(reservation)
    payload["subnet-id"] = subnet_id

    return build_command(
        KeaDHCPCommands.RESERVATION_ADD,
        {"reservation": payload},
        service=KeaService.DHCP4,
    )


def config_test_command(config: Dhcp4Config) -> dict[str, Any]:
    """Ask Kea to check a full configuration without applying it."""
    return build_command(
        KeaDHCPCommands.CONFIG_TEST,
        {"Dhcp4": config.to_kea()},
        service=KeaService.DHCP4,
    )
