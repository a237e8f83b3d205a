"""Retorts for Kea control agent payloads.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from adaptix import NameStyle, Retort, name_mapping

from .dataclasses import KeaCommandRequest, KeaOptionData

base_retort = Retort()

option_data_retort = base_retort.extend(
    recipe=[
        name_mapping(
            KeaOptionData,
            name_style=NameStyle.LOWER_KEBAB,
            omit_default=True,
        ),
    ],
)

command_retort = base_retort.extend(
    recipe=[
        name_mapping(
            KeaCommandRequest,
            only=["command", "service", "arguments"],
        ),
    ],
)
