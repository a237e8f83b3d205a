"""DHCP configuration fragment validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from itertools import combinations
from typing import Any, Callable, Iterable, Mapping, TypeVar

from pydantic import BaseModel, ValidationError

from config import Settings

from .address import cidr_range, ip_to_int, parse_pool
from .constants import (
    LOOPBACK_NETWORK,
    MULTICAST_START,
    STANDARD_OPTION_CODES,
    TEST_EXPRESSION_PATTERNS,
    VENDOR_HEX_OPTION_CODES,
)
from .dataclasses import OptionInstance, ValidationResult
from .enums import EntityKind
from .exceptions import (
    ConflictingOptionFlagsError,
    DHCPError,
    DuplicateClientClassError,
    DuplicateOptionCodeError,
    DuplicateOptionNameError,
    ErrorCodes,
    InvalidCidrError,
    InvalidPoolError,
    InvalidSuboptionError,
    OverlappingPoolsError,
    OverlappingSubnetsError,
    PoolOutOfRangeError,
    error_for_code,
)
from .ranges import (
    find_overlapping_pools,
    pool_within_cidr,
    pools_overlap,
    subnets_overlap,
)
from .schemas import (
    ClientClass,
    Dhcp4Config,
    OptionData,
    OptionDef,
    Pool,
    Reservation,
    SharedNetwork,
    Subnet,
    TR069Config,
)
from .schemas6 import (
    ClientClass6,
    Option6Data,
    Option6Def,
    PdPool,
    Reservation6,
    Subnet6,
)
from .utils import logger_wraps

_ModelT = TypeVar("_ModelT", bound=BaseModel)

OptionLike = OptionInstance | OptionData | Option6Data | Mapping[str, Any]


def _option_keys(option: OptionLike) -> tuple[str | None, int | None]:
    if isinstance(option, Mapping):
        return option.get("name"), option.get("code")
    return option.name, option.code


def find_duplicate_options(options: Iterable[OptionLike]) -> list[DHCPError]:
    """Collect duplicate codes and names of one scope in input order."""
    errors: list[DHCPError] = []
    used_codes: set[int] = set()
    used_names: set[str] = set()

    for option in options:
        name, code = _option_keys(option)

        if code and code in used_codes:
            errors.append(
                DuplicateOptionCodeError(
                    f"Duplicate option code: {code}",
                    value=code,
                ),
            )
        if name and name in used_names:
            errors.append(
                DuplicateOptionNameError(
                    f"Duplicate option name: {name}",
                    value=name,
                ),
            )

        if code:
            used_codes.add(code)
        if name:
            used_names.add(name)

    return errors


def validate_option_codes(options: Iterable[OptionLike]) -> list[str]:
    """Get duplicate option code and name messages of one scope.

    Codes and names are checked independently, an option known only
    by code never conflicts with one known only by name.
    """
    return [str(error) for error in find_duplicate_options(options)]


def is_valid_test_expression(expression: str) -> bool:
    """Basic shape check of a Kea classification expression."""
    return any(
        pattern.search(expression) for pattern in TEST_EXPRESSION_PATTERNS
    )


def _valid_cidr(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    try:
        cidr_range(value)
    except InvalidCidrError:
        return None
    return value


def _valid_pools(entries: Any) -> list[tuple[int, str]]:
    """Get pools of a raw subnet that parse, with their positions."""
    if not isinstance(entries, list):
        return []

    pools = []
    for index, entry in enumerate(entries):
        pool = entry.get("pool") if isinstance(entry, Mapping) else None
        if not isinstance(pool, str):
            continue
        try:
            parse_pool(pool)
        except InvalidPoolError:
            continue
        pools.append((index, pool))
    return pools


class ConfigValidator:
    """Validate DHCP configuration fragments before submission.

    Every ``validate_*`` method reports all problems at once in a
    :class:`ValidationResult` and never raises on bad user input.

    Example:
        >>> validator = ConfigValidator()
        >>> validator.validate_subnet({"subnet": "192.168.1.0/33"}).success
        False

    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Create validator."""
        self._settings = settings or Settings()

    @staticmethod
    def _parse(
        model: type[_ModelT],
        data: Any,
        result: ValidationResult,
    ) -> _ModelT | None:
        """Parse fragment, turning pydantic errors into result entries.

        :raises TypeError: fragment is neither a mapping nor ``model``
        """
        if isinstance(data, model):
            return data

        if not isinstance(data, Mapping):
            raise TypeError(
                f"{model.__name__} fragment must be a mapping, "
                f"got {type(data).__name__}",
            )

        try:
            return model.model_validate(data)
        except ValidationError as exc:
            for err in exc.errors():
                code = ErrorCodes.__members__.get(
                    err["type"].upper(),
                    ErrorCodes.SCHEMA_ERROR,
                )
                result.add_error(
                    error_for_code(code)(err["msg"], err.get("input")),
                    path=".".join(str(part) for part in err["loc"]),
                )
            return None

    def _finish(self, result: ValidationResult) -> ValidationResult:
        if self._settings.WARNINGS_AS_ERRORS and result.warnings:
            result.success = False
        return result

    @staticmethod
    def _check_option_list(
        options: list[OptionData] | list[Option6Data] | None,
        result: ValidationResult,
        path: str,
    ) -> None:
        if not options:
            return

        for index, option in enumerate(options):
            ConfigValidator._check_option(
                option,
                result,
                f"{path}.{index}",
            )

        for error in find_duplicate_options(options):
            result.add_error(error)

    @staticmethod
    def _check_option(
        option: OptionData | Option6Data,
        result: ValidationResult,
        path: str = "",
    ) -> None:
        prefix = f"{path}: " if path else ""

        if option.always_send and option.never_send:
            result.add_error(
                ConflictingOptionFlagsError(
                    "Cannot set both always-send and never-send",
                ),
                path=path,
            )

        if (
            isinstance(option, OptionData)
            and option.code in VENDOR_HEX_OPTION_CODES
            and option.data.startswith("0x")
        ):
            name = STANDARD_OPTION_CODES[option.code]
            result.add_warning(
                f"{prefix}Option {option.code} ({name}) data should be "
                "bare hex without 0x prefix",
            )

    @staticmethod
    def _check_pool_ranges(
        cidr: str,
        pools: list[tuple[int, str]],
        result: ValidationResult,
        path: str = "",
    ) -> None:
        """Check placement and overlaps of well-formed pools.

        :param list[tuple[int, str]] pools: pool strings with positions
        """
        prefix = f"{path}." if path else ""

        for index, pool in pools:
            if not pool_within_cidr(pool, cidr):
                result.add_error(
                    PoolOutOfRangeError(
                        f"Pool {pool} is not within subnet {cidr}",
                        value=pool,
                    ),
                    path=f"{prefix}pools.{index}.pool",
                )

        ranges = [pool for _, pool in pools]
        if pools_overlap(ranges):
            for first, second in find_overlapping_pools(ranges):
                result.add_error(
                    OverlappingPoolsError(
                        f"Pools overlap: {first} and {second}",
                        value=(first, second),
                    ),
                    path=path,
                )

    def _check_raw_subnet(
        self,
        data: Any,
        result: ValidationResult,
        path: str = "",
    ) -> str | None:
        """Range checks of a subnet rejected by its schema.

        Only the well-formed CIDR and pools take part, the malformed
        ones are already reported.

        :return str | None: subnet CIDR if well-formed
        """
        if not isinstance(data, Mapping):
            return None

        cidr = _valid_cidr(data.get("subnet"))
        if cidr is not None:
            self._check_pool_ranges(
                cidr,
                _valid_pools(data.get("pools")),
                result,
                path,
            )
        return cidr

    def _check_raw_subnets(
        self,
        entries: Any,
        result: ValidationResult,
        path: str,
    ) -> list[str]:
        if not isinstance(entries, list):
            return []

        cidrs = []
        for index, entry in enumerate(entries):
            cidr = self._check_raw_subnet(entry, result, f"{path}.{index}")
            if cidr is not None:
                cidrs.append(cidr)
        return cidrs

    def _check_raw_config(
        self,
        data: Mapping[str, Any],
        result: ValidationResult,
    ) -> None:
        shared_cidrs = []

        networks = data.get("shared-networks")
        for net_index, network in enumerate(
            networks if isinstance(networks, list) else [],
        ):
            if isinstance(network, Mapping):
                shared_cidrs.extend(
                    self._check_raw_subnets(
                        network.get("subnet4"),
                        result,
                        f"shared-networks.{net_index}.subnet4",
                    ),
                )

        cidrs = self._check_raw_subnets(data.get("subnet4"), result, "subnet4")
        self._check_subnet_overlaps(cidrs + shared_cidrs, result)

    def _check_subnet(
        self,
        subnet: Subnet,
        result: ValidationResult,
        path: str = "",
    ) -> None:
        prefix = f"{path}." if path else ""

        if not subnet.pools:
            result.add_warning(f"Subnet {subnet.subnet} has no pools")

        self._check_pool_ranges(
            subnet.subnet,
            [(index, pool.pool) for index, pool in enumerate(subnet.pools)],
            result,
            path,
        )

        for index, pool_entry in enumerate(subnet.pools):
            self._check_option_list(
                pool_entry.option_data,
                result,
                f"{prefix}pools.{index}.option-data",
            )

        self._check_option_list(
            subnet.option_data,
            result,
            f"{prefix}option-data",
        )

    def _check_client_class(
        self,
        client_class: ClientClass | ClientClass6,
        result: ValidationResult,
        path: str = "",
    ) -> None:
        prefix = f"{path}." if path else ""

        if not is_valid_test_expression(client_class.test):
            result.add_warning(
                f"{prefix}test: Test expression may have syntax issues",
            )

        self._check_option_list(
            client_class.option_data,
            result,
            f"{prefix}option-data",
        )

    def _check_reservation(
        self,
        reservation: Reservation,
        result: ValidationResult,
        path: str = "",
    ) -> None:
        prefix = f"{path}." if path else ""
        address = ip_to_int(reservation.ip_address)
        loopback_start, loopback_end = cidr_range(LOOPBACK_NETWORK)

        if loopback_start <= address <= loopback_end:
            result.add_warning(
                f"{prefix}ip-address: "
                "IPv4 address in loopback range (127.x.x.x)",
            )
        elif address >= ip_to_int(MULTICAST_START):
            result.add_warning(
                f"{prefix}ip-address: "
                "IPv4 address in multicast/reserved range (224+)",
            )

        self._check_option_list(
            reservation.option_data,
            result,
            f"{prefix}option-data",
        )

    @logger_wraps
    def validate_pool(
        self,
        data: Mapping[str, Any] | Pool,
    ) -> ValidationResult:
        """Validate pool range format."""
        result = ValidationResult()
        if pool := self._parse(Pool, data, result):
            self._check_option_list(pool.option_data, result, "option-data")
        return self._finish(result)

    @logger_wraps
    def validate_subnet(
        self,
        data: Mapping[str, Any] | Subnet,
    ) -> ValidationResult:
        """Validate subnet, its pools placement and option data."""
        result = ValidationResult()
        if subnet := self._parse(Subnet, data, result):
            self._check_subnet(subnet, result)
        else:
            self._check_raw_subnet(data, result)
        return self._finish(result)

    @logger_wraps
    def validate_reservation(
        self,
        data: Mapping[str, Any] | Reservation,
    ) -> ValidationResult:
        """Validate host reservation."""
        result = ValidationResult()
        if reservation := self._parse(Reservation, data, result):
            self._check_reservation(reservation, result)
        return self._finish(result)

    @logger_wraps
    def validate_client_class(
        self,
        data: Mapping[str, Any] | ClientClass,
    ) -> ValidationResult:
        """Validate client class."""
        result = ValidationResult()
        if client_class := self._parse(ClientClass, data, result):
            self._check_client_class(client_class, result)
        return self._finish(result)

    @logger_wraps
    def validate_option_def(
        self,
        data: Mapping[str, Any] | OptionDef,
    ) -> ValidationResult:
        """Validate option definition against the standard code table."""
        result = ValidationResult()
        self._parse(OptionDef, data, result)
        return self._finish(result)

    @logger_wraps
    def validate_option_data(
        self,
        data: Mapping[str, Any] | OptionData,
    ) -> ValidationResult:
        """Validate option instance."""
        result = ValidationResult()
        if option := self._parse(OptionData, data, result):
            self._check_option(option, result)
        return self._finish(result)

    @logger_wraps
    def validate_shared_network(
        self,
        data: Mapping[str, Any] | SharedNetwork,
    ) -> ValidationResult:
        """Validate shared network and every subnet in it."""
        result = ValidationResult()
        if network := self._parse(SharedNetwork, data, result):
            for index, subnet in enumerate(network.subnet4):
                self._check_subnet(subnet, result, f"subnet4.{index}")
            self._check_option_list(
                network.option_data,
                result,
                "option-data",
            )
            self._check_subnet_overlaps(
                [subnet.subnet for subnet in network.subnet4],
                result,
            )
        elif isinstance(data, Mapping):
            cidrs = self._check_raw_subnets(
                data.get("subnet4"),
                result,
                "subnet4",
            )
            self._check_subnet_overlaps(cidrs, result)
        return self._finish(result)

    @staticmethod
    def _check_subnet_overlaps(
        cidrs: list[str],
        result: ValidationResult,
    ) -> None:
        for first, second in combinations(cidrs, 2):
            if subnets_overlap(first, second):
                result.add_error(
                    OverlappingSubnetsError(
                        f"Subnets overlap: {first} and {second}",
                        value=(first, second),
                    ),
                )

    @logger_wraps
    def validate_dhcp_config(
        self,
        data: Mapping[str, Any] | Dhcp4Config,
    ) -> ValidationResult:
        """Validate whole DHCPv4 configuration for cross-scope conflicts.

        Same option code in global and subnet scope is allowed by Kea,
        it is reported as a warning.
        """
        result = ValidationResult()
        config = self._parse(Dhcp4Config, data, result)
        if config is None:
            if isinstance(data, Mapping):
                self._check_raw_config(data, result)
            return self._finish(result)

        subnets = list(config.subnet4)
        for net_index, network in enumerate(config.shared_networks or []):
            for index, subnet in enumerate(network.subnet4):
                self._check_subnet(
                    subnet,
                    result,
                    f"shared-networks.{net_index}.subnet4.{index}",
                )
            self._check_option_list(
                network.option_data,
                result,
                f"shared-networks.{net_index}.option-data",
            )
            subnets.extend(network.subnet4)

        for index, subnet in enumerate(config.subnet4):
            self._check_subnet(subnet, result, f"subnet4.{index}")

        for index, client_class in enumerate(config.client_classes or []):
            self._check_client_class(
                client_class,
                result,
                f"client-classes.{index}",
            )

        for index, reservation in enumerate(config.reservations or []):
            self._check_reservation(
                reservation,
                result,
                f"reservations.{index}",
            )

        self._check_option_list(config.option_data, result, "option-data")

        global_codes = {
            option.code for option in config.option_data or [] if option.code
        }
        for subnet in subnets:
            for option in subnet.option_data or []:
                if option.code and option.code in global_codes:
                    result.add_warning(
                        f"Option code {option.code} defined in both "
                        f"global and subnet {subnet.subnet}",
                    )

        class_names: set[str] = set()
        for client_class in config.client_classes or []:
            if client_class.name in class_names:
                result.add_error(
                    DuplicateClientClassError(
                        f"Duplicate client class name: {client_class.name}",
                        value=client_class.name,
                    ),
                )
            class_names.add(client_class.name)

        self._check_subnet_overlaps(
            [subnet.subnet for subnet in subnets],
            result,
        )

        return self._finish(result)

    @logger_wraps
    def validate_tr069(
        self,
        data: Mapping[str, Any] | TR069Config,
    ) -> ValidationResult:
        """Validate TR-069 ACS settings before encoding option 43."""
        result = ValidationResult()
        config = self._parse(TR069Config, data, result)
        if config is None or config.periodic_inform_interval is None:
            return self._finish(result)

        low = self._settings.TR069_MIN_INFORM_INTERVAL
        high = self._settings.TR069_MAX_INFORM_INTERVAL
        if not low <= config.periodic_inform_interval <= high:
            result.add_error(
                InvalidSuboptionError(
                    f"Periodic inform interval must be between "
                    f"{low} and {high} seconds",
                    value=config.periodic_inform_interval,
                ),
                path="periodicInformInterval",
            )

        return self._finish(result)

    @logger_wraps
    def validate_subnet6(
        self,
        data: Mapping[str, Any] | Subnet6,
    ) -> ValidationResult:
        """Validate DHCPv6 subnet shape, pools and PD pools."""
        result = ValidationResult()
        if subnet := self._parse(Subnet6, data, result):
            for index, pool in enumerate(subnet.pools):
                self._check_option_list(
                    pool.option_data,
                    result,
                    f"pools.{index}.option-data",
                )
            for index, pd_pool in enumerate(subnet.pd_pools):
                self._check_option_list(
                    pd_pool.option_data,
                    result,
                    f"pd-pools.{index}.option-data",
                )
            self._check_option_list(
                subnet.option_data,
                result,
                "option-data",
            )
        return self._finish(result)

    @logger_wraps
    def validate_pd_pool(
        self,
        data: Mapping[str, Any] | PdPool,
    ) -> ValidationResult:
        """Validate prefix delegation pool."""
        result = ValidationResult()
        if pd_pool := self._parse(PdPool, data, result):
            self._check_option_list(pd_pool.option_data, result, "option-data")
        return self._finish(result)

    @logger_wraps
    def validate_reservation6(
        self,
        data: Mapping[str, Any] | Reservation6,
    ) -> ValidationResult:
        """Validate DHCPv6 host reservation."""
        result = ValidationResult()
        if reservation := self._parse(Reservation6, data, result):
            self._check_option_list(
                reservation.option_data,
                result,
                "option-data",
            )
        return self._finish(result)

    @logger_wraps
    def validate_client_class6(
        self,
        data: Mapping[str, Any] | ClientClass6,
    ) -> ValidationResult:
        result = ValidationResult()
        if client_class := self._parse(ClientClass6, data, result):
            self._check_client_class(client_class, result)
        return self._finish(result)

    @logger_wraps
    def validate_option6_data(
        self,
        data: Mapping[str, Any] | Option6Data,
    ) -> ValidationResult:
        result = ValidationResult()
        if option := self._parse(Option6Data, data, result):
            self._check_option(option, result)
        return self._finish(result)

    @logger_wraps
    def validate_option6_def(
        self,
        data: Mapping[str, Any] | Option6Def,
    ) -> ValidationResult:
        result = ValidationResult()
        self._parse(Option6Def, data, result)
        return self._finish(result)

    validate_option_codes = staticmethod(validate_option_codes)

    @property
    def validators(
        self,
    ) -> dict[EntityKind, Callable[[Any], ValidationResult]]:
        """Validators by entity kind, for dispatch from forms."""
        return {
            EntityKind.POOL: self.validate_pool,
            EntityKind.SUBNET: self.validate_subnet,
            EntityKind.RESERVATION: self.validate_reservation,
            EntityKind.CLIENT_CLASS: self.validate_client_class,
            EntityKind.OPTION_DATA: self.validate_option_data,
            EntityKind.OPTION_DEF: self.validate_option_def,
            EntityKind.SHARED_NETWORK: self.validate_shared_network,
            EntityKind.DHCP_CONFIG: self.validate_dhcp_config,
            EntityKind.TR069: self.validate_tr069,
            EntityKind.SUBNET6: self.validate_subnet6,
            EntityKind.PD_POOL: self.validate_pd_pool,
            EntityKind.RESERVATION6: self.validate_reservation6,
            EntityKind.CLIENT_CLASS6: self.validate_client_class6,
            EntityKind.OPTION6_DATA: self.validate_option6_data,
            EntityKind.OPTION6_DEF: self.validate_option6_def,
        }

    def validate(
        self,
        kind: EntityKind | str,
        data: Mapping[str, Any],
    ) -> ValidationResult:
        """Validate fragment of the given kind."""
        return self.validators[EntityKind(kind)](data)
