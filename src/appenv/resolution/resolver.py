"""Works out which environment the current process runs in."""

import typing as t
from collections.abc import Iterable, Mapping

from ..domain.environments import DEFAULT_ENVIRONMENT, Environment, NetworkRange
from ..domain.exceptions import AmbiguousEnvironmentError
from ..infrastructure.logging import get_logger
from .network import IpProvider, get_server_ip

if t.TYPE_CHECKING:
    import loguru

NetworkSpec = NetworkRange | Mapping[str, t.Any]


def _to_network_range(network: NetworkSpec) -> NetworkRange:
    if isinstance(network, NetworkRange):
        return network
    return NetworkRange.model_validate(network)


class EnvironmentResolver:
    """Resolve the app environment from an explicit value or the server IP.

    Networks are given as a table such as::

        [
            NetworkRange(cidr="72.67.5.0/16", env="live"),
            {"cidr": "72.68.5.0/16", "env": "staging"},
        ]

    Resolution order:
    - A supplied environment that names a supported environment wins.
    - Otherwise the server IP is matched against the network table; a
      single match decides the environment.
    - With no match the environment is development.

    Matching more than one network is a configuration error.
    """

    def __init__(
        self,
        networks: Iterable[NetworkSpec] = (),
        ip_provider: IpProvider = get_server_ip,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the resolver.

        Args:
            networks: CIDR to environment table, in priority-free order
            ip_provider: Callable returning the server's IPv4 address
            logger: Logger for resolution decisions
        """
        self.networks: tuple[NetworkRange, ...] = tuple(
            _to_network_range(network) for network in networks
        )
        self._ip_provider = ip_provider
        self._logger = logger

    def resolve(self, supplied: str | None = None) -> Environment:
        """Determine the environment.

        Args:
            supplied: Explicit environment name, usually ``$APP_ENV``

        Returns:
            The resolved Environment

        Raises:
            AmbiguousEnvironmentError: If the server IP is inside more than
                one supported network
        """
        explicit = Environment.from_name(supplied)
        if explicit is not None:
            self._logger.debug(f"APP_ENV specified by the process as {explicit}")
            return explicit

        if supplied is not None:
            self._logger.debug(
                f"Ignoring unsupported APP_ENV '{supplied}'; checking server IP"
            )

        server_ip = self._ip_provider()
        candidates = self.matching_networks(server_ip)

        if len(candidates) > 1:
            raise AmbiguousEnvironmentError(candidates)

        if len(candidates) == 1:
            network = candidates[0]
            self._logger.debug(
                f"APP_ENV determined from server IP as {network.env} "
                f"({server_ip} is within {network.cidr})"
            )
            return Environment(network.env)

        self._logger.debug(f"APP_ENV returning as {DEFAULT_ENVIRONMENT}")
        return DEFAULT_ENVIRONMENT

    def matching_networks(self, server_ip: str) -> list[NetworkRange]:
        """Distinct supported networks that contain ``server_ip``, in table order."""
        matches: list[NetworkRange] = []
        for network in self.networks:
            if not network.is_supported or not network.contains(server_ip):
                continue
            if network not in matches:
                matches.append(network)
        return matches


def determine_app_env(
    supplied: str | None,
    networks: Iterable[NetworkSpec] = (),
    *,
    ip_provider: IpProvider = get_server_ip,
    logger: "loguru.Logger" = get_logger(__name__),
) -> Environment:
    """Resolve the environment in one call; see EnvironmentResolver."""
    resolver = EnvironmentResolver(networks, ip_provider=ip_provider, logger=logger)
    return resolver.resolve(supplied)
