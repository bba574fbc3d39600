"""Host network address lookup."""

import socket
import typing as t
from ipaddress import IPv4Address

import psutil

from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

# Matches no network range, so unknown hosts resolve to development
NO_ADDRESS: t.Final = "0.0.0.0"

IpProvider = t.Callable[[], str]


def get_server_ip(logger: "loguru.Logger" = get_logger(__name__)) -> str:
    """Return the first external IPv4 address of this server.

    Only IPv4 is considered and a single external address per server is
    assumed. Loopback addresses are skipped.

    Returns:
        The address as a dotted quad, or ``0.0.0.0`` when there is none
    """
    for interface, addresses in psutil.net_if_addrs().items():
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            if IPv4Address(address.address).is_loopback:
                continue
            logger.debug(f"Server IP identified as {address.address} ({interface})")
            return address.address

    logger.debug(f"No external IPv4 address found; using {NO_ADDRESS}")
    return NO_ADDRESS
