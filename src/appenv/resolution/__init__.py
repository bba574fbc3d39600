"""Environment resolution from explicit values and the server IP."""

from .network import NO_ADDRESS, IpProvider, get_server_ip
from .resolver import EnvironmentResolver, NetworkSpec, determine_app_env

__all__ = [
    "NO_ADDRESS",
    "EnvironmentResolver",
    "IpProvider",
    "NetworkSpec",
    "determine_app_env",
    "get_server_ip",
]
