#!/usr/bin/env python3
"""
02_resolution_diagnostics.py - Watch how the environment is chosen

Demonstrates: EnvironmentResolver with diagnostics enabled and a fixed IP
"""
from appenv import EnvironmentResolver, LogLevel, NetworkRange, build_app_flags
from appenv.infrastructure.logging import configure_logger


def main() -> None:
    """Resolve a few hosts against the same network table."""
    configure_logger(level=LogLevel.DEBUG, diagnostics=True)

    networks = [
        NetworkRange(cidr="10.117.0.0/16", env="live"),
        NetworkRange(cidr="10.118.0.0/16", env="staging"),
    ]

    for server_ip in ["10.117.3.4", "10.118.9.9", "192.168.1.15"]:
        resolver = EnvironmentResolver(networks, ip_provider=lambda ip=server_ip: ip)
        env = resolver.resolve()
        active = build_app_flags(env).active
        print(f"{server_ip:>15} -> {env} {active}")


if __name__ == "__main__":
    main()
