"""Shared constants and helpers for appenv tests."""

import typing as t

LIVE_IP = "10.117.3.4"
STAGING_IP = "10.118.0.20"
WORKSTATION_IP = "192.168.1.15"


def fixed_ip(address: str) -> t.Callable[[], str]:
    """Build an IP provider that always returns ``address``."""

    def provider() -> str:
        return address

    return provider
