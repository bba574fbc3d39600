"""CLI state container."""

import os
from collections.abc import Mapping

from ..app import App
from ..config.settings import Settings
from ..resolution.network import IpProvider, get_server_ip


class CLIState:
    """Application state container for CLI commands.

    Holds Settings, the IP provider and the variable source so commands
    can be exercised against fixed values in tests.
    """

    def __init__(
        self,
        settings: Settings,
        ip_provider: IpProvider = get_server_ip,
        source: Mapping[str, str] | None = None,
    ):
        self.settings = settings
        self.ip_provider = ip_provider
        self.source: Mapping[str, str] = (
            source if source is not None else dict(os.environ)
        )

    def create_app(self) -> App:
        return App(settings=self.settings, ip_provider=self.ip_provider)
