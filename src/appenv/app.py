"""Process bootstrap: resolve the environment and build the app config."""

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .config.settings import Settings
from .domain.config import AppConfig
from .infrastructure.logging import setup_logging
from .merging.flags import build_app_flags
from .merging.merger import ConfigMerger, RuleSpec
from .resolution.network import IpProvider, get_server_ip
from .resolution.resolver import EnvironmentResolver, NetworkSpec


@dataclass(frozen=True)
class App:
    """Wiring container for the resolver and merger.

    Holds the Settings plus the collaborators that read the outside world,
    so tests can swap the IP provider without patching anything.
    """

    settings: Settings = field(default_factory=Settings)
    ip_provider: IpProvider = get_server_ip

    def load_config(
        self,
        rules: Mapping[str, RuleSpec],
        networks: Iterable[NetworkSpec] = (),
        source: Mapping[str, str] | None = None,
    ) -> AppConfig:
        """Resolve the environment and merge ``source`` into the app config.

        Args:
            rules: Rule per whitelisted key
            networks: CIDR to environment table for IP based resolution
            source: Variable source; a snapshot of ``os.environ`` if None

        Returns:
            The read-only app config

        Raises:
            EnvConfigError: Any resolution or merge failure. Treat it as
                fatal; the process shouldn't start with this config.
        """
        if source is None:
            source = dict(os.environ)

        resolver = EnvironmentResolver(networks, ip_provider=self.ip_provider)
        env = resolver.resolve(source.get(self.settings.env_key))
        flags = build_app_flags(env)
        return ConfigMerger().merge(env, flags, source, rules)


def create_app(
    settings: Settings | None = None,
    ip_provider: IpProvider | None = None,
) -> App:
    """Create an App, applying logging settings when they are given.

    Without ``settings`` the host's current logging setup is left as is.
    """
    if settings is None:
        settings = Settings()
    else:
        setup_logging(settings)
    return App(settings=settings, ip_provider=ip_provider or get_server_ip)


def load_config(
    rules: Mapping[str, RuleSpec],
    networks: Iterable[NetworkSpec] = (),
    *,
    source: Mapping[str, str] | None = None,
    settings: Settings | None = None,
    ip_provider: IpProvider | None = None,
) -> AppConfig:
    """Build the app config in one call.

    Example:
        >>> config = load_config(
        ...     {"PORT": {"required": True, "type": "Number"}},
        ...     [{"cidr": "10.117.0.0/16", "env": "live"}],
        ... )  # doctest: +SKIP
    """
    app = create_app(settings, ip_provider)
    return app.load_config(rules, networks, source)
