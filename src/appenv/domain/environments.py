"""Environment names and the network ranges used to infer them."""

import enum
from ipaddress import IPv4Address, IPv4Network, ip_network
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Environment(enum.StrEnum):
    """Deployment environments an app can run in."""

    LIVE = "live"
    STAGING = "staging"
    TESTING = "testing"
    DEVELOPMENT = "development"

    @property
    def flag_name(self) -> str:
        """Name of the boolean flag for this environment, e.g. ``IN_LIVE``."""
        return f"IN_{self.value.upper()}"

    @classmethod
    def from_name(cls, name: str | None) -> "Environment | None":
        """Look up a supported environment by exact name, None if unsupported."""
        if name is None:
            return None
        try:
            return cls(name)
        except ValueError:
            return None


SUPPORTED_ENVIRONMENTS: Final[tuple[Environment, ...]] = tuple(Environment)

# Environments covered by the IN_PRODUCTION flag
PRODUCTION_ENVIRONMENTS: Final = frozenset({Environment.LIVE, Environment.STAGING})

DEFAULT_ENVIRONMENT: Final = Environment.DEVELOPMENT


class NetworkRange(BaseModel):
    """A CIDR block and the environment that servers inside it belong to.

    ``env`` stays a plain string so a range table can mention environments
    this package does not support; the resolver skips those.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cidr: IPv4Network = Field(description="IPv4 network block, e.g. 10.117.0.0/16")
    env: str = Field(description="Environment name for hosts inside the block")

    @field_validator("cidr", mode="before")
    @classmethod
    def _parse_cidr(cls, value: Any) -> Any:
        # Host bits are allowed: '72.67.5.0/16' means the 72.67.0.0/16 block
        if isinstance(value, str):
            return ip_network(value.strip(), strict=False)
        return value

    @property
    def environment(self) -> Environment | None:
        """The matching supported Environment, if any."""
        return Environment.from_name(self.env)

    @property
    def is_supported(self) -> bool:
        return self.environment is not None

    def contains(self, address: str | IPv4Address) -> bool:
        """Check whether an IPv4 address falls inside this block."""
        return IPv4Address(address) in self.cidr

    @classmethod
    def from_option(cls, option: str) -> "NetworkRange":
        """Create a range from '<cidr>=<env>' strings."""
        if "=" not in option:
            raise ValueError("Network must be in format '<cidr>=<env>'")
        cidr_part, env_part = option.split("=", 1)
        return cls(cidr=cidr_part, env=env_part.strip())
