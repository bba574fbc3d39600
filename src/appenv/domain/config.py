"""Read-only result types: environment flags and the merged config."""

import typing as t
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .environments import SUPPORTED_ENVIRONMENTS, Environment

# Reserved key holding the active environment name
APP_ENV_KEY: t.Final = "APP_ENV"
PRODUCTION_FLAG: t.Final = "IN_PRODUCTION"

ConfigValue = str | int | float | bool | None

V = t.TypeVar("V")


class FrozenMapping(Mapping[str, V]):
    """Mapping that can't be changed once built.

    Entries are copied on construction and exposed through a
    ``MappingProxyType``, so neither the caller's dict nor consumers can
    alter them later.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, V] | None = None) -> None:
        self._data: Mapping[str, V] = MappingProxyType(dict(data or {}))

    def __getitem__(self, key: str) -> V:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._data)!r})"

    def to_dict(self) -> dict[str, V]:
        """Return a plain, mutable copy of the entries."""
        return dict(self._data)


class AppFlags(FrozenMapping[bool]):
    """One ``IN_<ENV>`` flag per supported environment plus ``IN_PRODUCTION``."""

    __slots__ = ()

    @property
    def active(self) -> list[str]:
        """Names of the flags that are set."""
        return [name for name, value in self.items() if value]


class AppConfig(FrozenMapping[ConfigValue]):
    """The merged, whitelisted configuration handed to the application."""

    __slots__ = ()

    @property
    def environment(self) -> Environment:
        return Environment(self[APP_ENV_KEY])

    @property
    def flags(self) -> AppFlags:
        flag_names = [env.flag_name for env in SUPPORTED_ENVIRONMENTS]
        flag_names.append(PRODUCTION_FLAG)
        return AppFlags({name: self[name] for name in flag_names if name in self})
