import enum
from dataclasses import dataclass, fields
from typing import Any


class LogLevel(enum.StrEnum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings for appenv itself, not for the app it configures.

    Rationale: the diagnostic channel is silent by default so that
    importing appenv never adds output to a host application; callers
    opt in through ``diagnostics``.
    """

    log_level: LogLevel = LogLevel.INFO
    diagnostics: bool = False
    # Source key holding the explicit environment override
    env_key: str = "APP_ENV"


def build_settings(**overrides: Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets CLI options default to None and fall back to Settings defaults.

    Raises:
        TypeError: If an override names an unknown setting
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
