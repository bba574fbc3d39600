"""Domain layer - environments, rules, results and exceptions."""

from .config import (
    APP_ENV_KEY,
    PRODUCTION_FLAG,
    AppConfig,
    AppFlags,
    ConfigValue,
    FrozenMapping,
)
from .environments import (
    DEFAULT_ENVIRONMENT,
    PRODUCTION_ENVIRONMENTS,
    SUPPORTED_ENVIRONMENTS,
    Environment,
    NetworkRange,
)
from .exceptions import (
    AmbiguousEnvironmentError,
    EnvConfigError,
    InvalidRuleError,
    InvalidVariableTypeError,
    MissingRequiredVariableError,
    UnrecognizedTypeError,
)
from .rules import VariableRule, VarType

__all__ = [
    # Environments
    "DEFAULT_ENVIRONMENT",
    "Environment",
    "NetworkRange",
    "PRODUCTION_ENVIRONMENTS",
    "SUPPORTED_ENVIRONMENTS",
    # Rules
    "VarType",
    "VariableRule",
    # Results
    "APP_ENV_KEY",
    "PRODUCTION_FLAG",
    "AppConfig",
    "AppFlags",
    "ConfigValue",
    "FrozenMapping",
    # Exceptions
    "AmbiguousEnvironmentError",
    "EnvConfigError",
    "InvalidRuleError",
    "InvalidVariableTypeError",
    "MissingRequiredVariableError",
    "UnrecognizedTypeError",
]
