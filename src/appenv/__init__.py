"""appenv - resolve the deployment environment and build a validated config.

Usage:
    from appenv import load_config

    config = load_config(
        rules={
            "PORT": {"required": True, "type": "Number"},
            "DEBUG": {"default": False, "type": "Boolean"},
        },
        networks=[{"cidr": "10.117.0.0/16", "env": "live"}],
    )
    config["PORT"], config["IN_PRODUCTION"], config.environment
"""

from loguru import logger

from .app import App, create_app, load_config
from .config.settings import LogLevel, Settings, build_settings
from .domain import (
    APP_ENV_KEY,
    SUPPORTED_ENVIRONMENTS,
    AmbiguousEnvironmentError,
    AppConfig,
    AppFlags,
    EnvConfigError,
    Environment,
    InvalidRuleError,
    InvalidVariableTypeError,
    MissingRequiredVariableError,
    NetworkRange,
    UnrecognizedTypeError,
    VariableRule,
    VarType,
)
from .merging import ConfigMerger, build_app_flags, merge_config
from .resolution import EnvironmentResolver, determine_app_env, get_server_ip

# Library convention: stay quiet unless the host opts in via setup_logging
logger.disable(__name__)

__all__ = [
    # Bootstrap
    "App",
    "create_app",
    "load_config",
    # Settings
    "LogLevel",
    "Settings",
    "build_settings",
    # Resolution
    "EnvironmentResolver",
    "determine_app_env",
    "get_server_ip",
    # Merging
    "ConfigMerger",
    "build_app_flags",
    "merge_config",
    # Domain
    "APP_ENV_KEY",
    "SUPPORTED_ENVIRONMENTS",
    "AppConfig",
    "AppFlags",
    "Environment",
    "NetworkRange",
    "VarType",
    "VariableRule",
    # Exceptions
    "AmbiguousEnvironmentError",
    "EnvConfigError",
    "InvalidRuleError",
    "InvalidVariableTypeError",
    "MissingRequiredVariableError",
    "UnrecognizedTypeError",
]
