"""Merges, validates and defaults config vars from a variable source."""

import typing as t
from collections.abc import Mapping

from pydantic import ValidationError

from ..domain.config import APP_ENV_KEY, AppConfig, AppFlags, ConfigValue
from ..domain.environments import Environment
from ..domain.exceptions import (
    InvalidRuleError,
    MissingRequiredVariableError,
    UnrecognizedTypeError,
)
from ..domain.rules import VariableRule, VarType
from ..infrastructure.logging import get_logger
from .coercion import coerce, split_int_prefix

if t.TYPE_CHECKING:
    import loguru

RuleSpec = VariableRule | Mapping[str, t.Any]


def to_variable_rule(key: str, rule: RuleSpec) -> VariableRule:
    """Build a VariableRule from a plain mapping, naming the key on failure.

    Raises:
        UnrecognizedTypeError: If the rule names an unknown type
        InvalidRuleError: If the rule has unknown fields or bad values
    """
    if isinstance(rule, VariableRule):
        return rule
    try:
        return VariableRule.model_validate(rule)
    except UnrecognizedTypeError as exc:
        raise UnrecognizedTypeError(exc.type_tag, key=key) from exc
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'rule'}: "
            f"{error['msg']}"
            for error in exc.errors()
        )
        raise InvalidRuleError(key, detail) from exc


class ConfigMerger:
    """Build the whitelisted app config from rules and a variable source.

    Only keys named by a rule make it into the config. The environment
    flags and ``APP_ENV`` are added last and overwrite rule keys of the
    same name.

    The source is read, never modified. Any failure aborts the merge, so a
    partially built config is never returned.
    """

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self._logger = logger

    def merge(
        self,
        env: Environment | str,
        flags: AppFlags | Mapping[str, bool],
        source: Mapping[str, str],
        rules: Mapping[str, RuleSpec],
    ) -> AppConfig:
        """Merge the source into a config according to ``rules``.

        Args:
            env: The resolved environment or its name
            flags: Environment flags, see build_app_flags
            source: Variable source, usually the process environment
            rules: Rule per whitelisted key

        Returns:
            The read-only merged config

        Raises:
            MissingRequiredVariableError: If a required var isn't supplied
            InvalidVariableTypeError: If a supplied var can't be coerced
            UnrecognizedTypeError: If a rule mapping names an unknown type
            InvalidRuleError: If a rule mapping has unknown fields or bad values
            ValueError: If env is not a supported environment name
        """
        env = Environment(env)
        variable_rules = {
            key: to_variable_rule(key, rule) for key, rule in rules.items()
        }

        config: dict[str, ConfigValue] = {}
        for key, rule in variable_rules.items():
            config[key] = self._resolve_var(key, rule, source)

        reserved = {**flags, APP_ENV_KEY: env.value}
        for key in sorted(reserved.keys() & config.keys()):
            self._logger.warning(
                f"{key} is set by a rule but is reserved; "
                f"overwriting with {reserved[key]!r}"
            )
        config.update(reserved)

        self._logger.debug(f"Final config: {config}")
        return AppConfig(config)

    def _resolve_var(
        self, key: str, rule: VariableRule, source: Mapping[str, str]
    ) -> ConfigValue:
        if key not in source:
            if rule.has_default:
                self._logger.debug(f"{key} not set; defaulting to {rule.default!r}")
                return rule.default
            if rule.required:
                self._logger.debug(f"{key} not set and required; raising error")
                raise MissingRequiredVariableError(key)
            self._logger.debug(f"{key} not set and has no default")
            return None

        supplied = source[key]
        self._logger.debug(f"{key} setting from source: '{supplied}'")

        if rule.type is None:
            return supplied

        value = coerce(key, supplied, rule.type)
        if rule.type is VarType.NUMBER:
            prefix = split_int_prefix(supplied)
            if prefix is not None and prefix[1]:
                self._logger.warning(
                    f"{key} value '{supplied}' read as {value}; "
                    f"ignoring trailing '{prefix[1]}'"
                )
        return value


def merge_config(
    env: Environment | str,
    flags: AppFlags | Mapping[str, bool],
    source: Mapping[str, str],
    rules: Mapping[str, RuleSpec],
    *,
    logger: "loguru.Logger" = get_logger(__name__),
) -> AppConfig:
    """Merge in one call; see ConfigMerger."""
    return ConfigMerger(logger=logger).merge(env, flags, source, rules)
