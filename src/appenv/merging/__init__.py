"""Flag derivation and config merging."""

from .coercion import coerce, parse_int_prefix, split_int_prefix
from .flags import build_app_flags
from .merger import ConfigMerger, RuleSpec, merge_config, to_variable_rule

__all__ = [
    "ConfigMerger",
    "RuleSpec",
    "build_app_flags",
    "coerce",
    "merge_config",
    "parse_int_prefix",
    "split_int_prefix",
    "to_variable_rule",
]
