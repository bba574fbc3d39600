"""Custom exceptions for environment resolution and config merging."""

import typing as t

if t.TYPE_CHECKING:
    from .environments import NetworkRange
    from .rules import VarType


class EnvConfigError(Exception):
    """Base exception for appenv errors.

    Every subclass describes a startup-time configuration defect. None of
    them are transient, so callers should fail fast instead of retrying.
    """

    pass


class AmbiguousEnvironmentError(EnvConfigError):
    """Raised when the server IP falls inside more than one network range."""

    def __init__(self, matches: t.Sequence["NetworkRange"]) -> None:
        self.matches = tuple(matches)
        described = "; ".join(f"{network.env} {network.cidr}" for network in matches)
        super().__init__(f"Server IP matches > 1 potential network: {described}")


class MissingRequiredVariableError(EnvConfigError):
    """Raised when a required var is absent from the source."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"Environment var validation: The var '{key}' is marked as "
            "required but has not been supplied."
        )


class InvalidVariableTypeError(EnvConfigError):
    """Raised when a supplied value can't be reliably read as its declared type."""

    def __init__(self, key: str, var_type: "VarType", value: t.Any) -> None:
        self.key = key
        self.var_type = var_type
        self.value = value
        super().__init__(
            f"Environment var supplied for '{key}' is defined as a "
            f"{var_type.label} but the value supplied ({value!r}) can't be "
            "reliably interpreted as one"
        )


class UnrecognizedTypeError(EnvConfigError):
    """Raised when a rule declares a type outside Boolean, Number and String.

    This is a programming error in the rule set, so it surfaces when the
    rule is built rather than when a value is looked up.
    """

    def __init__(self, type_tag: t.Any, key: str | None = None) -> None:
        self.type_tag = type_tag
        self.key = key
        tag_name = type_tag.__name__ if isinstance(type_tag, type) else str(type_tag)
        if key is None:
            message = f"Unrecognised variable type: '{tag_name}'"
        else:
            message = (
                f"Environment var '{key}' specifies an unrecognised type: "
                f"'{tag_name}'"
            )
        super().__init__(message)


class InvalidRuleError(EnvConfigError):
    """Raised when a rule mapping has unknown fields or badly typed values."""

    def __init__(self, key: str, detail: str) -> None:
        self.key = key
        self.detail = detail
        super().__init__(f"Rule for environment var '{key}' is invalid: {detail}")
