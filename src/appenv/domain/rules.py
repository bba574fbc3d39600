"""Declarative rules describing each whitelisted config var."""

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import UnrecognizedTypeError

# Scalar values a default may hold
Primitive = str | int | float | bool


class VarType(enum.StrEnum):
    """Types a supplied var can be coerced to."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"

    @property
    def label(self) -> str:
        """Display name used in error messages, e.g. 'Boolean'."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, tag: Any) -> "VarType":
        """Resolve a type tag to a VarType.

        Accepts a VarType, its name in any case ('Boolean', 'number') or
        one of the builtins ``bool``, ``int`` and ``str``.

        Raises:
            UnrecognizedTypeError: If the tag names any other type
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, type) and tag in _BUILTIN_TYPES:
            return _BUILTIN_TYPES[tag]
        if isinstance(tag, str):
            try:
                return cls(tag.strip().lower())
            except ValueError:
                pass
        raise UnrecognizedTypeError(tag)


_BUILTIN_TYPES: dict[type, VarType] = {
    bool: VarType.BOOLEAN,
    int: VarType.NUMBER,
    str: VarType.STRING,
}


class VariableRule(BaseModel):
    """How a single config var is validated, defaulted and coerced.

    A default is only used when the var is missing from the source and is
    stored as given, without coercion. Whether a default was declared is
    tracked apart from its value, so ``default=None`` is a real default.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: bool = Field(
        default=False,
        description="Fail the merge if the var is not supplied",
    )
    default: Primitive | None = Field(
        default=None,
        description="Value used when the var is not supplied",
    )
    type: VarType | None = Field(
        default=None,
        description="Type supplied values are coerced to",
    )

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> VarType | None:
        # UnrecognizedTypeError is not a ValueError, so pydantic lets it through
        if value is None:
            return None
        return VarType.parse(value)

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set
