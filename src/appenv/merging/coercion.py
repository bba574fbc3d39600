"""Coercion of supplied string values to declared var types."""

import re
import typing as t

from ..domain.exceptions import InvalidVariableTypeError
from ..domain.rules import VarType

TRUTHY_WORDS: t.Final = frozenset({"yes", "true", "y", "t"})
FALSY_WORDS: t.Final = frozenset({"false", "no", "f", "n"})

# Leading integer, as read by a lenient parser: "42abc" -> 42
_INT_PREFIX: t.Final = re.compile(r"\s*([+-]?[0-9]+)")


class IntPrefix(t.NamedTuple):
    value: int
    remainder: str


def split_int_prefix(value: str) -> tuple[str, str] | None:
    """Split ``value`` into its leading signed digits and the rest."""
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    return match.group(1), value[match.end() :]


def parse_int_prefix(value: str) -> IntPrefix | None:
    """Parse the integer at the start of ``value``.

    Leading whitespace and a sign are allowed. Anything after the digits is
    returned as the remainder.

    Raises:
        ValueError: If the digits exceed the interpreter's limit for
            integer string conversion

    Examples:
        >>> parse_int_prefix("42abc")
        IntPrefix(value=42, remainder='abc')
        >>> parse_int_prefix("abc") is None
        True
    """
    prefix = split_int_prefix(value)
    if prefix is None:
        return None
    digits, remainder = prefix
    return IntPrefix(int(digits), remainder)


def coerce_boolean(key: str, value: str) -> bool:
    lowered = value.lower()
    if lowered in TRUTHY_WORDS:
        return True
    if lowered in FALSY_WORDS:
        return False

    prefix = split_int_prefix(lowered)
    if prefix is None:
        raise InvalidVariableTypeError(key, VarType.BOOLEAN, value)
    # Any nonzero number, negative included, is true. Read from the digits
    # so values too long for int() still work.
    digits, _ = prefix
    return any(digit not in "+-0" for digit in digits)


def coerce_number(key: str, value: str) -> int:
    try:
        number = parse_int_prefix(value)
    except ValueError as e:
        raise InvalidVariableTypeError(key, VarType.NUMBER, value) from e
    if number is None:
        raise InvalidVariableTypeError(key, VarType.NUMBER, value)
    return number.value


def coerce_string(key: str, value: t.Any) -> str:
    # Only rejects non-string leftovers; case is never an issue
    if not isinstance(value, str):
        raise InvalidVariableTypeError(key, VarType.STRING, value)
    return value


_COERCERS: t.Final[dict[VarType, t.Callable[[str, t.Any], t.Any]]] = {
    VarType.BOOLEAN: coerce_boolean,
    VarType.NUMBER: coerce_number,
    VarType.STRING: coerce_string,
}


def coerce(key: str, value: str, var_type: VarType) -> bool | int | str:
    """Coerce a supplied value to ``var_type``.

    Raises:
        InvalidVariableTypeError: If the value can't be reliably read as
            the declared type
    """
    return _COERCERS[var_type](key, value)
