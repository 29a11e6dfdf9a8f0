"""
JSON type helpers — runtime type names and value rendering.

Type names follow JSON Schema: a number without a fractional part is an
``integer``, booleans are never numbers, ``None`` is ``null``.
"""
import json
from typing import Any, Iterable, Union

from contract_validation.config.constants import JSON_TYPES

ExpectedType = Union[str, Iterable[str]]


def json_type(value: Any) -> str:
    """Return the JSON Schema type name of a decoded JSON value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "integer" if value.is_integer() else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    # Not a decoded JSON value; report the Python type so messages stay useful.
    return type(value).__name__


def type_matches(actual: str, expected: ExpectedType) -> bool:
    """
    Check an actual type name against a declared ``type``.

    ``expected`` may be a single name or a list of names. Names compare
    exactly, so an ``integer`` value does not satisfy ``number``.
    """
    names = [expected] if isinstance(expected, str) else list(expected)
    return actual in names


def same_json_value(left: Any, right: Any) -> bool:
    """Equality that keeps booleans apart from numbers (``True != 1``)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(same_json_value(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(same_json_value(a, b) for a, b in zip(left, right))
    return left == right


def enum_contains(allowed: Iterable[Any], value: Any) -> bool:
    return any(same_json_value(candidate, value) for candidate in allowed)


def describe_type(expected: ExpectedType) -> str:
    """Render a declared ``type`` for messages."""
    if isinstance(expected, str):
        return expected
    return "|".join(str(name) for name in expected)


def is_known_type(name: str) -> bool:
    return name in JSON_TYPES


def to_json(value: Any) -> str:
    """Compact JSON rendering used inside single-line messages."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def render_scalar(value: Any) -> str:
    """Render a value the way it reads inside quotes: strings bare, the rest as JSON."""
    if isinstance(value, str):
        return value
    return to_json(value)
