"""
Response assertions — quick hand-written checks used next to the contracts.
"""
from typing import Any

from contract_validation.validators.json_types import describe_type, json_type, type_matches


class ResponseAssertionError(AssertionError):
    """Raised when a response does not meet a hand-written expectation."""


def assert_status_code(actual: int, expected: int) -> None:
    if actual != expected:
        raise ResponseAssertionError(f"Expected status code {expected}, but got {actual}")


def assert_has_property(obj: Any, prop: str) -> None:
    if not isinstance(obj, dict) or prop not in obj:
        raise ResponseAssertionError(f'Expected object to have property "{prop}"')


def assert_json_type(value: Any, expected: str) -> None:
    """Assert the JSON type of *value*; ``integer`` and ``number`` are distinct."""
    actual = json_type(value)
    if not type_matches(actual, expected):
        raise ResponseAssertionError(f'Expected type "{describe_type(expected)}", but got "{actual}"')
