"""
Unit tests for JSON type naming and value rendering.
"""
import pytest

from contract_validation.validators.json_types import (
    describe_type,
    enum_contains,
    is_known_type,
    json_type,
    render_scalar,
    same_json_value,
    to_json,
    type_matches,
)


class TestJsonType:

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "boolean"),
            (False, "boolean"),
            (0, "integer"),
            (-12, "integer"),
            (4.0, "integer"),
            (4.5, "number"),
            ("", "string"),
            ([], "array"),
            ([1, "a", None], "array"),
            ((1, 2), "array"),
            ({}, "object"),
        ],
    )
    def test_names(self, value, expected):
        assert json_type(value) == expected

    def test_non_json_value_reports_python_type(self):
        assert json_type({1, 2}) == "set"


class TestTypeMatches:

    def test_exact(self):
        assert type_matches("string", "string") is True
        assert type_matches("string", "integer") is False

    def test_integer_and_number_are_distinct(self):
        assert type_matches("integer", "number") is False
        assert type_matches("number", "integer") is False

    def test_list_of_types(self):
        assert type_matches("null", ["string", "null"]) is True
        assert type_matches("integer", ["integer", "number"]) is True
        assert type_matches("integer", ["number"]) is False
        assert type_matches("object", ["string", "null"]) is False

    def test_describe(self):
        assert describe_type("string") == "string"
        assert describe_type(["string", "null"]) == "string|null"

    def test_known_types(self):
        assert is_known_type("array") is True
        assert is_known_type("int64") is False


class TestRendering:

    def test_to_json_is_compact(self):
        assert to_json({"a": [1, 2]}) == '{"a":[1,2]}'
        assert to_json("x") == '"x"'
        assert to_json(None) == "null"

    def test_to_json_keeps_unicode(self):
        assert to_json("città") == '"città"'

    def test_render_scalar(self):
        assert render_scalar("sold") == "sold"
        assert render_scalar(5) == "5"
        assert render_scalar(True) == "true"
        assert render_scalar(None) == "null"


class TestEnumMembership:

    def test_booleans_are_not_numbers(self):
        assert enum_contains([1], True) is False
        assert enum_contains([0], False) is False
        assert enum_contains([True, False], 1) is False
        assert enum_contains([True], True) is True

    def test_plain_values(self):
        assert enum_contains(["available", "pending", "sold"], "sold") is True
        assert enum_contains(["available"], "gone") is False
        assert enum_contains([None], None) is True
        assert enum_contains([1], 1.0) is True

    def test_nested_values_compare_strictly(self):
        assert same_json_value({"a": [1, True]}, {"a": [1, True]}) is True
        assert same_json_value({"a": [1, 1]}, {"a": [1, True]}) is False
        assert same_json_value([1], [1, 2]) is False
