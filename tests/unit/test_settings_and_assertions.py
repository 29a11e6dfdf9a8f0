"""
Unit tests for ContractSettings and the hand-written response assertions.
"""
import pytest

from contract_validation.config import settings as settings_module
from contract_validation.config.settings import ContractSettings
from contract_validation.validators.response_assertions import (
    ResponseAssertionError,
    assert_has_property,
    assert_json_type,
    assert_status_code,
)


class TestContractSettings:

    def test_defaults(self):
        s = ContractSettings()
        assert s.base_url == "https://petstore.swagger.io/v2"
        assert s.strict_required is True
        assert s.timeout_ms == 30000
        assert s.retries == 2

    def test_frozen(self):
        s = ContractSettings()
        with pytest.raises(Exception):
            s.strict_required = False  # type: ignore[misc]

    def test_from_env_mirrors_module_values(self):
        s = ContractSettings.from_env()
        assert s.base_url == settings_module.BASE_URL
        assert s.strict_required == settings_module.STRICT_REQUIRED
        assert s.log_level == settings_module.LOG_LEVEL

    def test_repr_hides_api_key(self):
        s = ContractSettings(api_key="super-secret")
        assert "super-secret" not in repr(s)

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("TRUE", True), ("1", True), ("yes", True), ("false", False), ("0", False), ("", False)],
    )
    def test_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("CONTRACT_TEST_FLAG", raw)
        assert settings_module._env_bool("CONTRACT_TEST_FLAG", "true") is expected

    def test_env_bool_default(self, monkeypatch):
        monkeypatch.delenv("CONTRACT_TEST_FLAG", raising=False)
        assert settings_module._env_bool("CONTRACT_TEST_FLAG", "true") is True


class TestResponseAssertions:

    def test_status_code(self):
        assert_status_code(200, 200)
        with pytest.raises(ResponseAssertionError, match="Expected status code 200, but got 404"):
            assert_status_code(404, 200)

    def test_has_property(self, valid_pet):
        assert_has_property(valid_pet, "name")
        with pytest.raises(ResponseAssertionError, match='property "owner"'):
            assert_has_property(valid_pet, "owner")

    def test_has_property_on_non_object(self):
        with pytest.raises(ResponseAssertionError):
            assert_has_property(["name"], "name")

    def test_json_type(self):
        assert_json_type(5, "integer")
        assert_json_type(5.5, "number")
        assert_json_type([], "array")
        with pytest.raises(ResponseAssertionError, match='Expected type "number", but got "integer"'):
            assert_json_type(5, "number")
        with pytest.raises(ResponseAssertionError, match='Expected type "string", but got "integer"'):
            assert_json_type(5, "string")

    def test_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            assert_status_code(500, 200)
