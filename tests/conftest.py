"""
Shared test fixtures for the contract validation test suite.
"""
import copy
import json
from pathlib import Path

import pytest

from contract_validation.config.settings import ContractSettings
from contract_validation.models.openapi import OpenAPISpec
from contract_validation.validators.contract_validator import ContractValidator
from contract_validation.validators.schema_validator import SchemaValidator

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SWAGGER_PATH = FIXTURES_DIR / "petstore_swagger.json"


# ==========================================================================
# OpenAPI document
# ==========================================================================

@pytest.fixture
def swagger_path():
    return SWAGGER_PATH


@pytest.fixture
def swagger_document():
    with open(SWAGGER_PATH, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def openapi_spec(swagger_document):
    return OpenAPISpec.from_document(swagger_document)


@pytest.fixture
def contract_validator(openapi_spec):
    return ContractValidator(openapi_spec)


@pytest.fixture
def lenient_settings():
    return ContractSettings(strict_required=False)


# ==========================================================================
# Schema validator (fresh cache per test)
# ==========================================================================

@pytest.fixture
def schema_validator():
    return SchemaValidator()


# ==========================================================================
# Pets
# ==========================================================================

@pytest.fixture
def valid_pet():
    return {
        "id": 12345,
        "name": "Fluffy",
        "category": {"id": 1, "name": "Dogs"},
        "photoUrls": ["https://example.com/photo1.jpg"],
        "tags": [
            {"id": 1, "name": "friendly"},
            {"id": 2, "name": "cute"},
        ],
        "status": "available",
    }


@pytest.fixture
def make_pet(valid_pet):
    """Factory: valid pet with overrides; pass a value of ... to drop a field."""

    def _make(**overrides):
        pet = copy.deepcopy(valid_pet)
        for key, value in overrides.items():
            if value is ...:
                pet.pop(key, None)
            else:
                pet[key] = value
        return pet

    return _make


@pytest.fixture
def invalid_pet_response():
    """A response breaking several Pet constraints at once."""
    return {
        "id": "not-a-number",
        "name": 123,
        "photoUrls": "not-an-array",
        "status": "invalid-status",
    }
