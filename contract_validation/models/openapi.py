"""
Typed Pydantic models for the OpenAPI / Swagger 2.0 contract document.

Only the root structure is typed. Operations and schema definitions stay
plain dicts: they are SchemaDocument trees walked by the ContractValidator.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ContractSpecError(ValueError):
    """Raised when the OpenAPI document itself is structurally unusable."""


class SpecInfo(BaseModel):
    """The ``info`` block of the document."""

    model_config = ConfigDict(frozen=True, extra="allow")

    title: str = Field(..., description="API title, e.g. 'Swagger Petstore'.")
    version: str = Field(..., description="API version (not the spec format version).")


class OpenAPISpec(BaseModel):
    """
    Root of a parsed OpenAPI / Swagger document.

    ``paths`` maps "/path" → HTTP method → operation object.
    ``definitions`` maps schema name → SchemaDocument. It is ``None`` when
    the section is absent, which is distinct from an empty section.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    swagger: Optional[str] = Field(None, description="Swagger 2.0 version string.")
    openapi: Optional[str] = Field(None, description="OpenAPI 3.x version string.")
    info: Optional[SpecInfo] = None
    paths: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    definitions: Optional[Dict[str, Dict[str, Any]]] = None

    @property
    def spec_version(self) -> Optional[str]:
        return self.swagger or self.openapi

    @property
    def endpoint_paths(self) -> List[str]:
        return list(self.paths.keys())

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "OpenAPISpec":
        """
        Parse a raw JSON document into an OpenAPISpec.

        Raises:
            ContractSpecError: If the document does not have the expected shape.
        """
        if not isinstance(document, Mapping):
            raise ContractSpecError(
                f"OpenAPI document must be an object, got {type(document).__name__}"
            )
        try:
            return cls.model_validate(dict(document))
        except ValidationError as e:
            raise ContractSpecError(f"Malformed OpenAPI document: {e}") from e
