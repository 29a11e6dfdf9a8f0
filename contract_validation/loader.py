"""
Loading of contract documents (swagger JSON, hand-written JSON Schemas).

The validators only ever see in-memory documents; this is the one place
that touches the filesystem.
"""
import json
import logging
from pathlib import Path
from typing import Any, Union

from contract_validation.models.openapi import ContractSpecError, OpenAPISpec

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_json_document(path: PathLike) -> Any:
    """
    Read and decode a JSON file.

    Raises:
        ContractSpecError: If the file is missing or is not valid JSON.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ContractSpecError(f"Contract document not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ContractSpecError(f"Invalid JSON in {path}: {e}") from e


def load_openapi_spec(path: PathLike) -> OpenAPISpec:
    """Load a swagger / OpenAPI JSON document from *path*."""
    spec = OpenAPISpec.from_document(load_json_document(path))
    logger.info(
        "Loaded OpenAPI spec %s (%s %s): %d paths, %d definitions",
        path,
        spec.info.title if spec.info else "<untitled>",
        spec.spec_version or "<unversioned>",
        len(spec.paths),
        len(spec.definitions or {}),
    )
    return spec


def load_schema(path: PathLike) -> dict:
    """
    Load a hand-written JSON Schema document.

    Raises:
        ContractSpecError: If the document is not a JSON object.
    """
    schema = load_json_document(path)
    if not isinstance(schema, dict):
        raise ContractSpecError(f"JSON Schema in {path} must be an object, got {type(schema).__name__}")
    return schema
