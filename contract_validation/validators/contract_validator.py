"""
Contract Validator — checks responses against a published OpenAPI document.

Implements:
- Endpoint existence (path + case-insensitive method)
- Schema definition existence / lookup
- Response vs. named definition:
    * required fields (errors, or warnings when lenient)
    * declared property types, enums
    * nested "$ref" objects and arrays of "$ref" / typed items

Everything is result style: failures are data in ValidationResult and the
validator never raises for a non-conforming response. Properties present in
a response but not declared in the definition are accepted.
"""
import logging
from typing import Any, List, Mapping, Optional, Union

from contract_validation.config.constants import (
    DEFAULT_METHOD,
    ERROR_MARKER,
    ERRORS_HEADER,
    REF_SEPARATOR,
    WARNING_MARKER,
    WARNINGS_HEADER,
)
from contract_validation.config.settings import ContractSettings
from contract_validation.models.openapi import ContractSpecError, OpenAPISpec
from contract_validation.models.validation import ValidationResult
from contract_validation.validators.json_types import (
    describe_type,
    enum_contains,
    is_known_type,
    json_type,
    render_scalar,
    to_json,
    type_matches,
)
from contract_validation.validators.metrics import (
    record_validation_failure,
    record_validation_outcome,
    timed_validation,
)

logger = logging.getLogger(__name__)

METRICS_LABEL = "contract"


def ref_name(ref: str) -> str:
    """Definition name of a "$ref" pointer: its last "/" segment."""
    return ref.split(REF_SEPARATOR)[-1]


class ContractValidator:
    """
    Validator bound to one immutable OpenAPI document.

    Args:
        spec: Parsed OpenAPISpec, or the raw decoded JSON document.
        settings: Explicit configuration; only ``strict_required`` is read.
    """

    def __init__(
        self,
        spec: Union[OpenAPISpec, Mapping[str, Any]],
        settings: Optional[ContractSettings] = None,
    ):
        self.spec = spec if isinstance(spec, OpenAPISpec) else OpenAPISpec.from_document(spec)
        self.settings = settings if settings is not None else ContractSettings()

    # ------------------------------------------------------------------
    # Structure checks
    # ------------------------------------------------------------------

    def validate_endpoint_exists(self, path: str, method: str = DEFAULT_METHOD) -> ValidationResult:
        """Check that *path* is documented and supports *method*; at most one error."""
        path_item = self.spec.paths.get(path)
        if path_item is None:
            return ValidationResult(valid=False, errors=[f"Endpoint '{path}' not found in OpenAPI spec"])

        if method.lower() not in path_item:
            return ValidationResult(
                valid=False,
                errors=[f"Method '{method.upper()}' not found for endpoint '{path}'"],
            )

        return ValidationResult(valid=True)

    def validate_schema_exists(self, schema_name: str) -> ValidationResult:
        definitions = self.spec.definitions
        if not definitions or schema_name not in definitions:
            return ValidationResult(
                valid=False,
                errors=[f"Schema '{schema_name}' not found in OpenAPI spec definitions"],
            )
        return ValidationResult(valid=True)

    def get_schema(self, schema_name: str) -> Optional[dict]:
        """
        Look up a definition by name.

        Returns:
            The definition, or None when the name is not defined.

        Raises:
            ContractSpecError: If the document has no definitions section at all.
        """
        if self.spec.definitions is None:
            raise ContractSpecError("No definitions found in OpenAPI spec")
        return self.spec.definitions.get(schema_name)

    def get_endpoint_paths(self) -> List[str]:
        return self.spec.endpoint_paths

    def get_schema_names(self) -> List[str]:
        return list(self.spec.definitions.keys()) if self.spec.definitions else []

    # ------------------------------------------------------------------
    # Response checks
    # ------------------------------------------------------------------

    def validate_response_against_schema(
        self,
        response: Any,
        schema_name: str,
        strict_required: Optional[bool] = None,
    ) -> ValidationResult:
        """
        Validate a decoded response body against the named definition.

        Args:
            response: Decoded JSON value (normally an object).
            schema_name: Key in the spec's ``definitions``.
            strict_required: Route missing required fields to errors (True) or
                warnings (False). Defaults to ``settings.strict_required``.

        Returns:
            ValidationResult; ``valid`` only reflects errors.
        """
        if strict_required is None:
            strict_required = self.settings.strict_required

        with timed_validation(METRICS_LABEL):
            result = self._validate_object(response, schema_name, strict_required)

        record_validation_outcome(METRICS_LABEL, result.valid)
        if not result.valid:
            logger.warning(
                "Response does not match schema '%s': %d error(s), %d warning(s)",
                schema_name,
                len(result.errors),
                len(result.warnings),
            )
        return result

    def _validate_object(self, response: Any, schema_name: str, strict_required: bool) -> ValidationResult:
        errors: List[str] = []
        warnings: List[str] = []

        schema = self.get_schema(schema_name)
        if schema is None:
            # Also the outcome of a dangling "$ref".
            logger.warning("Schema '%s' is referenced but not defined", schema_name)
            record_validation_failure(METRICS_LABEL, "missing_schema")
            return ValidationResult(valid=False, errors=[f"Schema '{schema_name}' not found"])

        if not isinstance(response, dict):
            record_validation_failure(METRICS_LABEL, "type_mismatch")
            return ValidationResult(
                valid=False,
                errors=[
                    f"Response has type '{json_type(response)}' but schema '{schema_name}' "
                    f"expects 'object' (value: {to_json(response)})"
                ],
            )

        # --- Required fields ---
        for required_field in schema.get("required") or []:
            if required_field not in response:
                msg = f"Required field '{required_field}' is missing from response"
                if strict_required:
                    errors.append(msg)
                    record_validation_failure(METRICS_LABEL, "missing_required")
                else:
                    warnings.append(msg)

        # --- Declared properties present in the response ---
        for field_name, field_schema in (schema.get("properties") or {}).items():
            if field_name in response:
                field_result = self._validate_field(field_name, response[field_name], field_schema)
                errors.extend(field_result.errors)

        return ValidationResult.from_messages(errors, warnings)

    def _validate_field(self, field_name: str, value: Any, field_schema: Any) -> ValidationResult:
        """
        Check one declared property.

        Nested "$ref" objects and array items are always checked strictly;
        ``strict_required`` only routes the top-level required pass.
        """
        errors: List[str] = []

        # Boolean schemas (true / false) carry no type information.
        if not isinstance(field_schema, dict):
            return ValidationResult(valid=True)

        ref = field_schema.get("$ref")
        if ref and isinstance(value, dict):
            return self._validate_object(value, ref_name(ref), True)

        expected = field_schema.get("type")
        if not expected:
            return ValidationResult(valid=True)

        if isinstance(expected, str) and not is_known_type(expected):
            logger.debug("Field '%s' declares unknown type '%s'", field_name, expected)

        # --- Type ---
        actual = json_type(value)
        if not type_matches(actual, expected):
            errors.append(
                f"Field '{field_name}' has type '{actual}' but schema expects "
                f"'{describe_type(expected)}' (value: {to_json(value)})"
            )
            record_validation_failure(METRICS_LABEL, "type_mismatch")

        # --- Enum (checked even when the type already failed) ---
        allowed = field_schema.get("enum")
        if isinstance(allowed, list) and not enum_contains(allowed, value):
            errors.append(
                f"Field '{field_name}' has value '{render_scalar(value)}' which is not in "
                f"allowed enum values: [{', '.join(render_scalar(v) for v in allowed)}]"
            )
            record_validation_failure(METRICS_LABEL, "enum_violation")

        # --- Array items ---
        items = field_schema.get("items")
        if expected == "array" and isinstance(items, dict) and isinstance(value, list):
            for index, item in enumerate(value):
                label = f"{field_name}[{index}]"
                if items.get("$ref"):
                    item_result = self._validate_object(item, ref_name(items["$ref"]), True)
                    errors.extend(f"{label}: {err}" for err in item_result.errors)
                elif items.get("type"):
                    item_type = json_type(item)
                    if not type_matches(item_type, items["type"]):
                        errors.append(
                            f"{label} has type '{item_type}' but schema expects "
                            f"'{describe_type(items['type'])}'"
                        )
                        record_validation_failure(METRICS_LABEL, "type_mismatch")

        return ValidationResult.from_messages(errors)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @staticmethod
    def format_validation_errors(result: ValidationResult) -> str:
        """Render errors then warnings, each under a header; "" for a clean result."""
        lines: List[str] = []

        if result.errors:
            lines.append(ERRORS_HEADER)
            lines.extend(f"{ERROR_MARKER}{err}" for err in result.errors)

        if result.warnings:
            lines.append(WARNINGS_HEADER)
            lines.extend(f"{WARNING_MARKER}{warn}" for warn in result.warnings)

        return "\n".join(lines)
