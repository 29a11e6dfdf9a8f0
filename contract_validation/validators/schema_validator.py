"""
Schema Validator — JSON Schema conformance for response payloads.

Two calling conventions over the same evaluation:
- validate()         → ValidationResult, never raises for invalid data
- validate_schema()  → returns the data, raises SchemaValidationError
- assert_valid()     → validate_schema() with a context label

Every failure found in one pass is reported (jsonschema ``iter_errors``),
not just the first one.

Compiled validators are cached per process, keyed by the canonical JSON of
the schema. Compilation is idempotent, so the lock only keeps the cache
dict consistent.
"""
import json
import logging
import threading
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator, FormatChecker
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from contract_validation.config.constants import ROOT_LOCATOR, SNAPSHOT_INDENT
from contract_validation.models.validation import FieldError, ValidationResult
from contract_validation.validators.metrics import (
    record_validation_failure,
    record_validation_outcome,
    timed_validation,
)

logger = logging.getLogger(__name__)

METRICS_LABEL = "schema"


# ======================================================================
# Errors
# ======================================================================

class SchemaValidationError(Exception):
    """
    Raised when data does not conform to a JSON Schema.

    Attributes:
        errors: Every FieldError found, in evaluation order.
        data: The offending data.
        context: Optional label added by assert_valid().
    """

    def __init__(self, errors: List[FieldError], data: Any, context: Optional[str] = None) -> None:
        self.errors = errors
        self.data = data
        self.context = context
        super().__init__(format_schema_failure(errors, data, context))


def format_schema_failure(errors: List[FieldError], data: Any, context: Optional[str] = None) -> str:
    """
    Render the SchemaValidationError message.

    Layout::

        Schema validation failed:
          - /id: 'abc' is not of type 'integer' {"type": "integer"}

        Data: {
          "id": "abc"
        }
    """
    lines = []
    for err in errors:
        line = f"  - {err.path or ROOT_LOCATOR}: {err.message}"
        if err.params:
            line += f" {json.dumps(err.params, default=str)}"
        lines.append(line)

    prefix = f"[{context}] " if context else ""
    snapshot = json.dumps(data, indent=SNAPSHOT_INDENT, ensure_ascii=False, default=str)
    return f"{prefix}Schema validation failed:\n" + "\n".join(lines) + f"\n\nData: {snapshot}"


# ======================================================================
# Internal helpers
# ======================================================================

def _json_pointer(path) -> str:
    """Build an instance JSON pointer ("/tags/0/name") from a jsonschema path deque."""
    parts = [str(p).replace("~", "~0").replace("/", "~1") for p in path]
    return "".join(f"/{p}" for p in parts)


def _to_field_error(error) -> FieldError:
    return FieldError(
        path=_json_pointer(error.absolute_path),
        message=error.message,
        params={str(error.validator): error.validator_value},
    )


def _schema_key(schema: dict) -> str:
    return json.dumps(schema, sort_keys=True, default=str)


# ======================================================================
# Validator
# ======================================================================

class SchemaValidator:
    """
    JSON Schema validator with a compiled-schema cache.

    The draft is taken from the schema's ``$schema`` keyword; schemas
    without one are evaluated as Draft 7. Formats are checked.
    """

    def __init__(self) -> None:
        self._cache: Dict[str, Validator] = {}
        self._lock = threading.Lock()

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    def compile(self, schema: dict) -> Validator:
        """
        Return the compiled validator for *schema*, compiling on first use.

        Raises:
            jsonschema.SchemaError: If *schema* itself is not a valid JSON Schema.
        """
        key = _schema_key(schema)
        with self._lock:
            compiled = self._cache.get(key)
        if compiled is not None:
            return compiled

        cls = validator_for(schema, default=Draft7Validator)
        cls.check_schema(schema)
        compiled = cls(schema, format_checker=FormatChecker())
        logger.debug("Compiled schema '%s' with %s", schema.get("title", "<untitled>"), cls.__name__)

        with self._lock:
            return self._cache.setdefault(key, compiled)

    def collect_errors(self, schema: dict, data: Any) -> List[FieldError]:
        """Evaluate *data* and return every failure as a FieldError."""
        compiled = self.compile(schema)
        with timed_validation(METRICS_LABEL):
            errors = [_to_field_error(e) for e in compiled.iter_errors(data)]

        record_validation_outcome(METRICS_LABEL, not errors)
        for err in errors:
            record_validation_failure(METRICS_LABEL, next(iter(err.params), "generic"))
        return errors

    def validate(self, schema: dict, data: Any) -> ValidationResult:
        """
        Validate *data* against *schema* without raising.

        Returns:
            ValidationResult whose errors read ``"<instancePath> <message>"``
            (``root`` for the document itself). warnings is always empty.
        """
        errors = self.collect_errors(schema, data)
        if errors:
            logger.debug("Schema validation failed with %d error(s)", len(errors))
        return ValidationResult.from_messages(
            [f"{err.path or ROOT_LOCATOR} {err.message}" for err in errors]
        )

    def validate_schema(self, schema: dict, data: Any) -> Any:
        """
        Validate *data* against *schema*, returning it unchanged on success.

        Raises:
            SchemaValidationError: With every failure found and a data snapshot.
        """
        errors = self.collect_errors(schema, data)
        if errors:
            raise SchemaValidationError(errors, data)
        return data

    def assert_valid(self, schema: dict, data: Any, context: Optional[str] = None) -> Any:
        """validate_schema(), re-raising failures labelled with *context*."""
        try:
            return self.validate_schema(schema, data)
        except SchemaValidationError as e:
            if context is None:
                raise
            raise SchemaValidationError(e.errors, e.data, context=context) from e


# Module-level default validator instance
schema_validator = SchemaValidator()


def validate(schema: dict, data: Any) -> ValidationResult:
    return schema_validator.validate(schema, data)


def validate_schema(schema: dict, data: Any) -> Any:
    return schema_validator.validate_schema(schema, data)


def assert_valid(schema: dict, data: Any, context: Optional[str] = None) -> Any:
    return schema_validator.assert_valid(schema, data, context)
