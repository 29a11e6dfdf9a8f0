"""
Constants shared by the contract validators.
"""
from typing import Tuple

# =============================================================================
# JSON types (as reported for runtime values)
# =============================================================================
JSON_TYPES: Tuple[str, ...] = (
    "null",
    "boolean",
    "integer",
    "number",
    "string",
    "array",
    "object",
)

# =============================================================================
# OpenAPI path items
# =============================================================================
DEFAULT_METHOD: str = "get"

# Separator of a "$ref" pointer; the last segment names a definition.
REF_SEPARATOR: str = "/"

# =============================================================================
# Report rendering
# =============================================================================
ERRORS_HEADER: str = "Validation Errors:"
WARNINGS_HEADER: str = "Warnings:"
ERROR_MARKER: str = "  ❌ "
WARNING_MARKER: str = "  ⚠️  "

# Locator used for failures on the document root (empty JSON pointer).
ROOT_LOCATOR: str = "root"

# Indentation of the data snapshot echoed in SchemaValidationError.
SNAPSHOT_INDENT: int = 2
