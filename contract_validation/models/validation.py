"""
ValidationResult and FieldError — outcomes of a contract check.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a schema or contract validation call."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def from_messages(cls, errors: List[str], warnings: List[str] | None = None) -> "ValidationResult":
        """Build a result whose ``valid`` flag follows the error count."""
        return cls(valid=len(errors) == 0, errors=list(errors), warnings=list(warnings or []))

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class FieldError:
    """A single failure reported by the JSON Schema validator."""

    path: str                                           # JSON pointer, "" for the root
    message: str
    params: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "message": self.message,
            "params": dict(self.params),
        }
