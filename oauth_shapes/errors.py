"""Structured rejection types for wire-document validation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

# pydantic error types that mean "typed correctly, failed a semantic rule"
_REFINEMENT_ERROR_TYPES = frozenset({
    "value_error",
    "assertion_error",
    "too_short",
    "too_long",
    "url_parsing",
    "url_scheme",
})


class ViolationKind(str, Enum):
    """Why a document was rejected."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    REFINEMENT_FAILURE = "refinement_failure"
    COMPOSITION_FAILURE = "composition_failure"
    UNKNOWN_FIELD = "unknown_field"

    @classmethod
    def from_pydantic(cls, error_type: str) -> "ViolationKind":
        """Classify a pydantic error type string."""
        if error_type == "missing":
            return cls.MISSING_FIELD
        if error_type == "extra_forbidden":
            return cls.UNKNOWN_FIELD
        if error_type in _REFINEMENT_ERROR_TYPES:
            return cls.REFINEMENT_FAILURE
        return cls.TYPE_MISMATCH


@dataclass(frozen=True)
class Violation:
    """A single violated constraint, tagged with the failing field path.

    The root of the document is the empty path. List indices appear as
    numbers, e.g. ``scopes_supported.1``.
    """

    path: str
    kind: ViolationKind
    message: str
    schema: Optional[str] = None

    @classmethod
    def from_pydantic(cls, error: dict[str, Any], schema: Optional[str] = None) -> "Violation":
        """Build a violation from one entry of ``ValidationError.errors()``."""
        path = ".".join(str(part) for part in error["loc"])
        message = error["msg"]
        if error["type"] == "value_error":
            message = message.removeprefix("Value error, ")
        return cls(
            path=path,
            kind=ViolationKind.from_pydantic(error["type"]),
            message=message,
            schema=schema,
        )

    def describe(self) -> str:
        """One-line human readable form."""
        return f"{self.path or '<root>'}: {self.message}"


class SchemaValidationError(ValueError):
    """Raised by ``ValidationResult.unwrap()`` when a document was rejected."""

    def __init__(self, schema: str, violations: Tuple[Violation, ...]):
        self.schema = schema
        self.violations = violations
        details = "; ".join(violation.describe() for violation in violations)
        super().__init__(f"Invalid {schema}: {details}")
