"""Validation entry points: untrusted document in, typed value or violations out.

None of these functions raise for malformed input. Every rejection comes
back as a ``ValidationResult`` listing all violations found.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import ValidationError
from pydantic_core import from_json

from oauth_shapes.config import get_settings
from oauth_shapes.errors import SchemaValidationError, Violation, ViolationKind
from oauth_shapes.schemas.base import WireSchema

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=WireSchema)


@dataclass(frozen=True)
class ValidationResult(Generic[SchemaT]):
    """Outcome of validating one document against one schema."""

    schema: Type[SchemaT]
    value: Optional[SchemaT] = None
    violations: Tuple[Violation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> SchemaT:
        """Return the typed value or raise ``SchemaValidationError``."""
        if self.violations:
            raise SchemaValidationError(self.schema.__name__, self.violations)
        return self.value

    def violations_at(self, path: str) -> Tuple[Violation, ...]:
        return tuple(v for v in self.violations if v.path == path)


def _check_schema(schema: Any) -> None:
    if not (isinstance(schema, type) and issubclass(schema, WireSchema)):
        raise TypeError(f"Expected a WireSchema subclass, got {schema!r}")


def _rejected(schema: Type[SchemaT], violations: list[Violation]) -> ValidationResult[SchemaT]:
    if get_settings().LOG_REJECTIONS:
        details = "; ".join(violation.describe() for violation in violations)
        logger.debug(f"Rejected {schema.__name__} with {len(violations)} violation(s): {details}")
    return ValidationResult(schema=schema, violations=tuple(violations))


def _validate_model(schema: Type[SchemaT], document: dict[str, Any]) -> Tuple[Optional[SchemaT], list[Violation]]:
    try:
        return schema.model_validate(document), []
    except ValidationError as e:
        return None, [Violation.from_pydantic(error, schema.__name__) for error in e.errors()]


def _validate_merged(schema: Type[SchemaT], document: dict[str, Any]) -> Tuple[Optional[SchemaT], list[Violation]]:
    """Validate against each parent independently, then union the results."""
    violations: list[Violation] = []
    union: dict[str, Any] = {}

    for parent in schema.merged_from:
        if parent.is_merged():
            value, parent_violations = _validate_merged(parent, document)
        else:
            value, parent_violations = _validate_model(parent, document)

        if parent_violations:
            violations.extend(parent_violations)
            violations.append(Violation(
                path="",
                kind=ViolationKind.COMPOSITION_FAILURE,
                message=f"Document does not satisfy {parent.__name__}",
                schema=schema.__name__,
            ))
        else:
            union.update(value.present_fields())

    if violations:
        return None, violations
    return _validate_model(schema, union)


def validate(schema: Type[SchemaT], document: Any) -> ValidationResult[SchemaT]:
    """Validate an already-decoded document against ``schema``.

    Args:
        schema: A WireSchema subclass, e.g. TokenResponse
        document: Decoded JSON; anything other than a mapping is rejected

    Returns:
        ValidationResult with either the typed value or every violation

    Raises:
        TypeError: If schema is not a WireSchema subclass
    """
    _check_schema(schema)

    if not isinstance(document, Mapping):
        return _rejected(schema, [Violation(
            path="",
            kind=ViolationKind.TYPE_MISMATCH,
            message=f"Expected a JSON object, got {type(document).__name__}",
            schema=schema.__name__,
        )])

    document = dict(document)
    if schema.is_merged():
        value, violations = _validate_merged(schema, document)
    else:
        value, violations = _validate_model(schema, document)

    if violations:
        return _rejected(schema, violations)
    return ValidationResult(schema=schema, value=value)


def validate_json(schema: Type[SchemaT], text: Union[str, bytes, bytearray]) -> ValidationResult[SchemaT]:
    """Decode JSON text and validate it against ``schema``."""
    _check_schema(schema)
    try:
        document = from_json(text)
    except ValueError as e:
        return _rejected(schema, [Violation(
            path="",
            kind=ViolationKind.TYPE_MISMATCH,
            message=f"Invalid JSON: {e}",
            schema=schema.__name__,
        )])
    return validate(schema, document)


def validate_response(schema: Type[SchemaT], response: httpx.Response) -> ValidationResult[SchemaT]:
    """Validate the JSON body of an already received HTTP response.

    The status code is not consulted; pick the schema (e.g. TokenResponse
    for 200, ErrorResponse for 400) before calling this.
    """
    return validate_json(schema, response.content)
