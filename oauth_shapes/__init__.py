"""Typed shapes and validation for OAuth 2.1 wire documents"""

from oauth_shapes.auth_info import AuthInfo
from oauth_shapes.errors import SchemaValidationError, Violation, ViolationKind
from oauth_shapes.schemas import (
    SCHEMAS,
    AdditionalFields,
    AuthorizationServerMetadata,
    ClientInformation,
    ClientInformationFull,
    ClientMetadata,
    ClientRegistrationError,
    ErrorResponse,
    TokenResponse,
    TokenRevocationRequest,
    WireSchema,
    get_schema,
    merge,
)
from oauth_shapes.validation import ValidationResult, validate, validate_json, validate_response

__all__ = [
    "SCHEMAS",
    "AdditionalFields",
    "AuthInfo",
    "AuthorizationServerMetadata",
    "ClientInformation",
    "ClientInformationFull",
    "ClientMetadata",
    "ClientRegistrationError",
    "ErrorResponse",
    "SchemaValidationError",
    "TokenResponse",
    "TokenRevocationRequest",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "WireSchema",
    "get_schema",
    "merge",
    "validate",
    "validate_json",
    "validate_response",
]
