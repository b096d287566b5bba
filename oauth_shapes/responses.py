"""Turn validation rejections into protocol-level error bodies."""

from typing import Optional, Sequence

from oauth_shapes.config import get_settings
from oauth_shapes.errors import Violation
from oauth_shapes.schemas.dcr import ClientRegistrationError
from oauth_shapes.schemas.token import ErrorResponse
from oauth_shapes.validation import ValidationResult

# RFC 7591 section 3.2.2
INVALID_REDIRECT_URI = "invalid_redirect_uri"
INVALID_CLIENT_METADATA = "invalid_client_metadata"
# RFC 6749 section 5.2
INVALID_REQUEST = "invalid_request"


def describe_violations(violations: Sequence[Violation], limit: Optional[int] = None) -> str:
    """Fold violations into a single error_description string."""
    if limit is None:
        limit = get_settings().MAX_DESCRIPTION_VIOLATIONS
    parts = [violation.describe() for violation in violations[:limit]]
    if len(violations) > limit:
        parts.append(f"{len(violations) - limit} more")
    return "; ".join(parts)


def _require_rejection(result: ValidationResult) -> None:
    if result.ok:
        raise ValueError(f"{result.schema.__name__} validation succeeded; nothing to report")


def to_registration_error(result: ValidationResult) -> ClientRegistrationError:
    """Map a rejected registration request to an RFC 7591 error body."""
    _require_rejection(result)
    if any(v.path.split(".")[0] == "redirect_uris" for v in result.violations):
        error = INVALID_REDIRECT_URI
    else:
        error = INVALID_CLIENT_METADATA
    return ClientRegistrationError(
        error=error,
        error_description=describe_violations(result.violations),
    )


def to_error_response(result: ValidationResult, error: str = INVALID_REQUEST) -> ErrorResponse:
    """Map any rejected document to a generic OAuth error body."""
    _require_rejection(result)
    return ErrorResponse(
        error=error,
        error_description=describe_violations(result.violations),
    )
