"""FastAPI dependencies for validated request bodies and the AuthInfo contract."""

from typing import Any, Callable, Type

from fastapi import HTTPException, Request, status
from starlette.datastructures import FormData

from oauth_shapes.auth_info import AuthInfo
from oauth_shapes.errors import Violation, ViolationKind
from oauth_shapes.responses import to_error_response
from oauth_shapes.schemas.base import WireSchema
from oauth_shapes.schemas.token import ErrorResponse
from oauth_shapes.validation import ValidationResult, validate, validate_json

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Attribute upstream middleware sets on request.state after verifying a token
AUTH_INFO_STATE_KEY = "auth_info"

# Starlette decodes invalid UTF-8 in form values to this character
REPLACEMENT_CHARACTER = "\ufffd"


def _validate_form(schema: Type[WireSchema], form: FormData) -> ValidationResult:
    """Validate form parameters; repeated or undecodable parameters are violations.

    RFC 6749 section 3.2 forbids sending a request parameter more than once.
    """
    violations = []
    document = {}
    for key in form.keys():
        values = form.getlist(key)
        if len(values) > 1:
            violations.append(Violation(
                path=key,
                kind=ViolationKind.REFINEMENT_FAILURE,
                message=f"Parameter sent {len(values)} times; it must appear at most once",
                schema=schema.__name__,
            ))
            continue
        value = values[0]
        if not isinstance(value, str) or REPLACEMENT_CHARACTER in value:
            violations.append(Violation(
                path=key,
                kind=ViolationKind.TYPE_MISMATCH,
                message="Parameter is not valid UTF-8 text",
                schema=schema.__name__,
            ))
            continue
        document[key] = value

    result = validate(schema, document)
    if violations:
        return ValidationResult(schema=schema, violations=tuple(violations) + result.violations)
    return result


def validated_body(
    schema: Type[WireSchema],
    on_error: Callable[[ValidationResult], WireSchema] = to_error_response,
) -> Callable[[Request], Any]:
    """Build a dependency that validates the request body against ``schema``.

    JSON and form-encoded bodies are accepted (token and revocation
    requests are form-encoded per RFC 6749 and RFC 7009).

    Args:
        schema: WireSchema subclass the body must satisfy
        on_error: Maps a rejection to the protocol error body, e.g.
            to_registration_error for a /register endpoint

    Returns:
        Async dependency returning the typed value

    Raises:
        HTTPException: 400 with the mapped error body as detail
    """
    async def dependency(request: Request):
        content_type = request.headers.get("content-type", "")

        if content_type.startswith(FORM_CONTENT_TYPE):
            result = _validate_form(schema, await request.form())
        else:
            result = validate_json(schema, await request.body())

        if not result.ok:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=on_error(result).to_wire()
            )
        return result.value

    return dependency


async def get_auth_info(request: Request) -> AuthInfo:
    """FastAPI dependency reading the AuthInfo attached by auth middleware."""
    auth_info = getattr(request.state, AUTH_INFO_STATE_KEY, None)
    if not isinstance(auth_info, AuthInfo):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ErrorResponse(
                error="invalid_token",
                error_description="No verified access token on this request"
            ).to_wire(),
            headers={"WWW-Authenticate": 'Bearer error="invalid_token"'}
        )
    return auth_info
