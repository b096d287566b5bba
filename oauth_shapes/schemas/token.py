"""OAuth 2.1 token endpoint and revocation (RFC 7009) schemas."""

from typing import Optional, Tuple

from pydantic import Field

from oauth_shapes.schemas.base import AdditionalFields, WireSchema, wire_config


class TokenResponse(WireSchema):
    """OAuth 2.1 successful token response.

    Unknown fields are stripped so server-injected extensions never reach
    application logic.
    """

    model_config = wire_config(AdditionalFields.STRIP)

    access_token: str = Field(..., description="Access token")
    token_type: str = Field(..., description="Token type, usually Bearer")
    expires_in: Optional[float] = Field(
        default=None,
        description="Token lifetime in seconds"
    )
    scope: Optional[str] = Field(default=None, description="Granted scope")
    refresh_token: Optional[str] = Field(default=None, description="Refresh token")

    @property
    def scopes(self) -> Tuple[str, ...]:
        """Granted scopes in the order the server listed them."""
        if not self.scope:
            return ()
        return tuple(self.scope.split())


class ErrorResponse(WireSchema):
    """OAuth 2.1 error response.

    ``error`` is kept as an opaque code; servers are free to send codes
    beyond the ones RFC 6749 lists.
    """

    model_config = wire_config(AdditionalFields.STRIP)

    error: str = Field(..., description="Error code")
    error_description: Optional[str] = Field(
        None,
        description="Human-readable error description"
    )
    error_uri: Optional[str] = Field(
        None,
        description="URI of a page describing the error"
    )


class TokenRevocationRequest(WireSchema):
    """RFC 7009 token revocation request."""

    model_config = wire_config(AdditionalFields.STRIP)

    token: str = Field(..., description="Token to revoke")
    token_type_hint: Optional[str] = Field(
        None,
        description="access_token or refresh_token"
    )
