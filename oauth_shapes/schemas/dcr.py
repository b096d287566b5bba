"""Dynamic Client Registration (RFC 7591) schemas."""

import time
from typing import Any, List, Optional

from pydantic import AnyUrl, Field, TypeAdapter, ValidationError, field_validator

from oauth_shapes.schemas.base import AdditionalFields, WireSchema, merge, wire_config

# Syntax only: scheme plus structure, never reachability.
_absolute_uri = TypeAdapter(AnyUrl)


class ClientMetadata(WireSchema):
    """RFC 7591 client registration request metadata."""

    model_config = wire_config(AdditionalFields.STRIP)

    redirect_uris: List[str] = Field(
        ...,
        min_length=1,
        description="List of redirect URIs"
    )
    token_endpoint_auth_method: Optional[str] = Field(
        default=None,
        description="Token endpoint authentication method"
    )
    grant_types: Optional[List[str]] = Field(
        default=None,
        description="OAuth 2.0 grant types"
    )
    response_types: Optional[List[str]] = None
    client_name: Optional[str] = Field(default=None, description="Human-readable client name")
    client_uri: Optional[str] = None
    logo_uri: Optional[str] = None
    scope: Optional[str] = Field(default=None, description="Requested scope")
    contacts: Optional[List[str]] = None
    tos_uri: Optional[str] = None
    policy_uri: Optional[str] = None
    jwks_uri: Optional[str] = None
    jwks: Optional[Any] = None
    software_id: Optional[str] = None
    software_version: Optional[str] = None

    @field_validator("redirect_uris")
    @classmethod
    def validate_redirect_uris(cls, v: List[str]) -> List[str]:
        """Every redirect URI must parse as an absolute URI.

        One bad entry rejects the whole field with a single error.
        """
        for uri in v:
            try:
                _absolute_uri.validate_python(uri)
            except ValidationError:
                raise ValueError("redirect_uris must contain valid URLs") from None
        return v


class ClientInformation(WireSchema):
    """RFC 7591 client credentials issued by a registration."""

    model_config = wire_config(AdditionalFields.STRIP)

    client_id: str = Field(..., description="Unique client identifier")
    client_secret: Optional[str] = Field(default=None, description="Client secret")
    client_id_issued_at: Optional[float] = Field(
        default=None,
        description="Issue time of client_id, seconds since epoch"
    )
    client_secret_expires_at: Optional[float] = Field(
        default=None,
        description="Expiry of client_secret, seconds since epoch, 0 for never"
    )

    def secret_expired(self, now: Optional[float] = None) -> bool:
        """Check if the client secret has expired."""
        if not self.client_secret_expires_at:
            return False
        if now is None:
            now = time.time()
        return now >= self.client_secret_expires_at


ClientInformationFull = merge(
    ClientMetadata,
    ClientInformation,
    name="ClientInformationFull",
    doc="RFC 7591 registration response: client information plus metadata.",
)


class ClientRegistrationError(WireSchema):
    """RFC 7591 error response."""

    model_config = wire_config(AdditionalFields.STRIP)

    error: str = Field(..., description="Error code")
    error_description: Optional[str] = Field(
        None,
        description="Human-readable error description"
    )
