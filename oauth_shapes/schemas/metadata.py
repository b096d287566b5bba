"""OAuth 2.0 Authorization Server Metadata (RFC 8414) schema."""

from typing import List, Optional

from pydantic import Field

from oauth_shapes.schemas.base import AdditionalFields, WireSchema, wire_config


class AuthorizationServerMetadata(WireSchema):
    """RFC 8414 discovery document.

    Discovery documents are extensible (OpenID Connect adds
    ``userinfo_endpoint``, vendors add their own), so fields not listed
    here are preserved and reachable through ``extra_fields()``.
    """

    model_config = wire_config(AdditionalFields.PRESERVE)

    issuer: str = Field(..., description="Authorization server issuer identifier")
    authorization_endpoint: str = Field(..., description="Authorization endpoint URL")
    token_endpoint: str = Field(..., description="Token endpoint URL")
    response_types_supported: List[str] = Field(
        ...,
        description="Supported response_type values"
    )

    registration_endpoint: Optional[str] = None
    jwks_uri: Optional[str] = None
    scopes_supported: Optional[List[str]] = None
    response_modes_supported: Optional[List[str]] = None
    grant_types_supported: Optional[List[str]] = None
    token_endpoint_auth_methods_supported: Optional[List[str]] = None
    token_endpoint_auth_signing_alg_values_supported: Optional[List[str]] = None
    service_documentation: Optional[str] = None
    ui_locales_supported: Optional[List[str]] = None
    op_policy_uri: Optional[str] = None
    op_tos_uri: Optional[str] = None
    revocation_endpoint: Optional[str] = None
    revocation_endpoint_auth_methods_supported: Optional[List[str]] = None
    revocation_endpoint_auth_signing_alg_values_supported: Optional[List[str]] = None
    introspection_endpoint: Optional[str] = None
    introspection_endpoint_auth_methods_supported: Optional[List[str]] = None
    introspection_endpoint_auth_signing_alg_values_supported: Optional[List[str]] = None
    code_challenge_methods_supported: Optional[List[str]] = None

    @property
    def supports_dynamic_registration(self) -> bool:
        """Check if the server advertises an RFC 7591 registration endpoint."""
        return self.registration_endpoint is not None
