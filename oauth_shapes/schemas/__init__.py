"""OAuth wire schemas and the registry of artifact kinds."""

from typing import Dict, Type

from oauth_shapes.schemas.base import AdditionalFields, WireSchema, merge, wire_config
from oauth_shapes.schemas.dcr import (
    ClientInformation,
    ClientInformationFull,
    ClientMetadata,
    ClientRegistrationError,
)
from oauth_shapes.schemas.metadata import AuthorizationServerMetadata
from oauth_shapes.schemas.token import ErrorResponse, TokenResponse, TokenRevocationRequest

SCHEMAS: Dict[str, Type[WireSchema]] = {
    "authorization-server-metadata": AuthorizationServerMetadata,
    "token-response": TokenResponse,
    "error-response": ErrorResponse,
    "client-metadata": ClientMetadata,
    "client-information": ClientInformation,
    "client-information-full": ClientInformationFull,
    "client-registration-error": ClientRegistrationError,
    "token-revocation-request": TokenRevocationRequest,
}


def get_schema(kind: str) -> Type[WireSchema]:
    """Look up a schema by artifact kind, e.g. ``token-response``."""
    try:
        return SCHEMAS[kind]
    except KeyError:
        known = ", ".join(sorted(SCHEMAS))
        raise ValueError(f"Unknown artifact kind '{kind}' (known: {known})") from None


__all__ = [
    "AdditionalFields",
    "AuthorizationServerMetadata",
    "ClientInformation",
    "ClientInformationFull",
    "ClientMetadata",
    "ClientRegistrationError",
    "ErrorResponse",
    "SCHEMAS",
    "TokenResponse",
    "TokenRevocationRequest",
    "WireSchema",
    "get_schema",
    "merge",
    "wire_config",
]
