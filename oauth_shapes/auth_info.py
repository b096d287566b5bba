"""Authenticated-request context handed to request handlers."""

import time
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


@dataclass(frozen=True)
class AuthInfo:
    """Information about an access token that was already verified elsewhere.

    Middleware builds this after checking the token and attaches it to the
    request; nothing here inspects or trusts the token itself.
    """
    token: str
    client_id: str
    scopes: Tuple[str, ...]  # order kept for audit logs
    expires_at: Optional[int] = None  # seconds since epoch
    extra: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        object.__setattr__(self, "scopes", tuple(self.scopes))

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check if the token is past expires_at. Tokens without expiry never expire."""
        if self.expires_at is None:
            return False
        if now is None:
            now = time.time()
        return now >= self.expires_at

    def has_scopes(self, *required: str) -> bool:
        return set(required).issubset(self.scopes)
