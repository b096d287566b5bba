import pytest

from oauth_shapes.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def metadata_document():
    return {
        "issuer": "https://auth.example.com",
        "authorization_endpoint": "https://auth.example.com/authorize",
        "token_endpoint": "https://auth.example.com/token",
        "registration_endpoint": "https://auth.example.com/register",
        "response_types_supported": ["code"],
        "grant_types_supported": ["authorization_code", "refresh_token"],
        "code_challenge_methods_supported": ["S256"],
    }


@pytest.fixture
def token_document():
    return {
        "access_token": "at_abc",
        "token_type": "Bearer",
        "expires_in": 3600,
        "scope": "mcp:tools read",
        "refresh_token": "rt_xyz",
    }
