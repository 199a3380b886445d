"""Authentication module for Clerk session verification."""

from src.linkshort.auth.dependencies import (
    get_current_user,
    get_jwt_validator,
    get_optional_user,
    get_session_state,
    set_jwt_validator,
)
from src.linkshort.auth.exceptions import AuthenticationError, IdentityProviderError, SignInRequired
from src.linkshort.auth.jwks import JWKSCache
from src.linkshort.auth.jwt_validator import JWTValidator
from src.linkshort.auth.models import SessionState, SessionUser

__all__ = [
    "get_current_user",
    "get_optional_user",
    "get_session_state",
    "get_jwt_validator",
    "set_jwt_validator",
    "JWKSCache",
    "JWTValidator",
    "AuthenticationError",
    "IdentityProviderError",
    "SignInRequired",
    "SessionState",
    "SessionUser",
]
