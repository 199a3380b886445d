"""Custom exceptions for authentication."""

from src.linkshort.config import LANDING_PATH


class AuthenticationError(Exception):
    """Raised when a session cannot be established for the request."""

    pass


class IdentityProviderError(AuthenticationError):
    """Raised when the identity provider itself fails (key set unreachable, bad key data, etc.)."""

    pass


class SignInRequired(AuthenticationError):
    """Raised by guarded routes when the request carries no active session."""

    def __init__(self, redirect_to: str = LANDING_PATH):
        super().__init__(f"Sign-in required, redirecting to {redirect_to}")
        self.redirect_to = redirect_to
