"""FastAPI dependencies for resolving the Clerk session of a request."""

import logging

from fastapi import Depends, Request
from jose import JWTError

from src.linkshort.auth.exceptions import IdentityProviderError, SignInRequired
from src.linkshort.auth.models import SessionState, SessionUser
from src.linkshort.config import LANDING_PATH, settings
from src.linkshort.services import PostHogService

logger = logging.getLogger(__name__)

# Global JWT validator instance (initialized in main.py startup)
_jwt_validator = None


def set_jwt_validator(validator):
    """
    Set the global JWT validator instance.

    Called during application startup to initialize the JWT validator.

    Args:
        validator: JWTValidator instance
    """
    global _jwt_validator
    _jwt_validator = validator


def get_jwt_validator():
    """
    Get the global JWT validator instance.

    Raises:
        RuntimeError: If JWT validator not initialized
    """
    if _jwt_validator is None:
        raise RuntimeError(
            "JWT validator not initialized. "
            "Ensure application startup calls set_jwt_validator()."
        )
    return _jwt_validator


def extract_session_token(request: Request) -> str | None:
    """Return the session token from the Clerk cookie or a Bearer header, if any."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


async def resolve_session_user(token: str) -> SessionUser | None:
    """
    Verify a session token and build the session user.

    Invalid tokens mean "signed out" and return None.

    Raises:
        IdentityProviderError: If the identity provider could not be consulted
    """
    try:
        validator = get_jwt_validator()
        claims = await validator.verify_token(token)
    except JWTError as e:
        logger.warning(f"Session token rejected: {e}", extra={"error": str(e)})
        PostHogService().capture(
            distinct_id="anonymous",
            event="authentication_failed",
            properties={"error": "jwt_verification_failed", "details": str(e)},
        )
        return None
    except Exception as e:
        raise IdentityProviderError(f"Identity provider unavailable: {e}") from e

    user_id = claims.get("sub")
    if not user_id:
        logger.warning(
            "Session token rejected: missing user ID",
            extra={"error_type": "missing_sub_claim"},
        )
        PostHogService().capture(
            distinct_id="anonymous",
            event="authentication_failed",
            properties={"error": "missing_sub_claim"},
        )
        return None

    return SessionUser(id=str(user_id), session_id=claims.get("sid"), claims=claims)


async def get_session_state(request: Request) -> SessionState:
    """
    Resolve the session for the current request.

    FastAPI caches this dependency per request, so the guard and the shell
    share a single verification.

    Returns:
        SessionState with the user (or None) and whether the provider failed
    """
    token = extract_session_token(request)
    if token is None:
        return SessionState()

    try:
        user = await resolve_session_user(token)
    except IdentityProviderError as e:
        logger.error(
            f"Session resolution failed: {e}",
            exc_info=True,
            extra={"error_type": "identity_provider_failed", "path": request.url.path},
        )
        PostHogService().capture(
            distinct_id="anonymous",
            event="authentication_failed",
            properties={"error": "identity_provider_failed"},
        )
        return SessionState(provider_failed=True)

    return SessionState(user=user)


async def get_optional_user(
    state: SessionState = Depends(get_session_state),
) -> SessionUser | None:
    """Current session user, or None when signed out or the provider failed."""
    return state.user


async def get_current_user(
    state: SessionState = Depends(get_session_state),
) -> SessionUser:
    """
    Require an active session.

    Fails closed: a provider failure is treated the same as no session.

    Raises:
        SignInRequired: If no session is present; the app turns it into a redirect

    Example:
        @router.get("/dashboard")
        async def dashboard(current_user: SessionUser = Depends(get_current_user)):
            ...
    """
    if state.user is None:
        logger.info(
            "No active session, redirecting to landing page",
            extra={"provider_failed": state.provider_failed},
        )
        raise SignInRequired(redirect_to=LANDING_PATH)
    return state.user
