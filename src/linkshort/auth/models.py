"""Data models for authentication."""

from typing import Any

from pydantic import BaseModel


class SessionUser(BaseModel):
    """
    User identity extracted from a verified Clerk session token.

    Attributes:
        id: Opaque user identifier from the 'sub' claim
        session_id: Clerk session identifier from the 'sid' claim
        claims: Raw verified claims, kept for diagnostics only

    Example:
        >>> user = SessionUser(id="user_2abc", session_id="sess_2xyz")
    """

    id: str
    session_id: str | None = None
    claims: dict[str, Any] = {}


class SessionState(BaseModel):
    """Result of resolving the session for a single request."""

    user: SessionUser | None = None
    provider_failed: bool = False
