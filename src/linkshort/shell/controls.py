"""Session-conditional header controls for the page shell."""

from pydantic import BaseModel, model_validator

from src.linkshort.auth.models import SessionUser
from src.linkshort.config import settings


class AuthLinks(BaseModel):
    """Sign-in and sign-up affordances shown to signed-out visitors."""

    sign_in_url: str
    sign_up_url: str


class AccountControl(BaseModel):
    """Account menu shown to signed-in users."""

    user_id: str
    profile_url: str


class ShellControls(BaseModel):
    """
    Header controls of the shared layout.

    Exactly one of `auth_links` and `account` is set.
    """

    auth_links: AuthLinks | None = None
    account: AccountControl | None = None

    @model_validator(mode="after")
    def _exactly_one_control_set(self) -> "ShellControls":
        if (self.auth_links is None) == (self.account is None):
            raise ValueError("shell must carry exactly one of auth_links or account")
        return self

    @property
    def signed_in(self) -> bool:
        return self.account is not None


def build_shell(user: SessionUser | None) -> ShellControls:
    """Pick the header control set for the given session user."""
    if user is None:
        return ShellControls(
            auth_links=AuthLinks(
                sign_in_url=settings.sign_in_url,
                sign_up_url=settings.sign_up_url,
            )
        )
    return ShellControls(
        account=AccountControl(user_id=user.id, profile_url=settings.user_profile_url)
    )
