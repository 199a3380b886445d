"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

LANDING_PATH = "/"
DASHBOARD_PATH = "/dashboard"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    debug: bool = False
    log_level: str = "INFO"

    # Site Metadata
    site_title: str = "Link Shortener - Shorten Links, Amplify Reach"
    site_description: str = (
        "Transform long URLs into short, memorable links. "
        "Track performance, manage campaigns, and share with confidence."
    )

    # Clerk Configuration
    clerk_frontend_api_url: str = "https://clerk.example.com"
    clerk_jwks_url: str = ""  # Derived from the frontend API URL when empty
    clerk_authorized_parties: str = "http://localhost:8000,http://localhost:3000"
    session_cookie_name: str = "__session"

    # Hosted account pages
    sign_in_url: str = "https://accounts.example.com/sign-in"
    sign_up_url: str = "https://accounts.example.com/sign-up"
    user_profile_url: str = "https://accounts.example.com/user"

    # JWT Verification Configuration
    jwks_cache_ttl_seconds: int = 3600  # 1 hour
    jwks_min_refresh_interval_seconds: int = 60  # Floor between forced refetches on unknown kid
    jwt_leeway_seconds: int = 10  # Clock skew tolerance

    # PostHog Configuration
    posthog_api_key: str | None = None
    posthog_host: str = "https://app.posthog.com"

    @property
    def jwks_url(self) -> str:
        """JWKS endpoint of the Clerk instance."""
        if self.clerk_jwks_url:
            return self.clerk_jwks_url
        return f"{self.clerk_frontend_api_url.rstrip('/')}/.well-known/jwks.json"

    @property
    def authorized_parties(self) -> list[str]:
        """Origins allowed in the session token's `azp` claim."""
        return [p.strip() for p in self.clerk_authorized_parties.split(",") if p.strip()]


settings = Settings()
