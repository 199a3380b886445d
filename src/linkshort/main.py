"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from src.linkshort.auth import JWKSCache, JWTValidator, SignInRequired, set_jwt_validator
from src.linkshort.config import settings
from src.linkshort.features.dashboard import router as dashboard_router
from src.linkshort.features.landing import router as landing_router

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

# Global JWKS cache instance for cleanup
_jwks_cache = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup and shutdown)."""
    global _jwks_cache

    # Startup
    logger.info("Initializing JWT validator with local verification")
    _jwks_cache = JWKSCache(
        jwks_url=settings.jwks_url,
        cache_ttl=settings.jwks_cache_ttl_seconds,
        min_refresh_interval=settings.jwks_min_refresh_interval_seconds,
    )
    jwt_validator = JWTValidator(
        jwks_cache=_jwks_cache,
        issuer=settings.clerk_frontend_api_url,
        authorized_parties=settings.authorized_parties,
        leeway=settings.jwt_leeway_seconds,
    )
    set_jwt_validator(jwt_validator)

    # Keys are fetched lazily on first use if the identity provider is down now
    try:
        await _jwks_cache.refresh_keys()
        logger.info(
            "JWT validator initialized successfully",
            extra={
                "jwks_url": settings.jwks_url,
                "cache_ttl": settings.jwks_cache_ttl_seconds,
                "issuer": settings.clerk_frontend_api_url,
            },
        )
    except Exception as e:
        logger.error(
            f"Initial JWKS fetch failed, guarded pages will redirect until it succeeds: {e}",
            exc_info=True,
            extra={"error_type": "jwks_prefetch_failed"},
        )

    yield

    # Shutdown
    set_jwt_validator(None)
    if _jwks_cache is not None:
        try:
            await _jwks_cache.close()
            logger.info("JWT validator cleanup completed")
        except Exception as e:
            logger.error(f"Error during JWT validator cleanup: {e}", exc_info=True)


app = FastAPI(
    title="Link Shortener",
    description="Landing page and dashboard for the link shortener",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(SignInRequired)
async def sign_in_required_handler(request: Request, exc: SignInRequired) -> RedirectResponse:
    """Send visitors without a session back to the public page."""
    return RedirectResponse(url=exc.redirect_to, status_code=307)


app.include_router(landing_router, tags=["landing"])
app.include_router(dashboard_router, tags=["dashboard"])


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")
