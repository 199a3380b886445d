"""Local verification of Clerk session tokens using JWKS."""

import logging
from typing import Any

from jose import JWTError, jwt

from src.linkshort.auth.jwks import JWKSCache, UnknownSigningKeyError

logger = logging.getLogger(__name__)

SUPPORTED_ALGORITHMS = ["RS256", "ES256"]


class JWTValidator:
    """
    Verifies session tokens locally against the provider's published keys.

    Validates signature, expiration, not-before, issued-at and issuer. Clerk
    session tokens carry no audience; instead the 'azp' (authorized party)
    claim names the origin that requested the token and is checked against a
    configured allow-list.

    Attributes:
        jwks_cache: JWKS cache instance for fetching signing keys
        issuer: Expected issuer (iss claim), the Clerk frontend API URL
        authorized_parties: Origins accepted in the azp claim (empty = any)
        leeway: Clock skew tolerance in seconds (default: 10)

    Example:
        >>> validator = JWTValidator(jwks_cache, "https://clerk.example.com")
        >>> claims = await validator.verify_token(session_token)
        >>> user_id = claims["sub"]
    """

    def __init__(
        self,
        jwks_cache: JWKSCache,
        issuer: str,
        authorized_parties: list[str] | None = None,
        leeway: int = 10,
    ):
        self.jwks_cache = jwks_cache
        self.issuer = issuer
        self.authorized_parties = authorized_parties or []
        self.leeway = leeway

    async def verify_token(self, token: str) -> dict[str, Any]:
        """
        Verify a session token and return its claims.

        Steps:
        1. Read the key ID (kid) from the unverified header
        2. Fetch the signing key from the JWKS cache
        3. Verify signature and registered claims (exp, nbf, iat, iss)
        4. Check the azp claim against the authorized parties

        Args:
            token: Session token string (without "Bearer " prefix)

        Returns:
            Dictionary of verified claims (sub, sid, iss, azp, exp, iat, ...)

        Raises:
            JWTError: If the token is invalid, expired, fails verification,
                or names a key the provider does not publish
            httpx.HTTPError: If the key set cannot be fetched
            ValueError: If the provider's key set is malformed
        """
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError as e:
            logger.warning(
                f"Session token header unreadable: {e}",
                extra={"error_type": "jwt_header_invalid", "error": str(e)},
            )
            raise

        kid = unverified_header.get("kid")
        if not isinstance(kid, str) or not kid:
            raise JWTError("JWT header missing or malformed 'kid' (key ID)")

        try:
            signing_key = await self.jwks_cache.get_signing_key(kid)
        except UnknownSigningKeyError as e:
            logger.warning(
                f"Session token signed with unknown key: {e}",
                extra={"error_type": "jwt_unknown_kid", "kid": kid},
            )
            raise

        try:
            claims = jwt.decode(
                token,
                signing_key,
                algorithms=SUPPORTED_ALGORITHMS,
                issuer=self.issuer,
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                    "verify_aud": False,
                    "verify_iss": True,
                    "require_exp": True,
                    "require_iat": True,
                    "leeway": self.leeway,
                },
            )
            self._check_authorized_party(claims)

        except JWTError as e:
            logger.warning(
                f"JWT verification failed: {e}",
                extra={"error_type": "jwt_verification_failed", "error": str(e)},
            )
            raise

        logger.debug(
            "JWT verified successfully",
            extra={
                "user_id": claims.get("sub"),
                "kid": kid,
                "exp": claims.get("exp"),
            },
        )
        return claims

    def _check_authorized_party(self, claims: dict[str, Any]) -> None:
        azp = claims.get("azp")
        if azp and self.authorized_parties and azp not in self.authorized_parties:
            raise JWTError(f"Invalid 'azp' claim: {azp}")
