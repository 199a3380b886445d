"""Clerk signing key set: fetching, caching and key lookup by `kid`."""

import logging
import time
from typing import Any

import httpx
from jose import JWTError, jwk
from jose.backends.base import Key

logger = logging.getLogger(__name__)

# Clerk publishes RS256 keys; EC is accepted for instances that rotate to ES256
ALGORITHM_BY_KEY_TYPE = {"RSA": "RS256", "EC": "ES256"}


class UnknownSigningKeyError(JWTError):
    """The token names a key ID the identity provider does not publish."""

    pass


class JWKSCache:
    """
    In-memory copy of the identity provider's published signing keys.

    The key set is refetched when older than `cache_ttl`. A token naming an
    unpublished `kid` may force one extra refetch (the provider may have just
    rotated keys), but forced refetches are spaced at least
    `min_refresh_interval` seconds apart so forged tokens cannot turn every
    request into an outbound call. Unknown key IDs are a token problem and
    raise `UnknownSigningKeyError`; only fetch failures are provider problems.

    Example:
        >>> cache = JWKSCache("https://clerk.example.com/.well-known/jwks.json")
        >>> key = await cache.get_signing_key("ins_2abc")
    """

    def __init__(self, jwks_url: str, cache_ttl: int = 3600, min_refresh_interval: int = 60):
        self.jwks_url = jwks_url
        self.cache_ttl = cache_ttl
        self.min_refresh_interval = min_refresh_interval
        self._keys: dict[str, Key] = {}
        self._last_refresh: float | None = None
        self._last_forced_refresh: float | None = None
        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(10.0, read=30.0, connect=10.0, write=10.0)
        )

    async def get_signing_key(self, kid: Any) -> Key:
        """
        Look up the public key a session token was signed with.

        Raises:
            UnknownSigningKeyError: If `kid` is malformed or not published
            httpx.HTTPError: If the key set cannot be fetched
            ValueError: If the fetched key set is malformed
        """
        if not isinstance(kid, str) or not kid:
            raise UnknownSigningKeyError(f"Malformed key ID: {kid!r}")

        refreshed = False
        if self._is_stale():
            await self.refresh_keys()
            refreshed = True

        key = self._keys.get(kid)
        if key is None and not refreshed and self._may_force_refresh():
            logger.info(
                f"Key ID '{kid}' not cached, checking for rotated keys",
                extra={"kid": kid, "cached_kids": list(self._keys)},
            )
            self._last_forced_refresh = time.monotonic()
            await self.refresh_keys()
            key = self._keys.get(kid)

        if key is None:
            raise UnknownSigningKeyError(f"Key ID '{kid}' is not published by the identity provider")
        return key

    async def refresh_keys(self) -> None:
        """
        Replace the cached key set with the provider's current one.

        Raises:
            httpx.HTTPError: If the request fails
            ValueError: If the response is not a key set
        """
        payload = await self._fetch_key_set()
        self._keys = self._parse_key_set(payload)
        self._last_refresh = time.monotonic()
        logger.info(
            "JWKS cache refreshed",
            extra={"key_ids": list(self._keys), "ttl_seconds": self.cache_ttl},
        )

    async def _fetch_key_set(self) -> Any:
        logger.info(f"Fetching JWKS from {self.jwks_url}")
        try:
            response = await self._http_client.get(self.jwks_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to fetch JWKS from {self.jwks_url}: {e}",
                exc_info=True,
                extra={"error_type": "jwks_fetch_failed"},
            )
            raise
        return response.json()

    def _parse_key_set(self, payload: Any) -> dict[str, Key]:
        entries = payload.get("keys") if isinstance(payload, dict) else None
        if not isinstance(entries, list):
            raise ValueError(f"JWKS response from {self.jwks_url} has no 'keys' list")

        if not entries:
            logger.warning(
                "JWKS response contains no keys; every session token will be rejected",
                extra={"jwks_url": self.jwks_url},
            )

        keys: dict[str, Key] = {}
        for entry in entries:
            kid = entry.get("kid")
            if not isinstance(kid, str) or not kid:
                logger.warning("Skipping JWKS entry without a usable 'kid'")
                continue
            if entry.get("use", "sig") != "sig":
                logger.debug(f"Skipping non-signing key {kid}", extra={"kid": kid})
                continue

            algorithm = ALGORITHM_BY_KEY_TYPE.get(entry.get("kty"), entry.get("alg", "RS256"))
            keys[kid] = jwk.construct(entry, algorithm=algorithm)
        return keys

    def _is_stale(self) -> bool:
        if self._last_refresh is None:
            return True
        return time.monotonic() - self._last_refresh >= self.cache_ttl

    def _may_force_refresh(self) -> bool:
        if self._last_forced_refresh is None:
            return True
        return time.monotonic() - self._last_forced_refresh >= self.min_refresh_interval

    async def close(self) -> None:
        """Close the HTTP client. Called during application shutdown."""
        await self._http_client.aclose()
        logger.info("JWKS cache closed")
