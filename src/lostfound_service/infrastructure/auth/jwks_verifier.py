from __future__ import annotations

import asyncio
import logging

import jwt
from jwt import PyJWKClient

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import UnauthorizedError
from lostfound_service.infrastructure.auth.claims import principal_from_claims

logger = logging.getLogger(__name__)


class JWKSVerifier:
    """Verify JWTs using a remote JWKS endpoint."""

    def __init__(self, jwks_url: str, audience: str | None = None) -> None:
        self._jwk_client = PyJWKClient(jwks_url)
        self._audience = audience

    async def verify(self, token: str) -> Principal:
        try:
            # key fetch is blocking HTTP, keep it off the event loop
            signing_key = await asyncio.to_thread(
                self._jwk_client.get_signing_key_from_jwt, token,
            )
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256", "ES256"],
                audience=self._audience,
                options={"verify_aud": self._audience is not None, "require": ["sub"]},
            )
        except jwt.PyJWTError as exc:
            logger.debug("JWKS verification failed", exc_info=True)
            raise UnauthorizedError(f"Invalid token: {exc}") from exc
        return principal_from_claims(payload)
