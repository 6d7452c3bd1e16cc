from __future__ import annotations

import jwt

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import UnauthorizedError
from lostfound_service.infrastructure.auth.claims import principal_from_claims


class HS256Verifier:
    """Verify JWTs signed with a shared secret (Supabase-style access tokens)."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str | None = None,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience

    async def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                options={"verify_aud": self._audience is not None, "require": ["sub"]},
            )
        except jwt.PyJWTError as exc:
            raise UnauthorizedError(f"Invalid token: {exc}") from exc
        return principal_from_claims(payload)
