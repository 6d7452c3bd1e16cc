from __future__ import annotations

from typing import Protocol

from lostfound_service.application.dto.principal import Principal


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> Principal:
        """Return the caller identity or raise ``UnauthorizedError``."""
        ...
