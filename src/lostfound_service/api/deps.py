"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import UnauthorizedError
from lostfound_service.application.ports.auth import TokenVerifier
from lostfound_service.application.ports.kv import KVStore
from lostfound_service.application.store import Repositories
from lostfound_service.config import settings
from lostfound_service.infrastructure.auth.hs256_verifier import HS256Verifier
from lostfound_service.infrastructure.auth.jwks_verifier import JWKSVerifier
from lostfound_service.infrastructure.store import KvRepositories

# auto_error=False so a missing header becomes our 401 instead of FastAPI's default
_bearer_scheme = HTTPBearer(auto_error=False)


def get_kv_store(request: Request) -> KVStore:
    return request.app.state.kv_store


KVStoreDep = Annotated[KVStore, Depends(get_kv_store)]


def get_repositories(store: KVStoreDep) -> Repositories:
    return KvRepositories(store)


ReposDep = Annotated[Repositories, Depends(get_repositories)]


def _get_verifier() -> TokenVerifier:
    if settings.JWT_VERIFY_MODE == "jwks":
        assert settings.JWKS_URL, "JWKS_URL must be set when JWT_VERIFY_MODE=jwks"
        return JWKSVerifier(settings.JWKS_URL, audience=settings.JWT_AUDIENCE)
    return HS256Verifier(
        settings.JWT_SECRET,
        settings.JWT_ALGORITHM,
        audience=settings.JWT_AUDIENCE,
    )


_verifier: TokenVerifier | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = _get_verifier()
    return _verifier


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_bearer_scheme)],
    verifier: Annotated[TokenVerifier, Depends(get_verifier)],
) -> Principal:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing bearer token")
    return await verifier.verify(credentials.credentials)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
