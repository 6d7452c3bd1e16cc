from __future__ import annotations

from fastapi import APIRouter

from lostfound_service.api.deps import CurrentPrincipal, ReposDep
from lostfound_service.api.v1.schemas.user import (
    RegisterProfileRequest,
    UserEnvelope,
    UserResponse,
)
from lostfound_service.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/me", response_model=UserEnvelope)
async def register_profile(
    body: RegisterProfileRequest,
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> UserEnvelope:
    user = await user_service.register_profile(body.name, principal, repos)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserEnvelope)
async def get_profile(principal: CurrentPrincipal, repos: ReposDep) -> UserEnvelope:
    user = await user_service.get_profile(principal, repos)
    return UserEnvelope(user=UserResponse.model_validate(user))
