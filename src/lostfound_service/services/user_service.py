from __future__ import annotations

import logging

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import NotFoundError, ValidationError
from lostfound_service.application.ports.clock import Clock, SystemClock
from lostfound_service.application.store import Repositories
from lostfound_service.domain.entities.user import User

logger = logging.getLogger(__name__)

_system_clock = SystemClock()


async def register_profile(
    name: str,
    principal: Principal,
    repos: Repositories,
    *,
    clock: Clock = _system_clock,
) -> User:
    """Create the caller's profile. Profiles are immutable, so a repeat call returns the stored one."""
    existing = await repos.users.get_by_id(principal.user_id)
    if existing is not None:
        return existing

    display_name = name.strip()
    if not display_name:
        raise ValidationError("Name is required")

    user = User(
        id=principal.user_id,
        email=principal.email or "",
        name=display_name,
        created_at=clock.now(),
    )
    user = await repos.users.create(user)
    logger.info("Profile created for %s", user.id)
    return user


async def get_profile(principal: Principal, repos: Repositories) -> User:
    user = await repos.users.get_by_id(principal.user_id)
    if user is None:
        raise NotFoundError("Profile not found")
    return user
