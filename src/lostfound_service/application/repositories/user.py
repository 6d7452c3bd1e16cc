from __future__ import annotations

from typing import Protocol

from lostfound_service.domain.entities.user import User


class UserRepository(Protocol):
    async def get_by_id(self, user_id: str) -> User | None: ...

    async def create(self, user: User) -> User: ...
