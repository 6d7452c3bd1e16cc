from __future__ import annotations

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.domain.entities.user import User
from lostfound_service.domain.value_objects import keys
from lostfound_service.infrastructure.mappers import user as mapper


class KvUserRepo:
    def __init__(self, store: KVStore) -> None:
        self._store = store

    async def get_by_id(self, user_id: str) -> User | None:
        doc = await self._store.get(keys.user(user_id))
        return mapper.doc_to_entity(doc) if doc else None

    async def create(self, user: User) -> User:
        await self._store.set(keys.user(user.id), mapper.entity_to_doc(user))
        return user
