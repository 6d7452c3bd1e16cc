from __future__ import annotations

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.domain.entities.item import Item
from lostfound_service.domain.value_objects import keys
from lostfound_service.infrastructure.mappers import item as mapper


class KvItemRepo:
    def __init__(self, store: KVStore) -> None:
        self._store = store

    async def get_by_id(self, item_id: str) -> Item | None:
        doc = await self._store.get(keys.item(item_id))
        return mapper.doc_to_entity(doc) if doc else None

    async def list_all(self) -> list[Item]:
        docs = await self._store.get_by_prefix(keys.all_items())
        return [mapper.doc_to_entity(doc) for doc in docs if doc]

    async def list_ids_for_user(self, user_id: str) -> list[str]:
        values = await self._store.get_by_prefix(keys.user_items(user_id))
        return [v for v in values if isinstance(v, str)]

    async def create(self, item: Item) -> Item:
        await self._store.set_many(
            {
                keys.item(item.id): mapper.entity_to_doc(item),
                keys.user_item(item.owner_user_id, item.id): item.id,
            }
        )
        return item

    async def save(self, item: Item) -> Item:
        await self._store.set(keys.item(item.id), mapper.entity_to_doc(item))
        return item
