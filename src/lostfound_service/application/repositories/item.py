from __future__ import annotations

from typing import Protocol

from lostfound_service.domain.entities.item import Item


class ItemRepository(Protocol):
    async def get_by_id(self, item_id: str) -> Item | None: ...

    async def list_all(self) -> list[Item]: ...

    async def list_ids_for_user(self, user_id: str) -> list[str]: ...

    async def create(self, item: Item) -> Item:
        """Persist the item and the owner's index entry in one write."""
        ...

    async def save(self, item: Item) -> Item: ...
