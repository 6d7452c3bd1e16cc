"""Seed development data: two users, a found item, and a short conversation."""
from __future__ import annotations

import asyncio
import logging

from lostfound_service.application.dto.item import NewItemDTO
from lostfound_service.application.dto.principal import Principal
from lostfound_service.config import settings
from lostfound_service.domain.value_objects.enums import ItemType
from lostfound_service.infrastructure.kv.factory import open_kv_store
from lostfound_service.infrastructure.store import KvRepositories
from lostfound_service.services import (
    conversation_service,
    item_service,
    message_service,
    user_service,
)

logger = logging.getLogger(__name__)

FINDER = Principal(user_id="dev-finder", email="finder@campus.test")
OWNER = Principal(user_id="dev-owner", email="owner@campus.test")


async def seed() -> None:
    store = await open_kv_store(settings)
    repos = KvRepositories(store)
    try:
        await user_service.register_profile("Finley Finder", FINDER, repos)
        await user_service.register_profile("Olive Owner", OWNER, repos)

        item = await item_service.create_item(
            NewItemDTO(
                type=ItemType.FOUND,
                category="bags",
                title="Blue Backpack",
                description="Navy backpack with a keychain, left in the library",
                location="Main Library, 2nd floor",
                date="2026-10-17",
            ),
            FINDER,
            repos,
        )
        conv = await conversation_service.start_conversation(item.id, OWNER, repos)

        exchange = [
            (OWNER, "Hi! I think that backpack is mine."),
            (FINDER, "Is there anything on the keychain?"),
            (OWNER, "A small brass bike key."),
            (FINDER, "That's it. I'm at the library desk until 5."),
        ]
        for sender, text in exchange:
            await message_service.send_message(conv.id, sender, text, repos)

        logger.info("Seeded conversation %s with %d messages", conv.id, len(exchange))
    finally:
        await store.close()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
