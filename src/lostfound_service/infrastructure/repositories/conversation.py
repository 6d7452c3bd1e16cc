from __future__ import annotations

import dataclasses
from datetime import datetime

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.domain.value_objects import keys
from lostfound_service.infrastructure.mappers import conversation as mapper


class KvConversationRepo:
    def __init__(self, store: KVStore) -> None:
        self._store = store

    async def get_by_id(self, conversation_id: str) -> Conversation | None:
        doc = await self._store.get(keys.conversation(conversation_id))
        return mapper.doc_to_entity(doc) if doc else None

    async def list_ids_for_user(self, user_id: str) -> list[str]:
        values = await self._store.get_by_prefix(keys.user_conversations(user_id))
        return [v for v in values if isinstance(v, str)]

    async def create_if_absent(self, conversation: Conversation) -> tuple[Conversation, bool]:
        entries: dict[str, object] = {
            keys.conversation(conversation.id): mapper.entity_to_doc(conversation),
        }
        for participant in conversation.participants:
            entries[keys.user_conversation(participant, conversation.id)] = conversation.id
        if await self._store.set_many_if_absent(entries):
            return conversation, True

        # Lost a race with a concurrent create: the stored record wins
        existing = await self.get_by_id(conversation.id)
        assert existing is not None
        return existing, False

    async def touch_last_message_at(
        self,
        conversation_id: str,
        ts: datetime,
    ) -> Conversation | None:
        # Read-modify-write without a lock: a concurrent send may overwrite
        # this with an older value. Message order does not depend on it.
        current = await self.get_by_id(conversation_id)
        if current is None:
            return None
        if current.last_message_at >= ts:
            return current
        updated = dataclasses.replace(current, last_message_at=ts)
        await self._store.set(keys.conversation(conversation_id), mapper.entity_to_doc(updated))
        return updated
