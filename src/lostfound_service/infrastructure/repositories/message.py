from __future__ import annotations

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.domain.entities.message import Message
from lostfound_service.domain.value_objects import keys
from lostfound_service.infrastructure.mappers import message as mapper


class KvMessageRepo:
    def __init__(self, store: KVStore) -> None:
        self._store = store

    async def add(self, message: Message) -> Message:
        await self._store.set(keys.message(message.id), mapper.entity_to_doc(message))
        return message

    async def list_for_conversation(self, conversation_id: str) -> list[Message]:
        docs = await self._store.get_by_prefix(keys.conversation_messages(conversation_id))
        messages = [mapper.doc_to_entity(doc) for doc in docs if doc]
        # the store returns prefix matches unordered
        messages.sort(key=lambda m: (m.created_at, m.id))
        return messages
