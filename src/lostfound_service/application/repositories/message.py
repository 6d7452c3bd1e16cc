from __future__ import annotations

from typing import Protocol

from lostfound_service.domain.entities.message import Message


class MessageRepository(Protocol):
    async def add(self, message: Message) -> Message: ...

    async def list_for_conversation(self, conversation_id: str) -> list[Message]:
        """Full history, oldest first."""
        ...
