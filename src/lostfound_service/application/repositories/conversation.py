from __future__ import annotations

from datetime import datetime
from typing import Protocol

from lostfound_service.domain.entities.conversation import Conversation


class ConversationRepository(Protocol):
    async def get_by_id(self, conversation_id: str) -> Conversation | None: ...

    async def list_ids_for_user(self, user_id: str) -> list[str]:
        """Conversation ids from the user's index; may reference missing records."""
        ...

    async def create_if_absent(
        self, conversation: Conversation
    ) -> tuple[Conversation, bool]:
        """Persist the conversation and both participants' index entries in one write,
        unless the conversation already exists.

        Returns the stored conversation and whether this call created it.
        """
        ...

    async def touch_last_message_at(
        self, conversation_id: str, ts: datetime
    ) -> Conversation | None:
        """Raise ``last_message_at`` to ``ts``; never moves it backwards."""
        ...
