from __future__ import annotations

import asyncio
import logging

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.dto.views import ConversationView
from lostfound_service.application.exceptions import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from lostfound_service.application.policies.permissions import assert_conversation_access
from lostfound_service.application.ports.clock import Clock, SystemClock
from lostfound_service.application.store import Repositories
from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.domain.value_objects.ids import (
    derive_conversation_id,
    sorted_participants,
)
from lostfound_service.services import composer

logger = logging.getLogger(__name__)

_system_clock = SystemClock()


async def start_conversation(
    item_id: str,
    principal: Principal,
    repos: Repositories,
    *,
    clock: Clock = _system_clock,
) -> Conversation:
    """Return the conversation between the caller and the item's owner, creating it once.

    The id is derived from the sorted user pair and the item, so repeated
    calls (from either side) resolve to the same record and leave it untouched.
    Concurrent first calls race on a write-if-absent; the loser returns the
    winner's record.
    """
    if not item_id or not item_id.strip():
        raise ValidationError("itemId is required")

    item = await repos.items.get_by_id(item_id)
    if item is None:
        raise NotFoundError("Item not found")
    if item.owner_user_id == principal.user_id:
        raise ForbiddenError("Cannot start a conversation about your own item")

    conversation_id = derive_conversation_id(principal.user_id, item.owner_user_id, item.id)
    existing = await repos.conversations.get_by_id(conversation_id)
    if existing is not None:
        return existing

    now = clock.now()
    conversation = Conversation(
        id=conversation_id,
        item_id=item.id,
        participants=sorted_participants(principal.user_id, item.owner_user_id),
        created_at=now,
        last_message_at=now,
    )
    conversation, created = await repos.conversations.create_if_absent(conversation)
    if created:
        logger.info("Conversation %s created for item %s", conversation.id, item.id)
    return conversation


async def list_conversations_for(
    principal: Principal,
    repos: Repositories,
) -> list[ConversationView]:
    """Caller's conversations, most recently active first."""
    conversation_ids = await repos.conversations.list_ids_for_user(principal.user_id)
    resolved = await asyncio.gather(
        *(repos.conversations.get_by_id(cid) for cid in set(conversation_ids))
    )
    # index entries can outlive a failed or partial conversation write
    conversations = [
        c for c in resolved if c is not None and c.has_participant(principal.user_id)
    ]
    conversations.sort(key=lambda c: (c.last_message_at, c.id), reverse=True)
    return await composer.compose_conversations(
        conversations, principal.user_id, repos.items, repos.users,
    )


async def get_conversation(
    conversation_id: str,
    principal: Principal,
    repos: Repositories,
) -> Conversation:
    """Load a conversation the caller participates in (404 missing, 403 outsider)."""
    conversation = await repos.conversations.get_by_id(conversation_id)
    return assert_conversation_access(principal, conversation)
