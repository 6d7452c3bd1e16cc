from __future__ import annotations

import logging
from datetime import timedelta

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import ValidationError
from lostfound_service.application.ports.clock import Clock, SystemClock
from lostfound_service.application.store import Repositories
from lostfound_service.config import settings
from lostfound_service.domain.entities.message import Message
from lostfound_service.domain.value_objects.ids import new_message_id
from lostfound_service.services import conversation_service

logger = logging.getLogger(__name__)

_system_clock = SystemClock()
_TICK = timedelta(microseconds=1)


async def send_message(
    conversation_id: str,
    principal: Principal,
    text: str | None,
    repos: Repositories,
    *,
    clock: Clock = _system_clock,
    max_length: int | None = None,
) -> Message:
    """Append a message and bump the conversation's ``last_message_at``.

    ``created_at`` is forced strictly past the conversation's previous
    ``last_message_at`` so back-to-back sends keep their order even when the
    wall clock does not advance or steps backwards.
    """
    conversation = await conversation_service.get_conversation(conversation_id, principal, repos)

    body = (text or "").strip()
    if not body:
        raise ValidationError("Message text must not be empty")
    limit = max_length if max_length is not None else settings.MESSAGE_MAX_LENGTH
    if len(body) > limit:
        raise ValidationError(f"Message text exceeds {limit} characters")

    created_at = max(clock.now(), conversation.last_message_at + _TICK)
    msg = Message(
        id=new_message_id(conversation.id, created_at),
        conversation_id=conversation.id,
        sender_id=principal.user_id,
        text=body,
        created_at=created_at,
    )
    msg = await repos.messages.add(msg)
    await repos.conversations.touch_last_message_at(conversation.id, msg.created_at)
    logger.debug("Message %s appended to %s", msg.id, conversation.id)
    return msg


async def list_messages(
    conversation_id: str,
    principal: Principal,
    repos: Repositories,
) -> list[Message]:
    """Whole history of the conversation, oldest first."""
    await conversation_service.get_conversation(conversation_id, principal, repos)
    return await repos.messages.list_for_conversation(conversation_id)
