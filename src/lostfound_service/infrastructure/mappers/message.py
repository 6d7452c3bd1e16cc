from __future__ import annotations

from typing import Any

from lostfound_service.domain.entities.message import Message
from lostfound_service.infrastructure.mappers._time import from_iso, to_iso


def doc_to_entity(doc: dict[str, Any]) -> Message:
    return Message(
        id=doc["id"],
        conversation_id=doc["conversationId"],
        sender_id=doc["senderId"],
        text=doc["text"],
        created_at=from_iso(doc["createdAt"]),
    )


def entity_to_doc(entity: Message) -> dict[str, Any]:
    return {
        "id": entity.id,
        "conversationId": entity.conversation_id,
        "senderId": entity.sender_id,
        "text": entity.text,
        "createdAt": to_iso(entity.created_at),
    }
