from __future__ import annotations

from typing import Any

from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.infrastructure.mappers._time import from_iso, to_iso


def doc_to_entity(doc: dict[str, Any]) -> Conversation:
    first, second = doc["participants"]
    return Conversation(
        id=doc["id"],
        item_id=doc["itemId"],
        participants=(first, second),
        created_at=from_iso(doc["createdAt"]),
        last_message_at=from_iso(doc["lastMessageAt"]),
    )


def entity_to_doc(entity: Conversation) -> dict[str, Any]:
    return {
        "id": entity.id,
        "itemId": entity.item_id,
        "participants": list(entity.participants),
        "createdAt": to_iso(entity.created_at),
        "lastMessageAt": to_iso(entity.last_message_at),
    }
