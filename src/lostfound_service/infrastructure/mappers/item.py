from __future__ import annotations

from typing import Any

from lostfound_service.domain.entities.item import Item
from lostfound_service.domain.value_objects.enums import ItemStatus
from lostfound_service.infrastructure.mappers._time import from_iso, to_iso


def doc_to_entity(doc: dict[str, Any]) -> Item:
    return Item(
        id=doc["id"],
        owner_user_id=doc["ownerUserId"],
        type=doc["type"],
        category=doc["category"],
        title=doc["title"],
        description=doc.get("description", ""),
        location=doc.get("location", ""),
        date=doc.get("date", ""),
        image_url=doc.get("imageUrl"),
        status=doc.get("status", ItemStatus.ACTIVE),
        created_at=from_iso(doc["createdAt"]),
    )


def entity_to_doc(entity: Item) -> dict[str, Any]:
    return {
        "id": entity.id,
        "ownerUserId": entity.owner_user_id,
        "type": entity.type,
        "category": entity.category,
        "title": entity.title,
        "description": entity.description,
        "location": entity.location,
        "date": entity.date,
        "imageUrl": entity.image_url,
        "status": entity.status,
        "createdAt": to_iso(entity.created_at),
    }
