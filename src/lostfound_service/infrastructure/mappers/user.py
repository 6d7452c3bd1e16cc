from __future__ import annotations

from typing import Any

from lostfound_service.domain.entities.user import User
from lostfound_service.infrastructure.mappers._time import from_iso, to_iso


def doc_to_entity(doc: dict[str, Any]) -> User:
    return User(
        id=doc["id"],
        email=doc.get("email") or "",
        name=doc.get("name") or "",
        created_at=from_iso(doc["createdAt"]),
    )


def entity_to_doc(entity: User) -> dict[str, Any]:
    return {
        "id": entity.id,
        "email": entity.email,
        "name": entity.name,
        "createdAt": to_iso(entity.created_at),
    }
