from __future__ import annotations

from dataclasses import dataclass

from lostfound_service.domain.value_objects.enums import ItemType


@dataclass(frozen=True, slots=True)
class NewItemDTO:
    type: ItemType
    category: str
    title: str
    description: str
    location: str
    date: str
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class ItemFilterDTO:
    type: ItemType | None = None
    category: str | None = None
