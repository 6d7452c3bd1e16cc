from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Item:
    id: str
    owner_user_id: str
    type: str
    category: str
    title: str
    description: str
    location: str
    date: str
    image_url: str | None
    status: str
    created_at: datetime
