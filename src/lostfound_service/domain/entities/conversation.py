from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Conversation:
    """Thread between exactly two users about one item.

    ``participants`` is always sorted ascending; ``id`` is derived from it
    and the item id (see ``domain.value_objects.ids``).
    """

    id: str
    item_id: str
    participants: tuple[str, str]
    created_at: datetime
    last_message_at: datetime

    def has_participant(self, user_id: str) -> bool:
        return user_id in self.participants

    def other_participant(self, user_id: str) -> str | None:
        for participant in self.participants:
            if participant != user_id:
                return participant
        return None
