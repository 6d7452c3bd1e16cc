"""Read models produced by the composer for presentation."""
from __future__ import annotations

from dataclasses import dataclass

from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.domain.entities.item import Item
from lostfound_service.domain.entities.message import Message

UNKNOWN_USER_NAME = "Unknown"


@dataclass(frozen=True, slots=True)
class UserSummary:
    id: str
    name: str = UNKNOWN_USER_NAME
    email: str = ""


@dataclass(frozen=True, slots=True)
class ItemView:
    item: Item
    user_name: str
    user_email: str


@dataclass(frozen=True, slots=True)
class MessageView:
    message: Message
    sender_name: str


@dataclass(frozen=True, slots=True)
class ConversationView:
    conversation: Conversation
    item: Item | None
    other_user: UserSummary | None
