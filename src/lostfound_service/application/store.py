from __future__ import annotations

from typing import Protocol

from lostfound_service.application.repositories.conversation import ConversationRepository
from lostfound_service.application.repositories.item import ItemRepository
from lostfound_service.application.repositories.message import MessageRepository
from lostfound_service.application.repositories.user import UserRepository


class Repositories(Protocol):
    """Entity repositories sharing one KV store.

    There is no transaction spanning repositories; each write is either a
    single key or an atomic ``set_many`` / ``set_many_if_absent`` within one
    repository call.
    """

    conversations: ConversationRepository
    messages: MessageRepository
    items: ItemRepository
    users: UserRepository
