from __future__ import annotations

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.infrastructure.repositories.conversation import KvConversationRepo
from lostfound_service.infrastructure.repositories.item import KvItemRepo
from lostfound_service.infrastructure.repositories.message import KvMessageRepo
from lostfound_service.infrastructure.repositories.user import KvUserRepo


class KvRepositories:
    """Concrete repository set over a single KV store."""

    def __init__(self, store: KVStore) -> None:
        self.store = store
        self.conversations = KvConversationRepo(store)
        self.messages = KvMessageRepo(store)
        self.items = KvItemRepo(store)
        self.users = KvUserRepo(store)
