"""Shared test fixtures."""
from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any


def _load_env_test() -> None:
    env_file = Path(__file__).resolve().parent.parent / ".env.test"
    if not env_file.exists():
        return
    for raw in env_file.read_text().splitlines():
        key, sep, value = raw.strip().partition("=")
        if sep and not key.startswith("#"):
            os.environ.setdefault(key.strip(), value.strip())


# settings are read at import time
_load_env_test()

import pytest  # noqa: E402

from lostfound_service.application.dto.principal import Principal  # noqa: E402
from lostfound_service.application.exceptions import PersistenceError  # noqa: E402
from lostfound_service.domain.entities.item import Item  # noqa: E402
from lostfound_service.domain.entities.user import User  # noqa: E402
from lostfound_service.domain.value_objects.enums import ItemStatus, ItemType  # noqa: E402
from lostfound_service.infrastructure.store import KvRepositories  # noqa: E402

T0 = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


@dataclass
class FakeKVStore:
    """In-memory KVStore. Prefix scans come back in reverse key order so callers must sort."""

    data: dict[str, Any] = field(default_factory=dict)
    fail: bool = False
    write_count: int = 0

    def _check(self) -> None:
        if self.fail:
            raise PersistenceError("store offline")

    async def get(self, key: str) -> Any | None:
        self._check()
        return copy.deepcopy(self.data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._check()
        self.write_count += 1
        self.data[key] = copy.deepcopy(value)

    async def set_many(self, entries: dict[str, Any]) -> None:
        self._check()
        self.write_count += 1
        self.data.update(copy.deepcopy(entries))

    async def set_many_if_absent(self, entries: dict[str, Any]) -> bool:
        self._check()
        if any(key in self.data for key in entries):
            return False
        self.write_count += 1
        self.data.update(copy.deepcopy(entries))
        return True

    async def get_by_prefix(self, prefix: str) -> list[Any]:
        self._check()
        matched = sorted((k for k in self.data if k.startswith(prefix)), reverse=True)
        return [copy.deepcopy(self.data[k]) for k in matched]

    async def ping(self) -> bool:
        return not self.fail

    async def close(self) -> None:
        pass

    def keys_with_prefix(self, prefix: str) -> list[str]:
        return sorted(k for k in self.data if k.startswith(prefix))


class FrozenClock:
    def __init__(self, now: datetime = T0) -> None:
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current = self.current + timedelta(**kwargs)


@pytest.fixture
def kv() -> FakeKVStore:
    return FakeKVStore()


@pytest.fixture
def repos(kv: FakeKVStore) -> KvRepositories:
    return KvRepositories(kv)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def alice() -> Principal:
    return Principal(user_id="alice", email="alice@campus.test")


@pytest.fixture
def bob() -> Principal:
    return Principal(user_id="bob", email="bob@campus.test")


@pytest.fixture
def carol() -> Principal:
    return Principal(user_id="carol", email="carol@campus.test")


def make_item(
    *,
    item_id: str = "item-1",
    owner: str = "bob",
    title: str = "Blue Backpack",
    type: str = ItemType.FOUND,
    category: str = "bags",
    created_at: datetime = T0,
    status: str = ItemStatus.ACTIVE,
) -> Item:
    return Item(
        id=item_id,
        owner_user_id=owner,
        type=type,
        category=category,
        title=title,
        description="Navy backpack",
        location="Library",
        date="2026-10-17",
        image_url=None,
        status=status,
        created_at=created_at,
    )


def make_user(user_id: str, name: str | None = None) -> User:
    return User(
        id=user_id,
        email=f"{user_id}@campus.test",
        name=name or user_id.title(),
        created_at=T0,
    )
