from __future__ import annotations

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.dialects import postgresql

from lostfound_service.application.exceptions import PersistenceError
from lostfound_service.infrastructure.kv import codec
from lostfound_service.infrastructure.kv.redis_store import RedisKVStore, escape_glob
from lostfound_service.infrastructure.kv.sql_store import (
    _insert_if_absent,
    _select_prefix,
    _upsert,
)
from tests.conftest import T0


class StubRedis:
    """The slice of redis.asyncio.Redis used by RedisKVStore."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.scan_patterns: list[str] = []
        self.down = False

    def _check(self) -> None:
        if self.down:
            raise RedisConnectionError("connection refused")

    async def get(self, key):
        self._check()
        return self.data.get(key)

    async def set(self, key, value):
        self._check()
        self.data[key] = value

    async def mset(self, mapping):
        self._check()
        self.data.update(mapping)

    async def msetnx(self, mapping):
        self._check()
        if any(k in self.data for k in mapping):
            return False
        self.data.update(mapping)
        return True

    async def scan_iter(self, match, count):
        self._check()
        self.scan_patterns.append(match)
        prefix = match[:-1].replace("\\", "")
        matched = [k for k in self.data if k.startswith(prefix)]
        # SCAN may return a key more than once
        for key in matched + matched[:1]:
            yield key

    async def mget(self, keys):
        self._check()
        return [self.data.get(k) for k in keys]

    async def ping(self):
        self._check()
        return True

    async def aclose(self):
        pass


def test_escape_glob():
    assert escape_glob("message:a_b_item-1:") == "message:a_b_item-1:"
    assert escape_glob("user*[x]?:") == "user\\*\\[x\\]\\?:"


@pytest.mark.asyncio
async def test_redis_round_trip_and_missing_key():
    store = RedisKVStore(StubRedis())

    await store.set("user:u1", {"id": "u1", "name": "U"})

    assert await store.get("user:u1") == {"id": "u1", "name": "U"}
    assert await store.get("user:missing") is None


@pytest.mark.asyncio
async def test_redis_prefix_scan_returns_values_once():
    redis = StubRedis()
    store = RedisKVStore(redis)
    await store.set_many({
        "userConversation:u1:c1": "c1",
        "userConversation:u1:c2": "c2",
        "userConversation:u2:c3": "c3",
    })

    values = await store.get_by_prefix("userConversation:u1:")

    assert sorted(values) == ["c1", "c2"]
    assert redis.scan_patterns == ["userConversation:u1:*"]


@pytest.mark.asyncio
async def test_redis_empty_prefix_scan():
    assert await RedisKVStore(StubRedis()).get_by_prefix("item:") == []


@pytest.mark.asyncio
async def test_redis_failures_become_persistence_errors():
    redis = StubRedis()
    redis.down = True
    store = RedisKVStore(redis)

    with pytest.raises(PersistenceError):
        await store.get("item:1")
    with pytest.raises(PersistenceError):
        await store.set("item:1", {})
    with pytest.raises(PersistenceError):
        await store.set_many({"item:1": {}})
    with pytest.raises(PersistenceError):
        await store.get_by_prefix("item:")
    with pytest.raises(PersistenceError):
        await store.set_many_if_absent({"item:1": {}})
    assert await store.ping() is False


@pytest.mark.asyncio
async def test_redis_set_many_if_absent_writes_all_or_nothing():
    redis = StubRedis()
    store = RedisKVStore(redis)

    assert await store.set_many_if_absent({"conversation:c1": {"v": 1}, "userConversation:a:c1": "c1"})
    assert not await store.set_many_if_absent({"conversation:c1": {"v": 2}, "userConversation:b:c1": "c1"})

    assert await store.get("conversation:c1") == {"v": 1}
    assert await store.get("userConversation:b:c1") is None

def test_sql_upsert_statement():
    sql = str(_upsert({"item:1": {"id": "1"}}).compile(dialect=postgresql.dialect()))

    assert "INSERT INTO kv_store" in sql
    assert "ON CONFLICT" in sql
    assert "DO UPDATE SET" in sql


def test_codec_handles_datetimes():
    assert codec.loads(codec.dumps({"at": T0})) == {"at": T0.isoformat()}


def test_sql_insert_if_absent_statement():
    sql = str(_insert_if_absent({"conversation:c1": {"id": "c1"}}).compile(dialect=postgresql.dialect()))

    assert "ON CONFLICT" in sql
    assert "DO NOTHING" in sql
    assert "RETURNING" in sql


def test_sql_prefix_select_escapes_like_wildcards():
    compiled = _select_prefix("message:a_b_item-1:").compile(dialect=postgresql.dialect())

    assert "ESCAPE '/'" in str(compiled)
    assert "message:a/_b/_item-1:" in compiled.params.values()
