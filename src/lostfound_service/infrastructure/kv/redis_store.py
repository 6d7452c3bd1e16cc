"""Redis-backed KV store."""
from __future__ import annotations

import logging
import re
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from lostfound_service.application.exceptions import PersistenceError
from lostfound_service.infrastructure.kv import codec

logger = logging.getLogger(__name__)

_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def escape_glob(prefix: str) -> str:
    return _GLOB_SPECIAL.sub(r"\\\1", prefix)


class RedisKVStore:
    """Implements application.ports.kv.KVStore.

    Values are JSON strings. Prefix scans use ``SCAN MATCH`` so they never
    block the server the way ``KEYS`` would.
    """

    def __init__(self, redis: aioredis.Redis, *, scan_count: int = 500) -> None:
        self._redis = redis
        self._scan_count = scan_count

    @classmethod
    def from_url(cls, url: str) -> RedisKVStore:
        return cls(aioredis.from_url(url, decode_responses=True))

    async def get(self, key: str) -> Any | None:
        try:
            raw = await self._redis.get(key)
        except RedisError as exc:
            raise PersistenceError(f"KV get failed for {key!r}") from exc
        return None if raw is None else codec.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        try:
            await self._redis.set(key, codec.dumps(value))
        except RedisError as exc:
            raise PersistenceError(f"KV set failed for {key!r}") from exc

    async def set_many(self, entries: dict[str, Any]) -> None:
        if not entries:
            return
        # MSET is atomic: readers see either none or all of the keys
        mapping = {key: codec.dumps(value) for key, value in entries.items()}
        try:
            await self._redis.mset(mapping)
        except RedisError as exc:
            raise PersistenceError(f"KV set_many failed for {len(entries)} keys") from exc

    async def set_many_if_absent(self, entries: dict[str, Any]) -> bool:
        if not entries:
            return True
        mapping = {key: codec.dumps(value) for key, value in entries.items()}
        try:
            return bool(await self._redis.msetnx(mapping))
        except RedisError as exc:
            raise PersistenceError(f"KV set_many_if_absent failed for {len(entries)} keys") from exc

    async def get_by_prefix(self, prefix: str) -> list[Any]:
        try:
            keys = {
                key
                async for key in self._redis.scan_iter(
                    match=f"{escape_glob(prefix)}*", count=self._scan_count,
                )
            }
            if not keys:
                return []
            raw_values = await self._redis.mget(sorted(keys))
        except RedisError as exc:
            raise PersistenceError(f"KV prefix scan failed for {prefix!r}") from exc
        return [codec.loads(raw) for raw in raw_values if raw is not None]

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError:
            logger.warning("Redis ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self._redis.aclose()
