from __future__ import annotations

import logging

from lostfound_service.application.ports.kv import KVStore
from lostfound_service.config import Settings
from lostfound_service.infrastructure.kv.redis_store import RedisKVStore
from lostfound_service.infrastructure.kv.sql_store import SqlKVStore, create_engine

logger = logging.getLogger(__name__)


async def open_kv_store(settings: Settings) -> KVStore:
    """Build the configured backend; the postgres table is created on first start."""
    if settings.KV_BACKEND == "postgres":
        store = SqlKVStore(create_engine(settings))
        await store.create_schema()
    else:
        store = RedisKVStore.from_url(settings.REDIS_URL)
    logger.info("KV store opened (backend=%s)", settings.KV_BACKEND)
    return store
