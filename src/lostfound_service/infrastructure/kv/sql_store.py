"""PostgreSQL-backed KV store: one ``kv_store(key, value jsonb)`` table."""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import AsyncAdaptedQueuePool

from lostfound_service.application.exceptions import PersistenceError
from lostfound_service.config import Settings
from lostfound_service.infrastructure.kv.models import Base, KVEntryModel

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_recycle=settings.DB_POOL_RECYCLE,
        echo=False,
    )


def _upsert(entries: dict[str, Any]):
    stmt = pg_insert(KVEntryModel).values(
        [{"key": key, "value": value} for key, value in entries.items()]
    )
    return stmt.on_conflict_do_update(
        index_elements=[KVEntryModel.key],
        set_={"value": stmt.excluded.value, "updated_at": text("now()")},
    )


def _insert_if_absent(entries: dict[str, Any]):
    stmt = pg_insert(KVEntryModel).values(
        [{"key": key, "value": value} for key, value in entries.items()]
    )
    return stmt.on_conflict_do_nothing(index_elements=[KVEntryModel.key]).returning(
        KVEntryModel.key
    )


def _select_prefix(prefix: str):
    # ids may contain "_" and "%", which LIKE would treat as wildcards
    return select(KVEntryModel.value).where(
        KVEntryModel.key.startswith(prefix, autoescape=True)
    )


class SqlKVStore:
    """Implements application.ports.kv.KVStore on top of SQLAlchemy."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._sessions = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("kv_store table ready")

    async def get(self, key: str) -> Any | None:
        try:
            async with self._sessions() as session:
                result = await session.execute(
                    select(KVEntryModel.value).where(KVEntryModel.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"KV get failed for {key!r}") from exc

    async def set(self, key: str, value: Any) -> None:
        await self.set_many({key: value})

    async def set_many(self, entries: dict[str, Any]) -> None:
        if not entries:
            return
        try:
            async with self._sessions() as session, session.begin():
                await session.execute(_upsert(entries))
        except SQLAlchemyError as exc:
            raise PersistenceError(f"KV write failed for {len(entries)} keys") from exc

    async def set_many_if_absent(self, entries: dict[str, Any]) -> bool:
        if not entries:
            return True
        try:
            async with self._sessions() as session, session.begin() as tx:
                result = await session.execute(_insert_if_absent(entries))
                if len(result.scalars().all()) != len(entries):
                    # some key already existed: keep none of this batch
                    await tx.rollback()
                    return False
            return True
        except SQLAlchemyError as exc:
            raise PersistenceError(f"KV conditional write failed for {len(entries)} keys") from exc

    async def get_by_prefix(self, prefix: str) -> list[Any]:
        stmt = _select_prefix(prefix)
        try:
            async with self._sessions() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise PersistenceError(f"KV prefix scan failed for {prefix!r}") from exc

    async def ping(self) -> bool:
        try:
            async with self._sessions() as session:
                await session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            logger.warning("Postgres ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self._engine.dispose()
