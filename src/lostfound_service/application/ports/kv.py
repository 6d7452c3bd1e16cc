from __future__ import annotations

from typing import Any, Protocol

JsonValue = Any


class KVStore(Protocol):
    """Key-value persistence with prefix scan.

    ``get`` returns ``None`` for a missing key. ``get_by_prefix`` returns
    values only, in no particular order. Backend failures surface as
    ``PersistenceError``.
    """

    async def get(self, key: str) -> JsonValue | None: ...

    async def set(self, key: str, value: JsonValue) -> None: ...

    async def set_many(self, entries: dict[str, JsonValue]) -> None:
        """Upsert all entries atomically."""
        ...

    async def set_many_if_absent(self, entries: dict[str, JsonValue]) -> bool:
        """Write all entries only if none of the keys exist; ``True`` when written."""
        ...

    async def get_by_prefix(self, prefix: str) -> list[JsonValue]: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...
