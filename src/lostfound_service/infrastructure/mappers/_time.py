from __future__ import annotations

from datetime import datetime, timezone


def to_iso(ts: datetime) -> str:
    return ts.astimezone(timezone.utc).isoformat()


def from_iso(raw: str) -> datetime:
    ts = datetime.fromisoformat(raw)
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)
