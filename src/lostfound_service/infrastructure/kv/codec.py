"""JSON encoding of stored values."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any


class _Encoder(json.JSONEncoder):
    def default(self, o: object) -> Any:
        if isinstance(o, datetime):
            return o.isoformat()
        return super().default(o)


def dumps(value: Any) -> str:
    return json.dumps(value, cls=_Encoder, separators=(",", ":"))


def loads(raw: str | bytes) -> Any:
    return json.loads(raw)
