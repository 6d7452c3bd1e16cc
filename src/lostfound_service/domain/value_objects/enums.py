from __future__ import annotations

from enum import StrEnum


class ItemType(StrEnum):
    LOST = "lost"
    FOUND = "found"


class ItemStatus(StrEnum):
    ACTIVE = "active"
    RESOLVED = "resolved"
