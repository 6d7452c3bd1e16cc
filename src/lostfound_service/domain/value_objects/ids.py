"""Natural-key identifiers.

Conversation ids are derived from the sorted participant pair and the item
id, so the same (pair, item) always maps to the same conversation. Message
ids embed a fixed-width timestamp so that lexicographic order of ids within
one conversation equals chronological order.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import NewType

UserId = NewType("UserId", str)
ItemId = NewType("ItemId", str)
ConversationId = NewType("ConversationId", str)
MessageId = NewType("MessageId", str)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_TS_WIDTH = 16


def sorted_participants(user_a: str, user_b: str) -> tuple[str, str]:
    first, second = sorted((user_a, user_b))
    return first, second


def derive_conversation_id(user_a: str, user_b: str, item_id: str) -> ConversationId:
    first, second = sorted_participants(user_a, user_b)
    return ConversationId(f"{first}_{second}_{item_id}")


def epoch_micros(ts: datetime) -> int:
    delta = ts - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds


def new_message_id(conversation_id: str, created_at: datetime) -> MessageId:
    # uuid suffix breaks ties between sends that land on the same microsecond
    stamp = str(epoch_micros(created_at)).zfill(_TS_WIDTH)
    return MessageId(f"{conversation_id}:{stamp}:{uuid.uuid4().hex}")


def new_item_id() -> ItemId:
    return ItemId(str(uuid.uuid4()))
