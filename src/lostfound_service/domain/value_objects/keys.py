"""KV key layout.

Every entity and secondary index lives in the one KV store; index entries
are separate keys whose value is the referenced id, so "everything for
user X" is a prefix scan. Key segments must not contain ``SEP``.
"""
from __future__ import annotations

SEP = ":"


def user(user_id: str) -> str:
    return f"user{SEP}{user_id}"


def item(item_id: str) -> str:
    return f"item{SEP}{item_id}"


def all_items() -> str:
    return f"item{SEP}"


def user_item(user_id: str, item_id: str) -> str:
    return f"userItem{SEP}{user_id}{SEP}{item_id}"


def user_items(user_id: str) -> str:
    return f"userItem{SEP}{user_id}{SEP}"


def conversation(conversation_id: str) -> str:
    return f"conversation{SEP}{conversation_id}"


def user_conversation(user_id: str, conversation_id: str) -> str:
    return f"userConversation{SEP}{user_id}{SEP}{conversation_id}"


def user_conversations(user_id: str) -> str:
    return f"userConversation{SEP}{user_id}{SEP}"


def message(message_id: str) -> str:
    return f"message{SEP}{message_id}"


def conversation_messages(conversation_id: str) -> str:
    return f"message{SEP}{conversation_id}{SEP}"


def is_valid_segment(value: str) -> bool:
    return bool(value) and SEP not in value
