"""Read-side joins: attach user and item summaries to stored entities.

Joins fail soft. A user id with no stored profile becomes a placeholder
summary and a conversation whose item is gone carries ``item=None``.
"""
from __future__ import annotations

import asyncio
from collections.abc import Iterable

from lostfound_service.application.dto.views import (
    UNKNOWN_USER_NAME,
    ConversationView,
    ItemView,
    MessageView,
    UserSummary,
)
from lostfound_service.application.repositories.item import ItemRepository
from lostfound_service.application.repositories.user import UserRepository
from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.domain.entities.item import Item
from lostfound_service.domain.entities.message import Message
from lostfound_service.domain.entities.user import User


async def load_users(user_ids: Iterable[str], users: UserRepository) -> dict[str, User]:
    unique = sorted(set(user_ids))
    found = await asyncio.gather(*(users.get_by_id(uid) for uid in unique))
    return {uid: user for uid, user in zip(unique, found) if user is not None}


def summarize_user(user_id: str, users_by_id: dict[str, User]) -> UserSummary:
    user = users_by_id.get(user_id)
    if user is None:
        return UserSummary(id=user_id)
    return UserSummary(id=user.id, name=user.name or UNKNOWN_USER_NAME, email=user.email)


async def compose_items(items: list[Item], users: UserRepository) -> list[ItemView]:
    owners = await load_users((i.owner_user_id for i in items), users)
    views = []
    for item in items:
        owner = summarize_user(item.owner_user_id, owners)
        views.append(ItemView(item=item, user_name=owner.name, user_email=owner.email))
    return views


async def compose_item(item: Item, users: UserRepository) -> ItemView:
    (view,) = await compose_items([item], users)
    return view


async def compose_messages(
    messages: list[Message], users: UserRepository
) -> list[MessageView]:
    senders = await load_users((m.sender_id for m in messages), users)
    return [
        MessageView(message=m, sender_name=summarize_user(m.sender_id, senders).name)
        for m in messages
    ]


async def compose_conversations(
    conversations: list[Conversation],
    viewer_id: str,
    items: ItemRepository,
    users: UserRepository,
) -> list[ConversationView]:
    other_ids = {c.id: c.other_participant(viewer_id) for c in conversations}
    item_ids = sorted({c.item_id for c in conversations})
    found_items, others = await asyncio.gather(
        asyncio.gather(*(items.get_by_id(iid) for iid in item_ids)),
        load_users((uid for uid in other_ids.values() if uid), users),
    )
    items_by_id = {iid: item for iid, item in zip(item_ids, found_items) if item is not None}

    views = []
    for conv in conversations:
        other_id = other_ids[conv.id]
        views.append(
            ConversationView(
                conversation=conv,
                item=items_by_id.get(conv.item_id),
                other_user=summarize_user(other_id, others) if other_id else None,
            )
        )
    return views
