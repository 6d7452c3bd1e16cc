from __future__ import annotations

from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import ForbiddenError, NotFoundError
from lostfound_service.domain.entities.conversation import Conversation
from lostfound_service.domain.entities.item import Item


def assert_conversation_access(
    principal: Principal,
    conversation: Conversation | None,
) -> Conversation:
    """Raise if conversation doesn't exist or principal is not one of its two participants."""
    if conversation is None:
        raise NotFoundError("Conversation not found")
    if not conversation.has_participant(principal.user_id):
        raise ForbiddenError("Not a participant of this conversation")
    return conversation


def assert_item_owner(principal: Principal, item: Item | None) -> Item:
    if item is None:
        raise NotFoundError("Item not found")
    if item.owner_user_id != principal.user_id:
        raise ForbiddenError("Not the owner of this item")
    return item
