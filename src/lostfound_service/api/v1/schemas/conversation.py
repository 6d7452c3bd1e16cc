from __future__ import annotations

from datetime import datetime

from lostfound_service.api.v1.schemas.common import CamelModel
from lostfound_service.api.v1.schemas.item import ItemResponse
from lostfound_service.api.v1.schemas.user import UserSummaryResponse
from lostfound_service.application.dto.views import ConversationView


class StartConversationRequest(CamelModel):
    item_id: str


class ConversationResponse(CamelModel):
    id: str
    item_id: str
    participants: list[str]
    created_at: datetime
    last_message_at: datetime


class ConversationSummaryResponse(ConversationResponse):
    item: ItemResponse | None = None
    other_user: UserSummaryResponse | None = None

    @classmethod
    def from_view(cls, view: ConversationView) -> ConversationSummaryResponse:
        base = ConversationResponse.model_validate(view.conversation)
        return cls(
            **base.model_dump(),
            item=ItemResponse.model_validate(view.item) if view.item else None,
            other_user=(
                UserSummaryResponse.from_summary(view.other_user)
                if view.other_user
                else None
            ),
        )


class ConversationEnvelope(CamelModel):
    conversation: ConversationResponse


class ConversationListResponse(CamelModel):
    conversations: list[ConversationSummaryResponse]
