from __future__ import annotations

from datetime import datetime

from lostfound_service.api.v1.schemas.common import CamelModel
from lostfound_service.application.dto.views import MessageView


class SendMessageRequest(CamelModel):
    conversation_id: str
    text: str


class MessageResponse(CamelModel):
    id: str
    conversation_id: str
    sender_id: str
    text: str
    created_at: datetime


class MessageWithSenderResponse(MessageResponse):
    sender_name: str

    @classmethod
    def from_view(cls, view: MessageView) -> MessageWithSenderResponse:
        base = MessageResponse.model_validate(view.message)
        return cls(**base.model_dump(), sender_name=view.sender_name)


class MessageEnvelope(CamelModel):
    message: MessageResponse


class MessageListResponse(CamelModel):
    messages: list[MessageWithSenderResponse]
