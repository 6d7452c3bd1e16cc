from __future__ import annotations

from fastapi import APIRouter, Response

from lostfound_service.api.deps import CurrentPrincipal, ReposDep
from lostfound_service.api.v1.schemas.message import (
    MessageEnvelope,
    MessageListResponse,
    MessageResponse,
    MessageWithSenderResponse,
    SendMessageRequest,
)
from lostfound_service.config import settings
from lostfound_service.services import composer, message_service

router = APIRouter(prefix="/messages", tags=["messages"])

POLL_INTERVAL_HEADER = "X-Poll-Interval"


@router.post("", response_model=MessageEnvelope, status_code=201)
async def send_message(
    body: SendMessageRequest,
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> MessageEnvelope:
    msg = await message_service.send_message(
        body.conversation_id, principal, body.text, repos,
    )
    return MessageEnvelope(message=MessageResponse.model_validate(msg))


@router.get("/{conversation_id}", response_model=MessageListResponse)
async def list_messages(
    conversation_id: str,
    principal: CurrentPrincipal,
    repos: ReposDep,
    response: Response,
) -> MessageListResponse:
    messages = await message_service.list_messages(conversation_id, principal, repos)
    views = await composer.compose_messages(messages, repos.users)
    # clients poll this endpoint; tell them how often
    response.headers[POLL_INTERVAL_HEADER] = str(settings.CLIENT_POLL_INTERVAL_SECONDS)
    return MessageListResponse(
        messages=[MessageWithSenderResponse.from_view(v) for v in views],
    )
