from __future__ import annotations

from fastapi import APIRouter

from lostfound_service.api.deps import CurrentPrincipal, ReposDep
from lostfound_service.api.v1.schemas.conversation import (
    ConversationEnvelope,
    ConversationListResponse,
    ConversationResponse,
    ConversationSummaryResponse,
    StartConversationRequest,
)
from lostfound_service.services import conversation_service

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.post("", response_model=ConversationEnvelope)
async def start_conversation(
    body: StartConversationRequest,
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> ConversationEnvelope:
    conv = await conversation_service.start_conversation(body.item_id, principal, repos)
    return ConversationEnvelope(conversation=ConversationResponse.model_validate(conv))


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> ConversationListResponse:
    views = await conversation_service.list_conversations_for(principal, repos)
    return ConversationListResponse(
        conversations=[ConversationSummaryResponse.from_view(v) for v in views],
    )
