from __future__ import annotations

from datetime import datetime

from lostfound_service.api.v1.schemas.common import CamelModel
from lostfound_service.application.dto.views import ItemView
from lostfound_service.domain.value_objects.enums import ItemStatus, ItemType


class CreateItemRequest(CamelModel):
    type: ItemType
    category: str
    title: str
    description: str
    location: str
    date: str
    image_url: str | None = None


class UpdateItemStatusRequest(CamelModel):
    status: ItemStatus


class ItemResponse(CamelModel):
    id: str
    owner_user_id: str
    type: str
    category: str
    title: str
    description: str
    location: str
    date: str
    image_url: str | None
    status: str
    created_at: datetime
    user_name: str | None = None
    user_email: str | None = None

    @classmethod
    def from_view(cls, view: ItemView) -> ItemResponse:
        resp = cls.model_validate(view.item)
        return resp.model_copy(
            update={"user_name": view.user_name, "user_email": view.user_email}
        )


class ItemEnvelope(CamelModel):
    item: ItemResponse


class ItemListResponse(CamelModel):
    items: list[ItemResponse]
