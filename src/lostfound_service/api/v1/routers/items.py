from __future__ import annotations

from fastapi import APIRouter, Query

from lostfound_service.api.deps import CurrentPrincipal, ReposDep
from lostfound_service.api.v1.schemas.item import (
    CreateItemRequest,
    ItemEnvelope,
    ItemListResponse,
    ItemResponse,
    UpdateItemStatusRequest,
)
from lostfound_service.application.dto.item import ItemFilterDTO, NewItemDTO
from lostfound_service.domain.value_objects.enums import ItemType
from lostfound_service.services import composer, item_service

router = APIRouter(tags=["items"])


@router.post("/items", response_model=ItemEnvelope, status_code=201)
async def create_item(
    body: CreateItemRequest,
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> ItemEnvelope:
    data = NewItemDTO(
        type=body.type,
        category=body.category,
        title=body.title,
        description=body.description,
        location=body.location,
        date=body.date,
        image_url=body.image_url,
    )
    item = await item_service.create_item(data, principal, repos)
    view = await composer.compose_item(item, repos.users)
    return ItemEnvelope(item=ItemResponse.from_view(view))


@router.get("/items", response_model=ItemListResponse)
async def list_items(
    repos: ReposDep,
    type: ItemType | None = Query(None),
    category: str | None = Query(None),
) -> ItemListResponse:
    items = await item_service.list_items(ItemFilterDTO(type=type, category=category), repos)
    views = await composer.compose_items(items, repos.users)
    return ItemListResponse(items=[ItemResponse.from_view(v) for v in views])


@router.get("/items/{item_id}", response_model=ItemEnvelope)
async def get_item(item_id: str, repos: ReposDep) -> ItemEnvelope:
    item = await item_service.get_item(item_id, repos)
    view = await composer.compose_item(item, repos.users)
    return ItemEnvelope(item=ItemResponse.from_view(view))


@router.patch("/items/{item_id}/status", response_model=ItemEnvelope)
async def update_item_status(
    item_id: str,
    body: UpdateItemStatusRequest,
    principal: CurrentPrincipal,
    repos: ReposDep,
) -> ItemEnvelope:
    item = await item_service.update_item_status(item_id, body.status, principal, repos)
    return ItemEnvelope(item=ItemResponse.model_validate(item))


@router.get("/my-items", response_model=ItemListResponse)
async def list_my_items(principal: CurrentPrincipal, repos: ReposDep) -> ItemListResponse:
    items = await item_service.list_my_items(principal, repos)
    return ItemListResponse(items=[ItemResponse.model_validate(i) for i in items])
