from __future__ import annotations

import asyncio
import dataclasses
import logging

from lostfound_service.application.dto.item import ItemFilterDTO, NewItemDTO
from lostfound_service.application.dto.principal import Principal
from lostfound_service.application.exceptions import NotFoundError, ValidationError
from lostfound_service.application.policies.permissions import assert_item_owner
from lostfound_service.application.ports.clock import Clock, SystemClock
from lostfound_service.application.store import Repositories
from lostfound_service.domain.entities.item import Item
from lostfound_service.domain.value_objects.enums import ItemStatus
from lostfound_service.domain.value_objects.ids import new_item_id

logger = logging.getLogger(__name__)

_system_clock = SystemClock()

_REQUIRED_FIELDS = ("category", "title", "description", "location", "date")


def _newest_first(items: list[Item]) -> list[Item]:
    return sorted(items, key=lambda i: (i.created_at, i.id), reverse=True)


async def create_item(
    data: NewItemDTO,
    principal: Principal,
    repos: Repositories,
    *,
    clock: Clock = _system_clock,
) -> Item:
    missing = [name for name in _REQUIRED_FIELDS if not getattr(data, name).strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    item = Item(
        id=new_item_id(),
        owner_user_id=principal.user_id,
        type=data.type.value,
        category=data.category.strip(),
        title=data.title.strip(),
        description=data.description.strip(),
        location=data.location.strip(),
        date=data.date.strip(),
        image_url=data.image_url,
        status=ItemStatus.ACTIVE.value,
        created_at=clock.now(),
    )
    item = await repos.items.create(item)
    logger.info("Item %s created by %s", item.id, principal.user_id)
    return item


async def list_items(filters: ItemFilterDTO, repos: Repositories) -> list[Item]:
    items = await repos.items.list_all()
    if filters.type:
        items = [i for i in items if i.type == filters.type]
    if filters.category and filters.category != "all":
        items = [i for i in items if i.category == filters.category]
    return _newest_first(items)


async def get_item(item_id: str, repos: Repositories) -> Item:
    item = await repos.items.get_by_id(item_id)
    if item is None:
        raise NotFoundError("Item not found")
    return item


async def update_item_status(
    item_id: str,
    status: ItemStatus,
    principal: Principal,
    repos: Repositories,
) -> Item:
    item = assert_item_owner(principal, await repos.items.get_by_id(item_id))
    if item.status == status:
        return item
    updated = await repos.items.save(dataclasses.replace(item, status=status.value))
    logger.info("Item %s marked %s", item.id, status)
    return updated


async def list_my_items(principal: Principal, repos: Repositories) -> list[Item]:
    item_ids = await repos.items.list_ids_for_user(principal.user_id)
    found = await asyncio.gather(*(repos.items.get_by_id(iid) for iid in set(item_ids)))
    return _newest_first([i for i in found if i is not None])
