from __future__ import annotations

from datetime import timedelta

import pytest

from lostfound_service.application.dto.item import ItemFilterDTO, NewItemDTO
from lostfound_service.application.exceptions import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from lostfound_service.domain.value_objects import keys
from lostfound_service.domain.value_objects.enums import ItemStatus, ItemType
from lostfound_service.services import item_service
from tests.conftest import T0, make_item


def _new_item(**overrides) -> NewItemDTO:
    fields = {
        "type": ItemType.LOST,
        "category": "electronics",
        "title": "Grey headphones",
        "description": "Over-ear, sticker on the left cup",
        "location": "Gym",
        "date": "2026-10-16",
    }
    fields.update(overrides)
    return NewItemDTO(**fields)


@pytest.mark.asyncio
async def test_create_item_writes_item_and_owner_index(alice, repos, kv, clock):
    item = await item_service.create_item(_new_item(), alice, repos, clock=clock)

    assert item.owner_user_id == "alice"
    assert item.status == ItemStatus.ACTIVE
    assert item.created_at == T0
    assert (await repos.items.get_by_id(item.id)) == item
    assert await kv.get(keys.user_item("alice", item.id)) == item.id


@pytest.mark.asyncio
async def test_create_item_missing_fields(alice, repos, kv):
    with pytest.raises(ValidationError) as exc_info:
        await item_service.create_item(_new_item(title=" ", location=""), alice, repos)

    assert "title" in exc_info.value.detail
    assert "location" in exc_info.value.detail
    assert kv.data == {}


@pytest.mark.asyncio
async def test_list_items_filters_and_sorts(repos):
    await repos.items.create(make_item(item_id="a", type=ItemType.FOUND, category="bags", created_at=T0))
    await repos.items.create(
        make_item(item_id="b", type=ItemType.LOST, category="bags", created_at=T0 + timedelta(hours=1))
    )
    await repos.items.create(
        make_item(item_id="c", type=ItemType.FOUND, category="keys", created_at=T0 + timedelta(hours=2))
    )

    everything = await item_service.list_items(ItemFilterDTO(), repos)
    found = await item_service.list_items(ItemFilterDTO(type=ItemType.FOUND), repos)
    bags = await item_service.list_items(ItemFilterDTO(category="bags"), repos)
    all_categories = await item_service.list_items(ItemFilterDTO(category="all"), repos)

    assert [i.id for i in everything] == ["c", "b", "a"]
    assert [i.id for i in found] == ["c", "a"]
    assert [i.id for i in bags] == ["b", "a"]
    assert [i.id for i in all_categories] == ["c", "b", "a"]


@pytest.mark.asyncio
async def test_get_item_missing(repos):
    with pytest.raises(NotFoundError):
        await item_service.get_item("missing", repos)


@pytest.mark.asyncio
async def test_owner_can_resolve_item(bob, repos):
    await repos.items.create(make_item(owner="bob"))

    updated = await item_service.update_item_status("item-1", ItemStatus.RESOLVED, bob, repos)

    assert updated.status == ItemStatus.RESOLVED
    assert (await repos.items.get_by_id("item-1")).status == ItemStatus.RESOLVED


@pytest.mark.asyncio
async def test_non_owner_cannot_change_status(alice, repos):
    await repos.items.create(make_item(owner="bob"))

    with pytest.raises(ForbiddenError):
        await item_service.update_item_status("item-1", ItemStatus.RESOLVED, alice, repos)

    assert (await repos.items.get_by_id("item-1")).status == ItemStatus.ACTIVE


@pytest.mark.asyncio
async def test_status_update_on_missing_item(bob, repos):
    with pytest.raises(NotFoundError):
        await item_service.update_item_status("missing", ItemStatus.RESOLVED, bob, repos)


@pytest.mark.asyncio
async def test_my_items_newest_first_and_skips_dangling(alice, repos, kv, clock):
    first = await item_service.create_item(_new_item(title="Umbrella"), alice, repos, clock=clock)
    clock.advance(minutes=1)
    second = await item_service.create_item(_new_item(title="Scarf"), alice, repos, clock=clock)
    await kv.set(keys.user_item("alice", "deleted-item"), "deleted-item")
    await repos.items.create(make_item(item_id="not-mine", owner="bob"))

    mine = await item_service.list_my_items(alice, repos)

    assert [i.id for i in mine] == [second.id, first.id]
