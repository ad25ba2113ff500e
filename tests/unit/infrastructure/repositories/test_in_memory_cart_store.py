import asyncio
import re
from datetime import datetime, timedelta, timezone

import pytest

from printify_storefront.core.exceptions import CartNotFoundError
from printify_storefront.infrastructure.repositories.in_memory_cart_store import (
    InMemoryCartStore,
    generate_cart_id,
)

T0 = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


class WallClock:
    def __init__(self):
        self.now = T0

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def wall_clock():
    return WallClock()


@pytest.fixture
def store(wall_clock):
    return InMemoryCartStore(clock=wall_clock)


def test_generated_ids_have_expected_shape():
    assert re.fullmatch(r"cart_\d+_[a-z0-9]{9}", generate_cart_id())
    assert generate_cart_id() != generate_cart_id()


@pytest.mark.asyncio
async def test_create_starts_empty(store):
    cart = await store.create()

    assert cart.items == []
    assert cart.created_at == cart.updated_at == T0
    assert (await store.load(cart.id)) is cart


@pytest.mark.asyncio
async def test_add_item_merges_quantities(store, wall_clock):
    cart = await store.create()

    await store.add_item(cart.id, "v1", 2)
    wall_clock.advance(10)
    updated = await store.add_item(cart.id, "v1", 3)

    assert [(line.variant_id, line.quantity) for line in updated.items] == [("v1", 5)]
    assert updated.updated_at == T0 + timedelta(seconds=10)
    assert updated.created_at == T0


@pytest.mark.asyncio
async def test_replace_items_accepts_camel_case_lines(store, wall_clock):
    cart = await store.create()
    await store.add_item(cart.id, 1, 1)
    wall_clock.advance(5)

    updated = await store.replace_items(
        cart.id,
        [
            {"variantId": 2, "quantity": 4, "addedAt": "2024-04-30T08:00:00.000Z"},
            {"variant_id": 3, "quantity": 1},
        ],
    )

    assert [(line.variant_id, line.quantity) for line in updated.items] == [(2, 4), (3, 1)]
    assert updated.items[0].added_at == datetime(2024, 4, 30, 8, 0, tzinfo=timezone.utc)
    assert updated.items[1].added_at == T0 + timedelta(seconds=5)


@pytest.mark.asyncio
async def test_replace_items_with_empty_list_empties_cart(store):
    cart = await store.create()
    await store.add_item(cart.id, 1, 1)

    updated = await store.replace_items(cart.id, [])

    assert updated.items == []


@pytest.mark.asyncio
async def test_replace_items_rejects_invalid_line_without_touching_cart(store):
    cart = await store.create()
    await store.add_item(cart.id, 1, 2)

    with pytest.raises(ValueError):
        await store.replace_items(cart.id, [{"variantId": 1, "quantity": 0}])

    assert (await store.load(cart.id)).total_quantity == 2


@pytest.mark.asyncio
async def test_delete_removes_cart(store):
    cart = await store.create()

    assert await store.delete(cart.id) == {"success": True}
    assert len(store) == 0
    with pytest.raises(CartNotFoundError):
        await store.load(cart.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["load", "add_item", "replace_items", "delete"])
async def test_unknown_cart_raises_not_found(store, operation):
    args = {"load": (), "add_item": (1, 1), "replace_items": ([],), "delete": ()}[operation]

    with pytest.raises(CartNotFoundError):
        await getattr(store, operation)("cart_missing", *args)


@pytest.mark.asyncio
async def test_concurrent_adds_are_not_lost(store):
    cart = await store.create()

    await asyncio.gather(*(store.add_item(cart.id, "v1", 1) for _ in range(50)))

    loaded = await store.load(cart.id)
    assert loaded.items[0].quantity == 50


@pytest.mark.asyncio
async def test_colliding_ids_are_regenerated(wall_clock):
    ids = iter(["cart_a", "cart_a", "cart_b"])
    store = InMemoryCartStore(clock=wall_clock, id_factory=lambda: next(ids))

    first = await store.create()
    second = await store.create()

    assert (first.id, second.id) == ("cart_a", "cart_b")


@pytest.mark.asyncio
async def test_idle_carts_expire_after_ttl(wall_clock):
    store = InMemoryCartStore(clock=wall_clock, ttl_seconds=60)
    stale = await store.create()
    wall_clock.advance(30)
    fresh = await store.create()

    wall_clock.advance(30)

    with pytest.raises(CartNotFoundError):
        await store.load(stale.id)
    assert (await store.load(fresh.id)).id == fresh.id


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["add_item", "replace_items", "delete"])
async def test_expired_cart_cannot_be_modified(wall_clock, operation):
    store = InMemoryCartStore(clock=wall_clock, ttl_seconds=60)
    cart = await store.create()
    wall_clock.advance(120)
    args = {"add_item": ("v1", 1), "replace_items": ([],), "delete": ()}[operation]

    with pytest.raises(CartNotFoundError):
        await getattr(store, operation)(cart.id, *args)

    assert len(store) == 0
    with pytest.raises(CartNotFoundError):
        await store.load(cart.id)


@pytest.mark.asyncio
async def test_carts_live_forever_without_ttl(store, wall_clock):
    cart = await store.create()
    wall_clock.advance(10 * 365 * 24 * 3600)

    assert (await store.load(cart.id)).id == cart.id


def test_invalid_ttl_is_rejected():
    with pytest.raises(ValueError):
        InMemoryCartStore(ttl_seconds=0)
