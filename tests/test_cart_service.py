"""Tests for the session cart."""

import anyio
import pytest

from app.core.storage import MemoryStorage, StorageQuotaExceededError
from app.repositories.product_repo import ProductRepository
from app.services.cart_service import CartService, CartSession


@pytest.fixture
def products(storage):
    repo = ProductRepository(storage)
    return {pid: repo.get_by_id(pid) for pid in ("p1", "p2", "p5")}


@pytest.fixture
def cart(storage):
    return CartService(storage)


class TestAddToCart:
    def test_add_new_item(self, cart, products):
        cart.add_to_cart(products["p1"], 1)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1

    def test_adding_same_product_merges(self, cart, products):
        cart.add_to_cart(products["p5"], 2)
        cart.add_to_cart(products["p5"], 3)

        assert len(cart.items) == 1
        assert cart.get_item("p5").quantity == 5

    def test_items_keep_insertion_order(self, cart, products):
        cart.add_to_cart(products["p2"], 1)
        cart.add_to_cart(products["p1"], 1)
        cart.add_to_cart(products["p2"], 1)
        assert [i.product.id for i in cart.items] == ["p2", "p1"]

    def test_product_is_snapshotted(self, cart, products):
        product = products["p1"]
        cart.add_to_cart(product, 1)
        product.price = 1.0
        assert cart.get_item("p1").product.price == 349.99


class TestUpdateAndRemove:
    def test_update_replaces_quantity(self, cart, products):
        cart.add_to_cart(products["p1"], 2)
        cart.update_quantity("p1", 7)
        assert cart.get_item("p1").quantity == 7

    def test_update_to_zero_is_removal(self, products):
        removed = CartService(MemoryStorage())
        zeroed = CartService(MemoryStorage())
        for c in (removed, zeroed):
            c.add_to_cart(products["p1"], 2)
            c.add_to_cart(products["p2"], 1)

        removed.remove_from_cart("p1")
        zeroed.update_quantity("p1", 0)

        assert zeroed.items == removed.items
        assert zeroed.count == removed.count
        assert zeroed.total == removed.total

    def test_negative_quantity_removes(self, cart, products):
        cart.add_to_cart(products["p1"], 2)
        cart.update_quantity("p1", -3)
        assert cart.get_item("p1") is None

    def test_update_unknown_product_is_no_op(self, cart, products):
        cart.add_to_cart(products["p1"], 2)
        cart.update_quantity("nope", 4)
        assert [(i.product.id, i.quantity) for i in cart.items] == [("p1", 2)]

    def test_remove_missing_is_no_op(self, cart):
        cart.remove_from_cart("nope")
        assert cart.is_empty

    def test_clear(self, cart, products):
        cart.add_to_cart(products["p1"], 2)
        cart.clear_cart()
        assert cart.is_empty
        assert cart.count == 0
        assert cart.total == 0


class TestDerivedTotals:
    def test_count_and_total(self, cart, products):
        cart.add_to_cart(products["p2"], 2)  # 59.00
        cart.add_to_cart(products["p5"], 3)  # 29.99

        assert cart.count == 5
        assert cart.total == pytest.approx(2 * 59.0 + 3 * 29.99)

    def test_summary(self, cart, products):
        cart.add_to_cart(products["p2"], 2)
        summary = cart.get_cart_summary()

        assert summary.count == 2
        assert summary.total == pytest.approx(118.0)
        assert summary.items[0].line_total == pytest.approx(118.0)

    def test_items_returns_copies(self, cart, products):
        cart.add_to_cart(products["p2"], 2)
        cart.items[0].quantity = 50
        assert cart.count == 2


class TestPersistence:
    def test_cart_survives_reload(self, storage, products):
        cart = CartService(storage)
        cart.add_to_cart(products["p1"], 1)
        cart.add_to_cart(products["p5"], 4)

        reloaded = CartService(storage)
        assert reloaded.items == cart.items
        assert reloaded.total == cart.total

    def test_every_mutation_is_written(self, storage, products):
        cart = CartService(storage)
        cart.add_to_cart(products["p1"], 1)
        assert CartService(storage).count == 1
        cart.update_quantity("p1", 3)
        assert CartService(storage).count == 3
        cart.remove_from_cart("p1")
        assert CartService(storage).is_empty

    def test_corrupt_data_gives_empty_cart(self):
        storage = MemoryStorage({"cartItems": "definitely not json"})
        assert CartService(storage).is_empty

    def test_sessions_are_independent(self, storage, products):
        CartService(storage, "cartItems:a").add_to_cart(products["p1"], 1)
        assert CartService(storage, "cartItems:b").is_empty
        assert CartService(storage).is_empty

    def test_failed_write_leaves_cart_unchanged(self, products):
        storage = MemoryStorage(quota_bytes=5)
        cart = CartService(storage)
        with pytest.raises(StorageQuotaExceededError):
            cart.add_to_cart(products["p1"], 1)
        assert cart.is_empty


class TestCartSession:
    @pytest.mark.anyio
    async def test_overlapping_sessions_do_not_lose_adds(self, storage, products):
        session = CartSession(storage)

        async def add(pid):
            async with session.open() as cart:
                await anyio.sleep(0.01)
                cart.add_to_cart(products[pid], 1)

        async with anyio.create_task_group() as tg:
            tg.start_soon(add, "p1")
            tg.start_soon(add, "p2")

        assert CartService(storage).count == 2

    @pytest.mark.anyio
    async def test_other_carts_are_not_blocked(self, storage, products):
        async with CartSession(storage).open():
            with anyio.fail_after(1):
                async with CartSession(storage, "cartItems:b").open() as other:
                    other.add_to_cart(products["p1"], 1)
        assert CartService(storage, "cartItems:b").count == 1
