"""Tests for cart -> order conversion and dashboard stats."""

import pytest

from app.core.storage import MemoryStorage
from app.models.order import ShippingAddress
from app.repositories.product_repo import ProductRepository
from app.services.cart_service import CartService
from app.services.catalog_service import CatalogService
from app.services.checkout_service import CheckoutService
from app.services.stats_service import StatsService

pytestmark = pytest.mark.anyio


@pytest.fixture
def address():
    return ShippingAddress(
        name="Grace Hopper",
        address="1 Compiler Way",
        city="Arlington",
        postal_code="22201",
        country="US",
    )


@pytest.fixture
def cart(storage):
    return CartService(storage)


@pytest.fixture
def checkout(order_service):
    return CheckoutService(order_service, shipping_fee=5.0)


class TestPlaceOrder:
    async def test_empty_cart_places_nothing(self, checkout, cart, order_service, address):
        assert await checkout.place_order(cart, address) is None
        assert await order_service.list_orders() == []

    async def test_total_includes_shipping(self, checkout, cart, storage, address):
        cart.add_to_cart(ProductRepository(storage).get_by_id("p2"), 2)  # 2 x 59.00

        order = await checkout.place_order(cart, address)
        assert order.total == 123.0

    async def test_order_keeps_items_after_cart_is_cleared(self, checkout, cart, storage, address):
        cart.add_to_cart(ProductRepository(storage).get_by_id("p5"), 2)
        items_at_checkout = cart.items

        order = await checkout.place_order(cart, address)

        assert cart.is_empty
        assert CartService(storage).is_empty
        assert order.items == items_at_checkout

    async def test_order_is_listed_first(self, checkout, cart, storage, order_service, address):
        repo = ProductRepository(storage)
        cart.add_to_cart(repo.get_by_id("p1"), 1)
        first = await checkout.place_order(cart, address)
        cart.add_to_cart(repo.get_by_id("p2"), 1)
        second = await checkout.place_order(cart, address)

        orders = await order_service.list_orders()
        assert [o.id for o in orders] == [second.id, first.id]


class TestDashboardStats:
    async def test_stats(self, catalog, order_service, checkout, cart, storage, address):
        cart.add_to_cart(ProductRepository(storage).get_by_id("p2"), 1)
        await checkout.place_order(cart, address)

        stats = await StatsService(catalog, order_service).get_admin_dashboard_stats()
        products = await catalog.list_products()

        assert stats.total_products == len(products)
        assert stats.total_vendors == 4
        assert stats.total_orders == 1
        assert stats.total_sales == pytest.approx(64.0)
        assert stats.average_price == pytest.approx(sum(p.price for p in products) / len(products))
        assert len(stats.latest_orders) == 1

    async def test_empty_catalog(self, order_service):
        stats = await StatsService(
            CatalogService(MemoryStorage()), order_service
        ).get_admin_dashboard_stats()
        assert stats.average_price == 0
        assert stats.total_products == 0
