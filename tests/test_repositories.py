"""Tests for JSON collection repositories."""

import json

from app.core.storage import MemoryStorage
from app.repositories.cart_repo import CART_KEY, CartRepository, cart_key_for
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.vendor_repo import VendorRepository


class TestLoad:
    def test_absent_key_loads_empty(self):
        assert ProductRepository(MemoryStorage()).load() == []

    def test_invalid_json_loads_empty(self):
        storage = MemoryStorage({"products": "{not json"})
        assert ProductRepository(storage).load() == []

    def test_wrong_shape_loads_empty(self):
        storage = MemoryStorage({"vendors": json.dumps([{"name": "no id"}])})
        assert VendorRepository(storage).load() == []

    def test_get_by_id(self, storage):
        repo = ProductRepository(storage)
        assert repo.get_by_id("p1").name == "Walnut Coffee Table"
        assert repo.get_by_id("missing") is None


class TestRoundTrip:
    def test_products_and_vendors_survive_reload(self, storage):
        for repo_cls in (ProductRepository, VendorRepository):
            before = storage.get(repo_cls.key)
            repo = repo_cls(storage)
            repo.save(repo.load())
            assert json.loads(storage.get(repo_cls.key)) == json.loads(before)

    def test_orders_survive_reload(self, storage):
        order = {
            "id": "ord_1",
            "date": "2024-05-01T10:00:00Z",
            "items": [],
            "total": 5.0,
            "shipping_address": {
                "name": "Ada",
                "address": "1 Main St",
                "city": "Springfield",
                "postal_code": "12345",
                "country": "US",
            },
        }
        storage.set("orders", json.dumps([order]))
        repo = OrderRepository(storage)
        reloaded = repo.load()
        repo.save(reloaded)
        assert repo.load() == reloaded


class TestCartKeys:
    def test_default_session_uses_plain_key(self):
        assert cart_key_for(None) == CART_KEY
        assert cart_key_for("default") == CART_KEY

    def test_named_session_gets_own_key(self):
        assert cart_key_for("abc") == "cartItems:abc"

    def test_repository_uses_given_key(self):
        storage = MemoryStorage()
        CartRepository(storage, "cartItems:abc").save([])
        assert storage.get("cartItems:abc") == "[]"
        assert storage.get(CART_KEY) is None
