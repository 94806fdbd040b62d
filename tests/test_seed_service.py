"""Tests for first-run seeding."""

import json

from app.core.storage import MemoryStorage
from app.data.seed import PRODUCTS, VENDORS
from app.services.seed_service import seed_if_empty


class TestSeedIfEmpty:
    def test_seeds_empty_storage(self):
        storage = MemoryStorage()
        seeded = seed_if_empty(storage)

        assert sorted(seeded) == ["orders", "products", "vendors"]
        assert json.loads(storage.get("products")) == PRODUCTS
        assert json.loads(storage.get("vendors")) == VENDORS
        assert json.loads(storage.get("orders")) == []

    def test_existing_data_is_not_overwritten(self):
        storage = MemoryStorage({"products": "[]", "vendors": "[]", "orders": "[]"})
        assert seed_if_empty(storage) == []
        assert storage.get("products") == "[]"

    def test_only_missing_keys_are_seeded(self):
        storage = MemoryStorage({"products": "[]"})
        seeded = seed_if_empty(storage)

        assert "products" not in seeded
        assert storage.get("products") == "[]"
        assert json.loads(storage.get("vendors")) == VENDORS

    def test_second_run_is_a_no_op(self):
        storage = MemoryStorage()
        seed_if_empty(storage)
        storage.set("products", "[]")
        assert seed_if_empty(storage) == []
        assert storage.get("products") == "[]"

    def test_seed_products_reference_seed_vendors(self):
        vendor_ids = {v["id"] for v in VENDORS}
        assert all(p["vendor_id"] in vendor_ids for p in PRODUCTS)
