# app/services/catalog_service.py
import logging

import anyio
from anyio import to_thread

from app.core.ids import new_product_id, new_vendor_id
from app.core.storage import KeyValueStorage
from app.models.product import Product
from app.models.vendor import Vendor
from app.repositories.product_repo import ProductRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.product import ProductCreate, ProductUpdate
from app.schemas.vendor import VendorCreate, VendorUpdate
from app.services import search_service

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Owner of the `products` and `vendors` collections.

    Responsibilities:
      - CRUD for products and vendors, ids issued here
      - vendor -> products cascade on delete (single storage write)
      - category listing, vendor listing and search over a fresh snapshot

    Every public method is a coroutine that waits `latency` seconds
    before returning. Storage calls run in a worker thread; writes are
    serialized through one lock so concurrent read-modify-write calls
    cannot drop each other's changes.

    A missing id is not an error: lookups return None, updates return
    None and deletes return False.
    """

    def __init__(self, storage: KeyValueStorage, latency: float = 0.0):
        self.storage = storage
        self.product_repo = ProductRepository(storage)
        self.vendor_repo = VendorRepository(storage)
        self.latency = latency
        self._write_lock = anyio.Lock()

    # ---- internal helpers ----

    async def _respond(self, value):
        if self.latency > 0:
            await anyio.sleep(self.latency)
        return value

    async def _read(self, func, *args):
        return await self._respond(await to_thread.run_sync(func, *args))

    async def _write(self, func, *args):
        async with self._write_lock:
            result = await to_thread.run_sync(func, *args)
        return await self._respond(result)

    # ---- Products ----

    async def list_products(self) -> list[Product]:
        return await self._read(self.product_repo.load)

    async def get_product(self, product_id: str) -> Product | None:
        return await self._read(self.product_repo.get_by_id, product_id)

    async def create_product(self, payload: ProductCreate) -> Product:
        return await self._write(self._create_product, payload)

    async def update_product(self, product_id: str, payload: ProductUpdate) -> Product | None:
        return await self._write(self._update_product, product_id, payload)

    async def delete_product(self, product_id: str) -> bool:
        return await self._write(self._delete_product, product_id)

    async def list_categories(self) -> list[str]:
        return await self._read(
            lambda: search_service.list_categories(self.product_repo.load())
        )

    async def products_by_vendor(self, vendor_id: str) -> list[Product]:
        return await self._read(
            lambda: search_service.products_by_vendor(self.product_repo.load(), vendor_id)
        )

    async def search_products(self, query: str) -> list[Product]:
        return await self._read(
            lambda: search_service.search_products(self.product_repo.load(), query)
        )

    def _create_product(self, payload: ProductCreate) -> Product:
        products = self.product_repo.load()
        product = Product(
            **payload.model_dump(),
            id=new_product_id(),
            rating=0,
            review_count=0,
        )
        products.append(product)
        self.product_repo.save(products)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def _update_product(self, product_id: str, payload: ProductUpdate) -> Product | None:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None
        }
        products = self.product_repo.load()
        for idx, product in enumerate(products):
            if product.id == product_id:
                updated = product.model_copy(update=changes)
                products[idx] = updated
                self.product_repo.save(products)
                return updated
        return None

    def _delete_product(self, product_id: str) -> bool:
        products = self.product_repo.load()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False
        self.product_repo.save(remaining)
        logger.info("Deleted product %s", product_id)
        return True

    # ---- Vendors ----

    async def list_vendors(self) -> list[Vendor]:
        return await self._read(self.vendor_repo.load)

    async def get_vendor(self, vendor_id: str) -> Vendor | None:
        return await self._read(self.vendor_repo.get_by_id, vendor_id)

    async def create_vendor(self, payload: VendorCreate) -> Vendor:
        return await self._write(self._create_vendor, payload)

    async def update_vendor(self, vendor_id: str, payload: VendorUpdate) -> Vendor | None:
        return await self._write(self._update_vendor, vendor_id, payload)

    async def delete_vendor(self, vendor_id: str) -> bool:
        """
        Delete a vendor together with every product it owns.

        Both collections are written in one storage call, so readers see
        either the old state or the new one, never a vendor-less product.
        """
        return await self._write(self._delete_vendor, vendor_id)

    def _create_vendor(self, payload: VendorCreate) -> Vendor:
        vendors = self.vendor_repo.load()
        vendor = Vendor(**payload.model_dump(), id=new_vendor_id(), rating=0)
        vendors.append(vendor)
        self.vendor_repo.save(vendors)
        logger.info("Created vendor %s (%s)", vendor.id, vendor.name)
        return vendor

    def _update_vendor(self, vendor_id: str, payload: VendorUpdate) -> Vendor | None:
        changes = {
            k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None
        }
        vendors = self.vendor_repo.load()
        for idx, vendor in enumerate(vendors):
            if vendor.id == vendor_id:
                updated = vendor.model_copy(update=changes)
                vendors[idx] = updated
                self.vendor_repo.save(vendors)
                return updated
        return None

    def _delete_vendor(self, vendor_id: str) -> bool:
        vendors = self.vendor_repo.load()
        remaining_vendors = [v for v in vendors if v.id != vendor_id]
        if len(remaining_vendors) == len(vendors):
            return False

        products = self.product_repo.load()
        remaining_products = [p for p in products if p.vendor_id != vendor_id]

        self.storage.set_many(
            {
                self.vendor_repo.key: self.vendor_repo.dump(remaining_vendors),
                self.product_repo.key: self.product_repo.dump(remaining_products),
            }
        )
        logger.info(
            "Deleted vendor %s and %d product(s)",
            vendor_id,
            len(products) - len(remaining_products),
        )
        return True
