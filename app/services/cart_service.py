# app/services/cart_service.py
import weakref
from contextlib import asynccontextmanager

import anyio

from app.core.storage import KeyValueStorage
from app.models.cart import CartItem
from app.models.product import Product
from app.repositories.cart_repo import CART_KEY, CartRepository
from app.schemas.cart import CartItemRead, CartSummary


class CartService:
    """
    Session-scoped shopping cart.

    Responsibilities:
      - one entry per product id, quantities always >= 1
      - count / total derived from the items on every read
      - every mutation is written to storage before the method returns

    The cart is restored from storage on construction. Corrupt stored
    data gives an empty cart. Storage write errors propagate, and the
    in-memory cart is left unchanged when they do.
    """

    def __init__(self, storage: KeyValueStorage, key: str = CART_KEY):
        self.repo = CartRepository(storage, key)
        self._items: list[CartItem] = self.repo.load()

    # ---- internal helpers ----

    def _commit(self, items: list[CartItem]) -> None:
        self.repo.save(items)
        self._items = items

    # ---- read side ----

    @property
    def items(self) -> list[CartItem]:
        return [item.model_copy(deep=True) for item in self._items]

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total(self) -> float:
        return sum(item.product.price * item.quantity for item in self._items)

    @property
    def is_empty(self) -> bool:
        return not self._items

    def get_item(self, product_id: str) -> CartItem | None:
        item = next((i for i in self._items if i.product.id == product_id), None)
        return item.model_copy(deep=True) if item else None

    def get_cart_summary(self) -> CartSummary:
        """
        Return full cart summary:
          - list of CartItemRead (with line_total)
          - count (sum of quantities)
          - total (sum of price * quantity)
        """
        return CartSummary(
            items=[
                CartItemRead(
                    product=item.product,
                    quantity=item.quantity,
                    line_total=item.line_total,
                )
                for item in self._items
            ],
            count=self.count,
            total=self.total,
        )

    # ---- public operations ----

    def add_to_cart(self, product: Product, quantity: int) -> None:
        """
        Add `quantity` of a product, merging with an existing entry.

        The caller validates quantity >= 1.
        """
        items = [item.model_copy() for item in self._items]
        existing = next((i for i in items if i.product.id == product.id), None)
        if existing:
            existing.quantity += quantity
        else:
            items.append(CartItem(product=product.model_copy(deep=True), quantity=quantity))
        self._commit(items)

    def remove_from_cart(self, product_id: str) -> None:
        items = [i for i in self._items if i.product.id != product_id]
        if len(items) != len(self._items):
            self._commit(items)

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """
        Set (not increment) an item's quantity; <= 0 removes the item.
        """
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        items = [
            i.model_copy(update={"quantity": quantity}) if i.product.id == product_id else i
            for i in self._items
        ]
        self._commit(items)

    def clear_cart(self) -> None:
        self._commit([])


# One lock per (storage, cart key); entries go away with the storage.
_cart_locks: "weakref.WeakKeyDictionary[KeyValueStorage, dict[str, anyio.Lock]]" = (
    weakref.WeakKeyDictionary()
)


def cart_lock(storage: KeyValueStorage, key: str) -> anyio.Lock:
    locks = _cart_locks.get(storage)
    if locks is None:
        locks = _cart_locks[storage] = {}
    lock = locks.get(key)
    if lock is None:
        lock = locks[key] = anyio.Lock()
    return lock


class CartSession:
    """
    Serialized access to one stored cart.

    open() waits for the cart's lock, then loads the cart fresh from
    storage. Anything done inside the block (including awaiting other
    services, as checkout does) cannot interleave with another request
    on the same cart.
    """

    def __init__(self, storage: KeyValueStorage, key: str = CART_KEY):
        self.storage = storage
        self.key = key

    @asynccontextmanager
    async def open(self):
        async with cart_lock(self.storage, self.key):
            yield CartService(self.storage, self.key)
