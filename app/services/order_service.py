# app/services/order_service.py
import logging
from collections.abc import Iterable
from datetime import datetime, timezone

import anyio
from anyio import to_thread

from app.core.ids import new_order_id
from app.core.storage import KeyValueStorage
from app.models.cart import CartItem
from app.models.order import Order, ShippingAddress
from app.repositories.order_repo import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    """
    Append-only order ledger.

    Responsibilities:
      - create an order from a copy of the given cart items
      - look up one order, list all orders newest first

    Orders are never updated or deleted.
    """

    def __init__(self, storage: KeyValueStorage, latency: float = 0.0):
        self.repo = OrderRepository(storage)
        self.latency = latency
        self._write_lock = anyio.Lock()

    async def _respond(self, value):
        if self.latency > 0:
            await anyio.sleep(self.latency)
        return value

    async def create_order(
        self,
        items: Iterable[CartItem],
        total: float,
        shipping_address: ShippingAddress,
    ) -> Order:
        """
        Record a new order.

        Items and address are deep-copied, so later changes to the cart
        that produced them do not reach the stored order.
        """
        snapshot = [item.model_copy(deep=True) for item in items]
        address = shipping_address.model_copy(deep=True)

        async with self._write_lock:
            order = await to_thread.run_sync(self._append, snapshot, total, address)
        return await self._respond(order)

    def _append(
        self,
        items: list[CartItem],
        total: float,
        shipping_address: ShippingAddress,
    ) -> Order:
        orders = self.repo.load()
        order = Order(
            id=new_order_id(),
            date=datetime.now(timezone.utc),
            items=items,
            total=total,
            shipping_address=shipping_address,
        )
        orders.append(order)
        self.repo.save(orders)
        logger.info("Created order %s (total=%.2f, %d item(s))", order.id, total, len(items))
        return order

    async def get_order(self, order_id: str) -> Order | None:
        order = await to_thread.run_sync(self.repo.get_by_id, order_id)
        return await self._respond(order)

    async def list_orders(self) -> list[Order]:
        """
        All orders, most recent first.

        Storage keeps creation order, so reversing it before the (stable)
        sort puts the later of two same-timestamp orders first.
        """
        orders = await to_thread.run_sync(self.repo.load)
        ordered = sorted(reversed(orders), key=lambda o: o.date, reverse=True)
        return await self._respond(ordered)
