# app/repositories/order_repo.py
from app.models.order import Order
from app.repositories.base import CollectionRepository


class OrderRepository(CollectionRepository[Order]):
    """
    Data access layer for the `orders` collection.

    NOTE:
      - Storage order is creation order; sorting for display is done by
        the ledger.
    """

    key = "orders"
    model = Order

    def get_by_id(self, order_id: str) -> Order | None:
        return next((o for o in self.load() if o.id == order_id), None)
