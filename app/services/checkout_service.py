# app/services/checkout_service.py
from app.models.order import Order, ShippingAddress
from app.services.cart_service import CartService
from app.services.order_service import OrderService


class CheckoutService:
    """
    Turns the current cart into an order.

    Steps:
      1. Refuse an empty cart (returns None).
      2. total = cart total + flat shipping fee.
      3. Record the order in the ledger.
      4. Clear the cart.

    There is no "pending" state: if step 3 fails the cart is untouched.
    """

    def __init__(self, order_service: OrderService, shipping_fee: float = 5.0):
        self.order_service = order_service
        self.shipping_fee = shipping_fee

    def order_total(self, cart: CartService) -> float:
        return round(cart.total + self.shipping_fee, 2)

    async def place_order(
        self,
        cart: CartService,
        shipping_address: ShippingAddress,
    ) -> Order | None:
        if cart.is_empty:
            return None

        order = await self.order_service.create_order(
            cart.items,
            self.order_total(cart),
            shipping_address,
        )
        cart.clear_cart()
        return order
