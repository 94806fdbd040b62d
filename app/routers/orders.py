# app/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_cart_session, get_checkout_service, get_order_service
from app.models.order import Order
from app.schemas.order import CheckoutRequest
from app.services.cart_service import CartSession
from app.services.checkout_service import CheckoutService
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post(
    "/checkout",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
)
async def checkout(
    payload: CheckoutRequest,
    carts: CartSession = Depends(get_cart_session),
    checkout_service: CheckoutService = Depends(get_checkout_service),
):
    """
    Create an order from the current cart, then empty the cart.

    total = cart total + flat shipping fee. The cart stays locked until
    the order is recorded and the cart cleared.
    """
    async with carts.open() as cart:
        order = await checkout_service.place_order(
            cart, payload.shipping_address.to_model()
        )
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cart is empty",
        )
    return order


@router.get("", response_model=list[Order])
async def list_orders(order_service: OrderService = Depends(get_order_service)):
    """
    List all orders, most recent first.
    """
    return await order_service.list_orders()


@router.get("/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    order_service: OrderService = Depends(get_order_service),
):
    order = await order_service.get_order(order_id)
    if order is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Order not found",
        )
    return order
