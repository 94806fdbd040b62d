# app/repositories/cart_repo.py
from app.models.cart import CartItem
from app.repositories.base import CollectionRepository

CART_KEY = "cartItems"


def cart_key_for(session_id: str | None) -> str:
    """
    Storage key for a cart session.

    The anonymous/default session uses the plain `cartItems` key.
    """
    if not session_id or session_id == "default":
        return CART_KEY
    return f"{CART_KEY}:{session_id}"


class CartRepository(CollectionRepository[CartItem]):
    key = CART_KEY
    model = CartItem
