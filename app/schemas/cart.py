# app/schemas/cart.py
from sqlmodel import SQLModel, Field

from app.models.product import Product


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart.
    """

    product_id: str
    quantity: int = Field(default=1, gt=0)


class CartItemUpdate(SQLModel):
    """
    Payload for setting the quantity of a cart item.

    Zero or a negative number removes the item.
    """

    quantity: int


class CartItemRead(SQLModel):
    """
    Read model for a single cart item, including line_total.
    """

    product: Product
    quantity: int
    line_total: float


class CartSummary(SQLModel):
    """
    Full cart response model with totals.
    """

    items: list[CartItemRead]
    count: int
    total: float
