# app/models/order.py
from datetime import datetime

from sqlmodel import SQLModel, Field

from app.models.cart import CartItem


class ShippingAddress(SQLModel):
    name: str
    address: str
    city: str
    postal_code: str
    country: str


class Order(SQLModel):
    """
    Placed order. Append-only: never updated or deleted.

      - id is "ord_<ms>", increasing with creation time
      - items is a copy of the cart at checkout time
      - total is fixed at checkout (items + shipping) and never recomputed
    """

    id: str

    date: datetime = Field(description="Creation timestamp (UTC)")

    items: list[CartItem] = Field(default_factory=list)

    total: float = Field(description="Amount charged, as given at checkout")

    shipping_address: ShippingAddress
