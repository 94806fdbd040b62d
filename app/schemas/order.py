# app/schemas/order.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

from app.models.order import ShippingAddress


class ShippingAddressIn(SQLModel):
    """
    Checkout form payload. Every field is required and cannot be blank.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    address: str
    city: str
    postal_code: str
    country: str

    @field_validator("name", "address", "city", "postal_code", "country")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    def to_model(self) -> ShippingAddress:
        return ShippingAddress(**self.model_dump())


class CheckoutRequest(SQLModel):
    """
    Payload for placing an order from the current cart.

    Backend derives:
      - items from the cart
      - total = cart total + flat shipping fee
    """

    model_config = ConfigDict(extra="forbid")

    shipping_address: ShippingAddressIn
