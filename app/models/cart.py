# app/models/cart.py
from sqlmodel import SQLModel, Field

from app.models.product import Product


class CartItem(SQLModel):
    """
    Shopping cart entry.

    Holds a full snapshot of the product as it was when added, so the
    cart total does not change when the catalog does.
    One cart never has 2 entries for the same product.
    """

    product: Product

    quantity: int = Field(
        ge=1,
        description="Must be >= 1",
    )

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity
