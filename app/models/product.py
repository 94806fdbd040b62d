# app/models/product.py
from sqlmodel import SQLModel, Field


class Product(SQLModel):
    """
    Catalog entry sold by a vendor.

    Stored as one element of the `products` collection.

      - id is issued by the catalog ("p<ms>") and never reused
      - vendor_id must point to an existing vendor when the product is
        created or moved to another vendor
      - rating / review_count start at 0 and are not editable by the
        authoring flow
    """

    id: str = Field(description="Opaque product id")

    name: str = Field(description="Display name")

    description: str = Field(default="", description="Long description")

    price: float = Field(ge=0, description="Unit price")

    image_url: str = Field(default="", description="Main image URL")

    gallery: list[str] = Field(
        default_factory=list,
        description="Additional image URLs, in display order",
    )

    vendor_id: str = Field(description="Owning vendor id")

    category: str = Field(description="Free-text category label")

    rating: float = Field(default=0, ge=0, le=5)

    review_count: int = Field(default=0, ge=0)
