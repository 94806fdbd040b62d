# app/models/vendor.py
from sqlmodel import SQLModel, Field


class Vendor(SQLModel):
    """
    Marketplace seller. Owns products through Product.vendor_id.

    Deleting a vendor deletes all of its products.
    """

    id: str = Field(description="Opaque vendor id")

    name: str

    description: str = ""

    logo_url: str = ""

    cover_image_url: str = ""

    rating: float = Field(default=0, ge=0, le=5)
