# app/schemas/product.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


def split_gallery(raw: str) -> list[str]:
    """
    Turn the authoring form's comma-separated gallery field into a list.

    Whitespace around each URL is trimmed and blank entries are dropped:

        "a.png, b.png,, " -> ["a.png", "b.png"]
    """
    return [url.strip() for url in raw.split(",") if url.strip()]


def _coerce_gallery(v):
    if isinstance(v, str):
        return split_gallery(v)
    return v


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    - id, rating and review_count are assigned by the catalog; if a
      caller sends them they are ignored.
    - gallery accepts a list or a comma-separated string.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(max_length=255)
    description: str = ""
    price: float = Field(ge=0)
    image_url: str = ""
    gallery: list[str] = Field(default_factory=list)
    vendor_id: str
    category: str = Field(max_length=100)

    @field_validator("name", "category", "vendor_id")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("gallery", mode="before")
    @classmethod
    def parse_gallery(cls, v):
        return _coerce_gallery(v)


class ProductUpdate(SQLModel):
    """
    Partial update payload for products.
    All fields are optional; only the ones sent are changed.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    image_url: str | None = None
    gallery: list[str] | None = None
    vendor_id: str | None = None
    category: str | None = Field(default=None, max_length=100)

    @field_validator("name", "category", "vendor_id")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("gallery", mode="before")
    @classmethod
    def parse_gallery(cls, v):
        return _coerce_gallery(v)


class ProductFilter(SQLModel):
    """
    Narrowing filters for product listings.

    None means "no constraint". The string "all" (what the storefront
    sends for an unselected dropdown) is normalized to None.
    """

    category: str | None = None
    vendor_id: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @field_validator("category", "vendor_id")
    @classmethod
    def normalize_all(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v or v.lower() == "all":
            return None
        return v
