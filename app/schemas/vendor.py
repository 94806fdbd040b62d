# app/schemas/vendor.py
from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class VendorCreate(SQLModel):
    """
    Payload for creating a vendor. rating is always initialized to 0.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(max_length=255)
    description: str = ""
    logo_url: str = ""
    cover_image_url: str = ""

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class VendorUpdate(SQLModel):
    """
    Partial update payload for vendors.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    logo_url: str | None = None
    cover_image_url: str | None = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v
