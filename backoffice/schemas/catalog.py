# backoffice/schemas/catalog.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


def _required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


def _optional_slug(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    return v or None


# ----- Brands -----


class BrandRead(SQLModel):
    id: uuid.UUID
    name: str
    slug: str
    description: str | None
    logo_url: str | None
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


class BrandSave(SQLModel):
    """
    Brand form state.

    - slug is optional: if omitted, generated from `name`.
    - logo_url keeps (same URL) or clears (null) the stored logo; a new
      logo is sent as a file.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    slug: str | None = None
    description: str | None = None
    logo_url: str | None = None
    is_active: bool = True
    order: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _required(v)

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: str | None) -> str | None:
        return _optional_slug(v)


# ----- Categories -----


class CategoryRead(SQLModel):
    id: uuid.UUID
    name: str
    slug: str
    description: str | None
    image_url: str | None
    icon: str | None
    is_active: bool
    order: int
    created_at: datetime


class CategorySave(SQLModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    slug: str | None = None
    description: str | None = None
    image_url: str | None = None
    icon: str | None = None
    is_active: bool = True
    order: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _required(v)

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: str | None) -> str | None:
        return _optional_slug(v)


# ----- Products -----


class Specification(SQLModel):
    label: str = ""
    value: str = ""


class ProductRead(SQLModel):
    id: uuid.UUID
    name: str
    slug: str
    description: str
    brand_id: uuid.UUID | None
    category_ids: list[uuid.UUID] = Field(default_factory=list)
    main_image_url: str | None
    images: list[str]
    specifications: list[Specification]
    datasheet_url: str | None
    price: str | None
    is_new: bool
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


class ProductSave(SQLModel):
    """
    Product form state.

    Asset fields describe what the form currently shows:
      - main_image_url / datasheet_url: stored URL (keep) or null (clear)
      - images: the stored gallery URLs to keep, in display order
    New files (main image, datasheet, gallery additions) arrive as
    multipart file parts.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    slug: str | None = None
    description: str = ""
    brand_id: uuid.UUID | None = None
    category_ids: list[uuid.UUID] = Field(default_factory=list)
    main_image_url: str | None = None
    images: list[str] = Field(default_factory=list)
    specifications: list[Specification] = Field(default_factory=list)
    datasheet_url: str | None = None
    price: str | None = None
    is_new: bool = False
    is_active: bool = True
    order: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _required(v)

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: str | None) -> str | None:
        return _optional_slug(v)
