# backoffice/models/catalog.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Brand(SQLModel, table=True):
    """
    Brand represented by the company.

    Logo lives at brands/<id> and is overwritten in place on replacement.
    """

    __tablename__ = "brands"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=255, index=True)

    slug: str = Field(
        max_length=255,
        unique=True,
        index=True,
        description="URL-friendly identifier (unique)",
    )

    description: str | None = None

    logo_url: str | None = Field(
        default=None,
        description="Public URL in the site-assets bucket",
    )

    is_active: bool = Field(default=True, index=True)

    order: int = Field(default=0, description="Display position (ascending)")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class Category(SQLModel, table=True):
    """
    Product category. Image lives at categories/<id>.
    """

    __tablename__ = "categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=255, index=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    description: str | None = None
    image_url: str | None = None
    icon: str | None = Field(default=None, description="Icon identifier used by the site")
    is_active: bool = Field(default=True, index=True)
    order: int = 0

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class Product(SQLModel, table=True):
    """
    Catalog product.

    Assets (all under products/<id>/):
      - main_image_url: products/<id>/main
      - images:         products/<id>/gallery-<ts>-<i>
      - datasheet_url:  products/<id>/datasheet.pdf
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=255, index=True)

    slug: str = Field(
        max_length=255,
        unique=True,
        index=True,
    )

    description: str = ""

    brand_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="brands.id",
        index=True,
    )

    main_image_url: str | None = None

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    # [{label, value}]
    specifications: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    datasheet_url: str | None = None

    # Free text on purpose ("Consultar", "Desde S/ 1,200", ...)
    price: str | None = None

    is_new: bool = False
    is_active: bool = Field(default=True, index=True)
    order: int = 0

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class ProductCategory(SQLModel, table=True):
    """
    Many-to-many link between products and categories.
    """

    __tablename__ = "product_categories"

    product_id: uuid.UUID = Field(
        foreign_key="products.id",
        primary_key=True,
    )
    category_id: uuid.UUID = Field(
        foreign_key="categories.id",
        primary_key=True,
        index=True,
    )
