# backoffice/models/offering.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Service(SQLModel, table=True):
    """
    Service offered by the company (maintenance, outsourcing, ...).

    Assets (all under services/<id>/):
      - image_url:      services/<id>/main
      - gallery_images: services/<id>/gallery-<ts>-<i>
    """

    __tablename__ = "services"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=255, index=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    subtitle: str = ""
    description: str = ""

    image_url: str | None = None

    gallery_images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    benefits: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    # [{titulo, detalle}]
    features: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    is_active: bool = Field(default=True, index=True)
    order: int = 0

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
