# backoffice/schemas/offering.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ServiceFeature(SQLModel):
    titulo: str
    detalle: str = ""


class ServiceRead(SQLModel):
    id: uuid.UUID
    name: str
    slug: str
    subtitle: str
    description: str
    image_url: str | None
    gallery_images: list[str]
    benefits: list[str]
    features: list[ServiceFeature]
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


class ServiceSave(SQLModel):
    """
    Service form state.

    - slug is optional: if omitted, generated from `name`.
    - image_url keeps or clears the stored main image.
    - gallery_images lists the stored gallery URLs to keep, in display
      order; new gallery files are sent as multipart parts.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)
    slug: str | None = None
    subtitle: str = ""
    description: str = ""
    image_url: str | None = None
    gallery_images: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    features: list[ServiceFeature] = Field(default_factory=list)
    is_active: bool = True
    order: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("slug")
    @classmethod
    def normalize_slug(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("benefits")
    @classmethod
    def drop_blank_benefits(cls, v: list[str]) -> list[str]:
        return [b.strip() for b in v if b.strip()]
