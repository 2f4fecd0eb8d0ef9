# backoffice/models/marketing.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class HeroSlide(SQLModel, table=True):
    """
    Home page carousel slide. Image lives at hero-slides/<id> and is
    overwritten in place on replacement.
    """

    __tablename__ = "hero_slides"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    title: str = ""
    description: str = ""
    image_url: str | None = None
    button_text: str = ""
    button_link: str = ""
    is_active: bool = Field(default=True, index=True)
    order: int = Field(default=0, description="Display position (ascending)")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class PromotionalBanner(SQLModel, table=True):
    """
    Promotional banner shown on the site. Image (mandatory) lives at
    banners/<id>.
    """

    __tablename__ = "promotional_banners"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    title: str = ""
    image_url: str
    link: str = ""
    is_active: bool = Field(default=True, index=True)
    sort_order: int = 0

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
