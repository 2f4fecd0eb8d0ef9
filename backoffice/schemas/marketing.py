# backoffice/schemas/marketing.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


def _strip(v):
    return v.strip() if isinstance(v, str) else v


# ----- Hero slides -----


class HeroSlideRead(SQLModel):
    id: uuid.UUID
    title: str
    description: str
    image_url: str | None
    button_text: str
    button_link: str
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


class HeroSlideSave(SQLModel):
    """
    Slide form state.

    A slide needs a title or an image (kept `image_url` or a new file).
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="", max_length=255)
    description: str = ""
    image_url: str | None = None
    button_text: str = Field(default="", max_length=100)
    button_link: str = ""
    is_active: bool = True
    order: int = 0

    @field_validator("title", "button_text", "button_link", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)


# ----- Promotional banners -----


class BannerRead(SQLModel):
    id: uuid.UUID
    title: str
    image_url: str
    link: str
    is_active: bool
    sort_order: int
    created_at: datetime


class BannerSave(SQLModel):
    """
    Banner form state. The image is mandatory: keep the stored one via
    `image_url` or send a new file.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(default="", max_length=255)
    image_url: str | None = None
    link: str = ""
    is_active: bool = True
    sort_order: int = 0

    @field_validator("title", "link", mode="before")
    @classmethod
    def strip_text(cls, v):
        return _strip(v)
