# backoffice/schemas/blog.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class BlogCategoryRead(SQLModel):
    id: uuid.UUID
    name: str
    slug: str


class BlogCategorySave(SQLModel):
    """Slug is always derived from the name."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=255)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


class BlogPostRead(SQLModel):
    id: uuid.UUID
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: str | None
    category_id: uuid.UUID | None
    author: str
    is_published: bool
    published_at: datetime | None
    meta_title: str | None
    meta_description: str | None
    meta_keywords: str | None
    created_at: datetime
    updated_at: datetime


class BlogPostSave(SQLModel):
    """
    Blog editor form state.

    - title, slug, content are required (non-blank).
    - author: empty => name of the signed-in admin.
    - meta_title / meta_description: empty => title / excerpt.
    - image_url: keep (stored URL) or clear (null); new cover as a file.
    """

    model_config = ConfigDict(extra="forbid")

    title: str = Field(max_length=255)
    slug: str = Field(max_length=255)
    excerpt: str = ""
    content: str
    image_url: str | None = None
    category_id: uuid.UUID | None = None
    author: str | None = None
    is_published: bool = False
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None

    @field_validator("title", "slug", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v
