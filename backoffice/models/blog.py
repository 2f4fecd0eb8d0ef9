# backoffice/models/blog.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class BlogCategory(SQLModel, table=True):
    __tablename__ = "blog_categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)


class BlogPost(SQLModel, table=True):
    """
    Blog article.

    Cover image lives at blog/<id>-<ts>; a new upload gets a new path and
    the old file is removed after the row is saved.
    """

    __tablename__ = "blog_posts"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    title: str = Field(max_length=255)
    slug: str = Field(max_length=255, unique=True, index=True)
    excerpt: str = ""
    content: str = Field(description="Rich text (HTML) body")
    image_url: str | None = None

    category_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="blog_categories.id",
        index=True,
    )

    author: str = Field(default="Admin", max_length=255)

    is_published: bool = Field(default=False, index=True)
    published_at: datetime | None = None

    # SEO
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: str | None = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
