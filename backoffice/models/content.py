# backoffice/models/content.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class LegalPage(SQLModel, table=True):
    """
    Legal text (privacy policy, terms, cookies ...), addressed by slug.
    """

    __tablename__ = "legal_pages"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    slug: str = Field(max_length=255, unique=True, index=True)
    title: str = Field(max_length=255)
    content: str = ""
    is_active: bool = True

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class CustomScript(SQLModel, table=True):
    """
    Third-party snippet (analytics, pixels, chat widgets) injected by the
    site at `location`: head | body_start | body_end.
    """

    __tablename__ = "custom_scripts"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    name: str = Field(max_length=255)
    description: str = ""
    content: str
    location: str = Field(default="head", index=True)
    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
