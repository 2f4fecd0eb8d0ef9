# backoffice/models/lead.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Lead(SQLModel, table=True):
    """
    Contact submission from the public site.

    Created by the public contact form / lead modal; only admins move it
    through the status lifecycle:
        new | in_progress | contacted | discarded
    """

    __tablename__ = "leads"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )

    full_name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    phone: str | None = None
    subject: str = ""
    message: str = ""

    status: str = Field(default="new", index=True)

    # natural | company
    client_type: str | None = None
    # Peruvian tax id, only for companies
    ruc: str | None = None

    # product | service | both
    interest_type: str | None = None
    requested_product: str | None = None
    requested_service: str | None = None
