# backoffice/schemas/lead.py
import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import ConfigDict, EmailStr, field_validator, model_validator
from sqlmodel import SQLModel, Field

LeadStatus = Literal["new", "in_progress", "contacted", "discarded"]
ClientType = Literal["natural", "company"]
InterestType = Literal["product", "service", "both"]


class LeadCreate(SQLModel):
    """
    Payload of the public contact form / lead modal.

    Backend derives:
      - id, created_at
      - status = 'new'
    """

    model_config = ConfigDict(extra="forbid")

    full_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    subject: str = Field(min_length=5, max_length=200)
    message: str = Field(min_length=10, max_length=1000)
    client_type: ClientType | None = None
    ruc: str | None = None
    interest_type: InterestType | None = None
    requested_product: str | None = None
    requested_service: str | None = None

    @field_validator("full_name", "subject", "message", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator(
        "phone", "ruc", "requested_product", "requested_service", mode="before"
    )
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str | None:
        if v is not None and len(v) < 8:
            raise ValueError("phone must have at least 8 characters")
        return v

    @model_validator(mode="after")
    def company_needs_ruc(self) -> "LeadCreate":
        if self.client_type == "company" and (not self.ruc or len(self.ruc) < 11):
            raise ValueError("ruc with 11 digits is required for companies")
        return self


class LeadRead(SQLModel):
    id: uuid.UUID
    created_at: datetime
    full_name: str
    email: str
    phone: str | None
    subject: str
    message: str
    status: str
    client_type: str | None
    ruc: str | None
    interest_type: str | None
    requested_product: str | None
    requested_service: str | None


class LeadStatusUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    status: LeadStatus


class LeadFilters(SQLModel):
    """
    Admin list filters. Each one is optional and they combine with AND.
    """

    status: LeadStatus | None = None
    q: str | None = None
    start_date: date | None = None
    end_date: date | None = None
