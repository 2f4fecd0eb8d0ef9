# backoffice/schemas/support.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field

ComplaintStatus = Literal["pendiente", "en_proceso", "resuelto", "rechazado"]
DocumentType = Literal["DNI", "CE", "PASAPORTE"]
ClaimType = Literal["Reclamación", "Queja"]
ConsumptionType = Literal["Producto", "Servicio"]
CallCenterType = Literal["call", "whatsapp"]


# ----- Complaints book -----


class ComplaintCreate(SQLModel):
    """
    Payload of the public complaints book form.

    Backend derives:
      - id, created_at
      - status = 'pendiente'
    """

    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=2, max_length=100)
    last_name_1: str = Field(min_length=2, max_length=100)
    last_name_2: str = Field(min_length=2, max_length=100)
    document_type: DocumentType
    document_number: str = Field(min_length=8, max_length=20)
    email: EmailStr
    phone: str = Field(min_length=9, max_length=20)
    department: str = Field(min_length=1, max_length=100)
    province: str = Field(min_length=1, max_length=100)
    district: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=5, max_length=255)
    reference: str | None = None
    is_minor: bool = False

    consumption_type: ConsumptionType
    order_number: str | None = None
    claimed_amount: float | None = Field(default=None, ge=0)
    purchase_date: str | None = None
    consumption_date_detail: str | None = None
    expiry_date: str | None = None
    description: str = Field(min_length=10, max_length=2000)

    claim_type: ClaimType
    claim_details: str = Field(min_length=10, max_length=2000)
    customer_request: str = Field(min_length=10, max_length=2000)

    @field_validator(
        "first_name",
        "last_name_1",
        "last_name_2",
        "document_number",
        "phone",
        "address",
        "description",
        "claim_details",
        "customer_request",
        mode="before",
    )
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator(
        "reference",
        "order_number",
        "purchase_date",
        "consumption_date_detail",
        "expiry_date",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class ComplaintRead(SQLModel):
    id: uuid.UUID
    created_at: datetime
    first_name: str
    last_name_1: str
    last_name_2: str
    document_type: str
    document_number: str
    email: str
    phone: str
    department: str
    province: str
    district: str
    address: str
    reference: str | None
    is_minor: bool
    consumption_type: str
    order_number: str | None
    claimed_amount: float | None
    purchase_date: str | None
    consumption_date_detail: str | None
    expiry_date: str | None
    description: str
    claim_type: str
    claim_details: str
    customer_request: str
    status: str


class ComplaintStatusUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    status: ComplaintStatus


# ----- Call center -----


class CallCenterRead(SQLModel):
    id: uuid.UUID
    name: str
    phone: str
    type: str
    is_active: bool
    sort_order: int


class CallCenterItem(SQLModel):
    """One line of the call-center editor. No id means a new line."""

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID | None = None
    name: str = Field(max_length=255)
    phone: str = Field(max_length=30)
    type: CallCenterType = "whatsapp"
    is_active: bool = True

    @field_validator("name", "phone")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v
