# backoffice/models/support.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Complaint(SQLModel, table=True):
    """
    Entry of the complaints book (Libro de Reclamaciones).

    Filed by the public form; admins only move it through:
        pendiente | en_proceso | resuelto | rechazado
    """

    __tablename__ = "complaints"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
    )

    # Consumer
    first_name: str
    last_name_1: str
    last_name_2: str
    document_type: str
    document_number: str
    email: str = Field(max_length=255)
    phone: str
    department: str
    province: str
    district: str
    address: str
    reference: str | None = None
    is_minor: bool = False

    # Contracted good / service
    consumption_type: str
    order_number: str | None = None
    claimed_amount: float | None = None
    purchase_date: str | None = None
    consumption_date_detail: str | None = None
    expiry_date: str | None = None
    description: str

    # Claim
    claim_type: str
    claim_details: str
    customer_request: str

    status: str = Field(default="pendiente", index=True)


class CallCenterNumber(SQLModel, table=True):
    """
    Phone / WhatsApp line shown by the floating call-center button.
    """

    __tablename__ = "call_center"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
    )

    name: str = Field(max_length=255)
    phone: str = Field(max_length=30)
    # call | whatsapp
    type: str = "whatsapp"
    is_active: bool = Field(default=True, index=True)
    sort_order: int = 0
