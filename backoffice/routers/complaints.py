# backoffice/routers/complaints.py
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from backoffice.core.auth import require_admin
from backoffice.database import get_session
from backoffice.repositories.support_repo import ComplaintRepository
from backoffice.schemas.support import (
    ComplaintCreate,
    ComplaintRead,
    ComplaintStatus,
    ComplaintStatusUpdate,
)
from backoffice.services.support_service import ComplaintService

router = APIRouter(prefix="/complaints", tags=["Complaints"])
admin_router = APIRouter(
    prefix="/admin/complaints",
    tags=["Admin Complaints"],
    dependencies=[Depends(require_admin)],
)

repo = ComplaintRepository()
service = ComplaintService(repo)


# -------- Public endpoints --------


@router.post("", response_model=ComplaintRead, status_code=status.HTTP_201_CREATED)
def file_complaint(
    payload: ComplaintCreate,
    session: Session = Depends(get_session),
):
    """
    Complaints book submission (public).
    """
    return service.file_complaint(session, payload)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[ComplaintRead])
def list_complaints(
    complaint_status: ComplaintStatus | None = Query(None, alias="status"),
    skip: int = 0,
    limit: int = 50,
    session: Session = Depends(get_session),
):
    """
    List complaints, newest first, optionally by status.
    """
    return service.list_complaints(session, status=complaint_status, skip=skip, limit=limit)


@admin_router.get("/{complaint_id}", response_model=ComplaintRead)
def get_complaint(
    complaint_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_complaint(session, complaint_id)


@admin_router.patch("/{complaint_id}/status", response_model=ComplaintRead)
def update_complaint_status(
    complaint_id: uuid.UUID,
    payload: ComplaintStatusUpdate,
    session: Session = Depends(get_session),
):
    return service.update_status(session, complaint_id, payload)
