# backoffice/routers/call_center.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from backoffice.core.auth import require_admin
from backoffice.database import get_session
from backoffice.repositories.support_repo import CallCenterRepository
from backoffice.schemas.support import CallCenterItem, CallCenterRead
from backoffice.services.support_service import CallCenterService

router = APIRouter(prefix="/call-center", tags=["Call Center"])
admin_router = APIRouter(
    prefix="/admin/call-center",
    tags=["Admin Call Center"],
    dependencies=[Depends(require_admin)],
)

repo = CallCenterRepository()
service = CallCenterService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[CallCenterRead])
def list_active_numbers(session: Session = Depends(get_session)):
    """
    Active lines for the floating call-center button.
    """
    return service.list_numbers(session, only_active=True)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[CallCenterRead])
def list_numbers(session: Session = Depends(get_session)):
    return service.list_numbers(session)


@admin_router.put("", response_model=list[CallCenterRead])
def save_numbers(
    items: list[CallCenterItem],
    session: Session = Depends(get_session),
):
    """
    Save the whole editor list; list position becomes sort_order.
    """
    return service.save_numbers(session, items)


@admin_router.delete("/{number_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_number(
    number_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    service.delete_number(session, number_id)
    return None
