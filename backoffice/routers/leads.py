# backoffice/routers/leads.py
import uuid
from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from backoffice.core.auth import require_admin
from backoffice.database import get_session
from backoffice.repositories.lead_repo import LeadRepository
from backoffice.schemas.lead import (
    LeadCreate,
    LeadFilters,
    LeadRead,
    LeadStatus,
    LeadStatusUpdate,
)
from backoffice.services.lead_service import LeadService

router = APIRouter(prefix="/leads", tags=["Leads"])
admin_router = APIRouter(
    prefix="/admin/leads",
    tags=["Admin Leads"],
    dependencies=[Depends(require_admin)],
)

repo = LeadRepository()
service = LeadService(repo)


def lead_filters(
    status: LeadStatus | None = None,
    q: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> LeadFilters:
    return LeadFilters(status=status, q=q, start_date=start_date, end_date=end_date)


# -------- Public endpoints --------


@router.post("", response_model=LeadRead, status_code=status.HTTP_201_CREATED)
def submit_lead(
    payload: LeadCreate,
    session: Session = Depends(get_session),
):
    """
    Contact form / lead modal submission (public).
    """
    return service.create_lead(session, payload)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[LeadRead])
def list_leads(
    filters: LeadFilters = Depends(lead_filters),
    skip: int = 0,
    limit: int = 50,
    session: Session = Depends(get_session),
):
    """
    List leads, newest first.

    Filters (all optional, combined):
      - status
      - q: text in name, email or subject
      - start_date / end_date: inclusive creation day range
    """
    return service.list_leads(session, filters, skip=skip, limit=limit)


@admin_router.get("/export")
def export_leads(
    filters: LeadFilters = Depends(lead_filters),
    session: Session = Depends(get_session),
):
    """
    Download the filtered leads as CSV (Excel friendly).
    """
    content = service.export_csv(session, filters)
    filename = f"leads_{datetime.now(timezone.utc).date().isoformat()}.csv"
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@admin_router.get("/{lead_id}", response_model=LeadRead)
def get_lead(
    lead_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_lead(session, lead_id)


@admin_router.patch("/{lead_id}/status", response_model=LeadRead)
def update_lead_status(
    lead_id: uuid.UUID,
    payload: LeadStatusUpdate,
    session: Session = Depends(get_session),
):
    return service.update_status(session, lead_id, payload)


@admin_router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(
    lead_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    service.delete_lead(session, lead_id)
    return None
