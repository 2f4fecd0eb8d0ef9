# backoffice/services/support_service.py
import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.models.support import CallCenterNumber, Complaint
from backoffice.repositories.support_repo import CallCenterRepository, ComplaintRepository
from backoffice.schemas.support import CallCenterItem, ComplaintCreate, ComplaintStatusUpdate

logger = logging.getLogger(__name__)


class ComplaintService:
    """
    Business logic for the complaints book.

    Public filing always starts as 'pendiente'; admins move it freely
    between the four statuses.
    """

    def __init__(self, repo: ComplaintRepository):
        self.repo = repo

    def file_complaint(self, session: Session, payload: ComplaintCreate) -> Complaint:
        complaint = Complaint(**payload.model_dump(), status="pendiente")
        complaint = self.repo.save(session, complaint)
        logger.info(f"New complaint {complaint.id} ({complaint.claim_type})")
        return complaint

    def list_complaints(
        self,
        session: Session,
        status: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Complaint]:
        return self.repo.list_complaints(session, status=status, skip=skip, limit=limit)

    def get_complaint(self, session: Session, complaint_id: uuid.UUID) -> Complaint:
        complaint = self.repo.get_by_id(session, complaint_id)
        if not complaint:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Complaint not found",
            )
        return complaint

    def update_status(
        self,
        session: Session,
        complaint_id: uuid.UUID,
        payload: ComplaintStatusUpdate,
    ) -> Complaint:
        complaint = self.get_complaint(session, complaint_id)
        complaint.status = payload.status
        return self.repo.save(session, complaint)


class CallCenterService:
    """
    Business logic for the call-center lines.

    The admin editor saves the whole list at once; list position becomes
    `sort_order`.
    """

    def __init__(self, repo: CallCenterRepository):
        self.repo = repo

    def list_numbers(self, session: Session, only_active: bool = False) -> list[CallCenterNumber]:
        return self.repo.list_numbers(session, only_active=only_active)

    def save_numbers(self, session: Session, items: list[CallCenterItem]) -> list[CallCenterNumber]:
        """
        Upsert every line in one transaction, renumbering sort_order 0..n-1.

        Lines missing from `items` are left untouched; they are removed
        through `delete_number`.
        """
        for position, item in enumerate(items):
            row = self.repo.get_by_id(session, item.id) if item.id else None
            if row is None:
                row = CallCenterNumber(id=item.id or uuid.uuid4(), name=item.name, phone=item.phone)
            row.name = item.name
            row.phone = item.phone
            row.type = item.type
            row.is_active = item.is_active
            row.sort_order = position
            self.repo.stage(session, row)
        self.repo.commit(session)

        logger.info(f"Saved {len(items)} call-center line(s)")
        return self.repo.list_numbers(session)

    def delete_number(self, session: Session, number_id: uuid.UUID) -> None:
        row = self.repo.get_by_id(session, number_id)
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Call-center line not found",
            )
        self.repo.delete(session, row)
