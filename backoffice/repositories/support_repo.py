# backoffice/repositories/support_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.support import CallCenterNumber, Complaint
from backoffice.repositories.base import BaseRepository


class ComplaintRepository(BaseRepository):
    """
    Data access layer for Complaint.
    """

    def get_by_id(self, session: Session, complaint_id: uuid.UUID) -> Complaint | None:
        return session.get(Complaint, complaint_id)

    def list_complaints(
        self,
        session: Session,
        status: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Complaint]:
        """Newest first."""
        stmt = select(Complaint)
        if status:
            stmt = stmt.where(Complaint.status == status)
        stmt = stmt.order_by(col(Complaint.created_at).desc()).offset(skip).limit(limit)
        return session.exec(stmt).all()


class CallCenterRepository(BaseRepository):
    """
    Data access layer for CallCenterNumber.
    """

    def get_by_id(self, session: Session, number_id: uuid.UUID) -> CallCenterNumber | None:
        return session.get(CallCenterNumber, number_id)

    def list_numbers(self, session: Session, only_active: bool = False) -> list[CallCenterNumber]:
        stmt = select(CallCenterNumber)
        if only_active:
            stmt = stmt.where(CallCenterNumber.is_active == True)
        stmt = stmt.order_by(CallCenterNumber.sort_order)
        return session.exec(stmt).all()
