# backoffice/repositories/lead_repo.py
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlmodel import Session, col, select

from backoffice.models.lead import Lead
from backoffice.repositories.base import BaseRepository


class LeadRepository(BaseRepository):
    """
    Data access layer for Lead.
    """

    def get_by_id(self, session: Session, lead_id: uuid.UUID) -> Lead | None:
        return session.get(Lead, lead_id)

    def list_leads(
        self,
        session: Session,
        status: str | None = None,
        q: str | None = None,
        created_from: datetime | None = None,
        created_before: datetime | None = None,
        skip: int = 0,
        limit: int | None = 50,
    ) -> list[Lead]:
        """
        Newest first. Filters are independent; `created_before` is exclusive.
        """
        stmt = select(Lead)
        if status:
            stmt = stmt.where(Lead.status == status)
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(
                or_(
                    col(Lead.full_name).ilike(pattern),
                    col(Lead.email).ilike(pattern),
                    col(Lead.subject).ilike(pattern),
                )
            )
        if created_from is not None:
            stmt = stmt.where(Lead.created_at >= created_from)
        if created_before is not None:
            stmt = stmt.where(Lead.created_at < created_before)

        stmt = stmt.order_by(col(Lead.created_at).desc()).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return session.exec(stmt).all()
