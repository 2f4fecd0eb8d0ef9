# backoffice/repositories/offering_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.offering import Service
from backoffice.repositories.base import BaseRepository


class ServiceRepository(BaseRepository):
    """
    Data access layer for Service.
    """

    def get_by_id(self, session: Session, service_id: uuid.UUID) -> Service | None:
        return session.get(Service, service_id)

    def get_by_slug(self, session: Session, slug: str) -> Service | None:
        stmt = select(Service).where(Service.slug == slug)
        return session.exec(stmt).first()

    def list_services(
        self,
        session: Session,
        only_active: bool = False,
        search: str | None = None,
    ) -> list[Service]:
        stmt = select(Service)
        if only_active:
            stmt = stmt.where(Service.is_active == True)
        if search:
            stmt = stmt.where(col(Service.name).ilike(f"%{search}%"))
        stmt = stmt.order_by(Service.order, Service.name)
        return session.exec(stmt).all()
