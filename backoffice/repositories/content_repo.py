# backoffice/repositories/content_repo.py
import uuid

from sqlmodel import Session, col, select

from backoffice.models.content import CustomScript, LegalPage
from backoffice.repositories.base import BaseRepository


class ContentRepository(BaseRepository):
    """
    Data access layer for LegalPage & CustomScript.
    """

    # ----- Legal pages -----

    def get_page_by_slug(self, session: Session, slug: str) -> LegalPage | None:
        stmt = select(LegalPage).where(LegalPage.slug == slug)
        return session.exec(stmt).first()

    def list_pages(self, session: Session) -> list[LegalPage]:
        stmt = select(LegalPage).order_by(LegalPage.slug)
        return session.exec(stmt).all()

    # ----- Custom scripts -----

    def get_script(self, session: Session, script_id: uuid.UUID) -> CustomScript | None:
        return session.get(CustomScript, script_id)

    def list_scripts(self, session: Session, only_active: bool = False) -> list[CustomScript]:
        stmt = select(CustomScript)
        if only_active:
            stmt = stmt.where(CustomScript.is_active == True)
        stmt = stmt.order_by(col(CustomScript.created_at))
        return session.exec(stmt).all()
