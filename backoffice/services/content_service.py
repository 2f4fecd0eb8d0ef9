# backoffice/services/content_service.py
import uuid
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from backoffice.core.slugs import slugify
from backoffice.models.content import CustomScript, LegalPage
from backoffice.repositories.content_repo import ContentRepository
from backoffice.schemas.content import (
    CustomScriptSave,
    LegalPageSave,
    PublicScript,
    PublicScripts,
)


class ContentService:
    """
    Legal pages (upsert by slug) and third-party scripts.
    """

    def __init__(self, repo: ContentRepository):
        self.repo = repo

    # ----- Legal pages -----

    def list_pages(self, session: Session) -> list[LegalPage]:
        return self.repo.list_pages(session)

    def get_page(self, session: Session, slug: str) -> LegalPage:
        page = self.repo.get_page_by_slug(session, slug)
        if not page:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Page not found",
            )
        return page

    def get_active_page(self, session: Session, slug: str) -> LegalPage:
        page = self.get_page(session, slug)
        if not page.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Page not found",
            )
        return page

    def save_page(self, session: Session, slug: str, payload: LegalPageSave) -> LegalPage:
        """
        Create the page on first save, update it afterwards.
        """
        slug = slugify(slug, fallback="page")
        page = self.repo.get_page_by_slug(session, slug) or LegalPage(
            slug=slug, title=payload.title
        )
        page.title = payload.title
        page.content = payload.content
        page.is_active = payload.is_active
        page.updated_at = datetime.now(timezone.utc)
        return self.repo.save(session, page)

    # ----- Custom scripts -----

    def list_scripts(self, session: Session) -> list[CustomScript]:
        return self.repo.list_scripts(session)

    def get_script(self, session: Session, script_id: uuid.UUID) -> CustomScript:
        script = self.repo.get_script(session, script_id)
        if not script:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Script not found",
            )
        return script

    def create_script(self, session: Session, payload: CustomScriptSave) -> CustomScript:
        return self.repo.save(session, CustomScript(**payload.model_dump()))

    def update_script(
        self,
        session: Session,
        script_id: uuid.UUID,
        payload: CustomScriptSave,
    ) -> CustomScript:
        script = self.get_script(session, script_id)
        for field, value in payload.model_dump().items():
            setattr(script, field, value)
        script.updated_at = datetime.now(timezone.utc)
        return self.repo.save(session, script)

    def toggle_script(self, session: Session, script_id: uuid.UUID) -> CustomScript:
        script = self.get_script(session, script_id)
        script.is_active = not script.is_active
        script.updated_at = datetime.now(timezone.utc)
        return self.repo.save(session, script)

    def delete_script(self, session: Session, script_id: uuid.UUID) -> None:
        script = self.get_script(session, script_id)
        self.repo.delete(session, script)

    def public_scripts(self, session: Session) -> PublicScripts:
        grouped = PublicScripts()
        for script in self.repo.list_scripts(session, only_active=True):
            bucket = getattr(grouped, script.location, None)
            if bucket is None:
                continue
            bucket.append(PublicScript(id=script.id, name=script.name, content=script.content))
        return grouped
