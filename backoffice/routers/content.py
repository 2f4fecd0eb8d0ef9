# backoffice/routers/content.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from backoffice.core.auth import require_admin
from backoffice.database import get_session
from backoffice.repositories.content_repo import ContentRepository
from backoffice.schemas.content import (
    CustomScriptRead,
    CustomScriptSave,
    LegalPageRead,
    LegalPageSave,
)
from backoffice.services.content_service import ContentService

router = APIRouter(tags=["Content"])
admin_router = APIRouter(
    prefix="/admin",
    tags=["Admin Content"],
    dependencies=[Depends(require_admin)],
)

repo = ContentRepository()
service = ContentService(repo)


# -------- Public endpoints --------


@router.get("/legal/{slug}", response_model=LegalPageRead)
def get_legal_page(slug: str, session: Session = Depends(get_session)):
    """
    Active legal page by slug (public).
    """
    return service.get_active_page(session, slug)


# -------- Admin: legal pages --------


@admin_router.get("/legal-pages", response_model=list[LegalPageRead])
def list_legal_pages(session: Session = Depends(get_session)):
    return service.list_pages(session)


@admin_router.get("/legal-pages/{slug}", response_model=LegalPageRead)
def get_legal_page_admin(slug: str, session: Session = Depends(get_session)):
    return service.get_page(session, slug)


@admin_router.put("/legal-pages/{slug}", response_model=LegalPageRead)
def save_legal_page(
    slug: str,
    payload: LegalPageSave,
    session: Session = Depends(get_session),
):
    """
    Create or update the page at `slug`.
    """
    return service.save_page(session, slug, payload)


# -------- Admin: custom scripts --------


@admin_router.get("/scripts", response_model=list[CustomScriptRead])
def list_scripts(session: Session = Depends(get_session)):
    return service.list_scripts(session)


@admin_router.post(
    "/scripts",
    response_model=CustomScriptRead,
    status_code=status.HTTP_201_CREATED,
)
def create_script(
    payload: CustomScriptSave,
    session: Session = Depends(get_session),
):
    return service.create_script(session, payload)


@admin_router.put("/scripts/{script_id}", response_model=CustomScriptRead)
def update_script(
    script_id: uuid.UUID,
    payload: CustomScriptSave,
    session: Session = Depends(get_session),
):
    return service.update_script(session, script_id, payload)


@admin_router.patch("/scripts/{script_id}/toggle", response_model=CustomScriptRead)
def toggle_script(
    script_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Flip is_active.
    """
    return service.toggle_script(session, script_id)


@admin_router.delete("/scripts/{script_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_script(
    script_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    service.delete_script(session, script_id)
    return None
