# backoffice/routers/site.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from backoffice.database import get_session
from backoffice.repositories.content_repo import ContentRepository
from backoffice.repositories.settings_repo import SettingsRepository
from backoffice.schemas.content import PublicScripts
from backoffice.schemas.settings import AboutSettingsRead, BlogSettingsRead, SiteSettingsRead
from backoffice.services.content_service import ContentService
from backoffice.services.settings_service import SettingsService

router = APIRouter(prefix="/site", tags=["Site"])

settings_service = SettingsService(SettingsRepository())
content_service = ContentService(ContentRepository())


@router.get("/settings", response_model=SiteSettingsRead)
def get_site_settings(session: Session = Depends(get_session)):
    """
    Branding, CTA, contact, footer, social links and page headers.

    Returns defaults before the first admin save.
    """
    return settings_service.get_site_settings(session)


@router.get("/about", response_model=AboutSettingsRead)
def get_about(session: Session = Depends(get_session)):
    return settings_service.get_about(session)


@router.get("/blog-settings", response_model=BlogSettingsRead)
def get_blog_settings(session: Session = Depends(get_session)):
    return settings_service.get_blog_settings(session)


@router.get("/scripts", response_model=PublicScripts)
def get_scripts(session: Session = Depends(get_session)):
    """
    Active custom scripts grouped by location (head, body_start, body_end).
    """
    return content_service.public_scripts(session)
