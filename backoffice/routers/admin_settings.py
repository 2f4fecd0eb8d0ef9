# backoffice/routers/admin_settings.py
from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data, require_upload
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.settings_repo import SettingsRepository
from backoffice.schemas.settings import (
    AboutImageField,
    AboutSettingsRead,
    AboutSettingsUpdate,
    BlogSettingsImageField,
    BlogSettingsRead,
    BlogSettingsUpdate,
    BrandingField,
    ContactSettingsUpdate,
    CtaSettingsUpdate,
    FooterSettingsUpdate,
    PageHeader,
    SiteImageField,
    SiteSettingsRead,
    SocialSettingsUpdate,
)
from backoffice.services.settings_service import SettingsService

router = APIRouter(
    prefix="/admin/settings",
    tags=["Admin Settings"],
    dependencies=[Depends(require_admin)],
)

repo = SettingsRepository()
service = SettingsService(repo)


# -------- site_settings --------


@router.get("/site", response_model=SiteSettingsRead)
def get_site_settings(session: Session = Depends(get_session)):
    """
    Current site-wide settings.

    Returns defaults when the row has not been created yet.
    """
    return service.get_site_settings(session)


@router.put("/cta", response_model=SiteSettingsRead)
def update_cta(
    data: str = Form(...),
    background: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Save the CTA block.

    Multipart:
      - data: JSON CtaSettingsUpdate
      - background: optional new background image
    """
    payload = parse_form_data(CtaSettingsUpdate, data)
    return service.update_cta(session, store, payload, UploadedAsset.from_upload(background))


@router.put("/contact", response_model=SiteSettingsRead)
def update_contact(
    payload: ContactSettingsUpdate,
    session: Session = Depends(get_session),
):
    return service.update_contact(session, payload)


@router.put("/footer", response_model=SiteSettingsRead)
def update_footer(
    payload: FooterSettingsUpdate,
    session: Session = Depends(get_session),
):
    return service.update_footer(session, payload)


@router.put("/social", response_model=SiteSettingsRead)
def update_social(
    payload: SocialSettingsUpdate,
    session: Session = Depends(get_session),
):
    return service.update_social(session, payload)


@router.post(
    "/branding/{field}",
    response_model=SiteSettingsRead,
    summary="Upload or replace a logo / favicon",
)
def upload_branding_image(
    field: BrandingField,
    file: UploadFile = File(...),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Upload a logo or favicon (max 2MB). Saved immediately.
    """
    return service.upload_branding_image(session, store, field, require_upload(file))


@router.post(
    "/page-headers/{page}",
    response_model=SiteSettingsRead,
    summary="Upload or replace a page header background",
)
def upload_page_header(
    page: PageHeader,
    file: UploadFile = File(...),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.upload_page_header(session, store, page, require_upload(file))


@router.delete("/site/images/{field}", response_model=SiteSettingsRead)
def remove_site_image(
    field: SiteImageField,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Remove an image from site_settings.

    The field is cleared and saved first; the file is deleted afterwards.
    """
    return service.remove_site_image(session, store, field)


# -------- about_settings --------


@router.get("/about", response_model=AboutSettingsRead)
def get_about(session: Session = Depends(get_session)):
    return service.get_about(session)


@router.put("/about", response_model=AboutSettingsRead)
def update_about(
    data: str = Form(...),
    hero_image: UploadFile | None = File(None),
    intro_image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Save the "Nosotros" page.

    Multipart:
      - data: JSON AboutSettingsUpdate
      - hero_image / intro_image: optional replacements
    """
    payload = parse_form_data(AboutSettingsUpdate, data)
    return service.update_about(
        session,
        store,
        payload,
        hero=UploadedAsset.from_upload(hero_image),
        intro=UploadedAsset.from_upload(intro_image),
    )


@router.delete("/about/images/{field}", response_model=AboutSettingsRead)
def remove_about_image(
    field: AboutImageField,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_about_image(session, store, field)


# -------- blog_settings --------


@router.get("/blog", response_model=BlogSettingsRead)
def get_blog_settings(session: Session = Depends(get_session)):
    return service.get_blog_settings(session)


@router.put("/blog", response_model=BlogSettingsRead)
def update_blog_settings(
    data: str = Form(...),
    hero_image: UploadFile | None = File(None),
    logo_facebook: UploadFile | None = File(None),
    logo_twitter: UploadFile | None = File(None),
    logo_linkedin: UploadFile | None = File(None),
    logo_whatsapp: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Save blog hero + share button settings.

    Multipart:
      - data: JSON BlogSettingsUpdate
      - hero_image, logo_<network>: optional replacements
    """
    payload = parse_form_data(BlogSettingsUpdate, data)
    logos = {
        "facebook": UploadedAsset.from_upload(logo_facebook),
        "twitter": UploadedAsset.from_upload(logo_twitter),
        "linkedin": UploadedAsset.from_upload(logo_linkedin),
        "whatsapp": UploadedAsset.from_upload(logo_whatsapp),
    }
    return service.update_blog_settings(
        session,
        store,
        payload,
        hero=UploadedAsset.from_upload(hero_image),
        logos=logos,
    )


@router.delete("/blog/images/{field}", response_model=BlogSettingsRead)
def remove_blog_settings_image(
    field: BlogSettingsImageField,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_blog_settings_image(session, store, field)
