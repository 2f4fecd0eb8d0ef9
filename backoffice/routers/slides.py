# backoffice/routers/slides.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.marketing_repo import HeroSlideRepository
from backoffice.schemas.marketing import HeroSlideRead, HeroSlideSave
from backoffice.services.marketing_service import HeroSlideService

router = APIRouter(prefix="/hero-slides", tags=["Hero Slides"])
admin_router = APIRouter(
    prefix="/admin/hero-slides",
    tags=["Admin Hero Slides"],
    dependencies=[Depends(require_admin)],
)

repo = HeroSlideRepository()
service = HeroSlideService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[HeroSlideRead])
def list_active_slides(session: Session = Depends(get_session)):
    """
    Active slides in display order (public).
    """
    return service.list_slides(session, only_active=True)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[HeroSlideRead])
def list_slides(session: Session = Depends(get_session)):
    """
    All slides, newest first.
    """
    return service.list_slides(session)


@admin_router.get("/{slide_id}", response_model=HeroSlideRead)
def get_slide(
    slide_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_slide(session, slide_id)


@admin_router.post("", response_model=HeroSlideRead, status_code=status.HTTP_201_CREATED)
def create_slide(
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Create a slide with a fresh id.

    Multipart:
      - data: JSON HeroSlideSave
      - image: optional slide image (max 5MB)
    """
    payload = parse_form_data(HeroSlideSave, data)
    return service.save_slide(session, store, payload, image=UploadedAsset.from_upload(image))


@admin_router.put("/{slide_id}", response_model=HeroSlideRead)
def save_slide(
    slide_id: uuid.UUID,
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Upsert a slide by id.
    """
    payload = parse_form_data(HeroSlideSave, data)
    return service.save_slide(
        session,
        store,
        payload,
        slide_id=slide_id,
        image=UploadedAsset.from_upload(image),
    )


@admin_router.delete("/{slide_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_slide(
    slide_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    service.delete_slide(session, store, slide_id)
    return None
