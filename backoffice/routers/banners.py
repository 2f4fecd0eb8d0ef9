# backoffice/routers/banners.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.marketing_repo import BannerRepository
from backoffice.schemas.marketing import BannerRead, BannerSave
from backoffice.services.marketing_service import BannerService

router = APIRouter(prefix="/banners", tags=["Banners"])
admin_router = APIRouter(
    prefix="/admin/banners",
    tags=["Admin Banners"],
    dependencies=[Depends(require_admin)],
)

repo = BannerRepository()
service = BannerService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[BannerRead])
def list_active_banners(session: Session = Depends(get_session)):
    return service.list_banners(session, only_active=True)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[BannerRead])
def list_banners(session: Session = Depends(get_session)):
    return service.list_banners(session)


@admin_router.get("/{banner_id}", response_model=BannerRead)
def get_banner(
    banner_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_banner(session, banner_id)


@admin_router.post("", response_model=BannerRead, status_code=status.HTTP_201_CREATED)
def create_banner(
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Create a banner with a fresh id.

    Multipart:
      - data: JSON BannerSave
      - image: banner image (required for new banners)
    """
    payload = parse_form_data(BannerSave, data)
    return service.save_banner(session, store, payload, image=UploadedAsset.from_upload(image))


@admin_router.put("/{banner_id}", response_model=BannerRead)
def save_banner(
    banner_id: uuid.UUID,
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    payload = parse_form_data(BannerSave, data)
    return service.save_banner(
        session,
        store,
        payload,
        banner_id=banner_id,
        image=UploadedAsset.from_upload(image),
    )


@admin_router.delete("/{banner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_banner(
    banner_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Delete a banner and its image file.
    """
    service.delete_banner(session, store, banner_id)
    return None
