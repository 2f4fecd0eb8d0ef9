# backoffice/routers/offerings.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.offering_repo import ServiceRepository
from backoffice.schemas.offering import ServiceRead, ServiceSave
from backoffice.services.offering_service import OfferingService

router = APIRouter(prefix="/services", tags=["Services"])
admin_router = APIRouter(
    prefix="/admin/services",
    tags=["Admin Services"],
    dependencies=[Depends(require_admin)],
)

repo = ServiceRepository()
service = OfferingService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[ServiceRead])
def list_active_services(session: Session = Depends(get_session)):
    """
    Active services in display order (public).
    """
    return service.list_services(session, only_active=True)


@router.get("/{slug}", response_model=ServiceRead)
def get_service_by_slug(
    slug: str,
    session: Session = Depends(get_session),
):
    return service.get_active_by_slug(session, slug)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[ServiceRead])
def list_services(
    session: Session = Depends(get_session),
    search: str | None = None,
):
    return service.list_services(session, search=search)


@admin_router.get("/{service_id}", response_model=ServiceRead)
def get_service(
    service_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_service(session, service_id)


@admin_router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
def create_service(
    data: str = Form(...),
    main_image: UploadFile | None = File(None),
    gallery: list[UploadFile] | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Create a service with a fresh id.

    Multipart:
      - data: JSON ServiceSave
      - main_image: optional main image
      - gallery: zero or more images appended to the gallery
    """
    payload = parse_form_data(ServiceSave, data)
    return service.save_service(
        session,
        store,
        payload,
        main_image=UploadedAsset.from_upload(main_image),
        gallery=UploadedAsset.from_uploads(gallery),
    )


@admin_router.put("/{service_id}", response_model=ServiceRead)
def save_service(
    service_id: uuid.UUID,
    data: str = Form(...),
    main_image: UploadFile | None = File(None),
    gallery: list[UploadFile] | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Upsert a service by id.

    `gallery_images` in data lists the stored gallery URLs to keep.
    """
    payload = parse_form_data(ServiceSave, data)
    return service.save_service(
        session,
        store,
        payload,
        service_id=service_id,
        main_image=UploadedAsset.from_upload(main_image),
        gallery=UploadedAsset.from_uploads(gallery),
    )


@admin_router.delete("/{service_id}/main-image", response_model=ServiceRead)
def remove_service_main_image(
    service_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_main_image(session, store, service_id)


@admin_router.delete("/{service_id}/images", response_model=ServiceRead)
def remove_service_gallery_image(
    service_id: uuid.UUID,
    url: str,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Remove one gallery image, identified by its URL (query param).
    """
    return service.remove_gallery_image(session, store, service_id, url)


@admin_router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Delete a service and its files.
    """
    service.delete_service(session, store, service_id)
    return None
