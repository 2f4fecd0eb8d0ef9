# backoffice/routers/brands.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.catalog_repo import BrandRepository, ProductRepository
from backoffice.schemas.catalog import BrandRead, BrandSave
from backoffice.services.brand_service import BrandService

router = APIRouter(prefix="/brands", tags=["Brands"])
admin_router = APIRouter(
    prefix="/admin/brands",
    tags=["Admin Brands"],
    dependencies=[Depends(require_admin)],
)

repo = BrandRepository()
service = BrandService(repo, ProductRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[BrandRead])
def list_active_brands(session: Session = Depends(get_session)):
    """
    Active brands in display order (public).
    """
    return service.list_brands(session, only_active=True)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[BrandRead])
def list_brands(
    session: Session = Depends(get_session),
    search: str | None = None,
):
    """
    All brands, optionally filtered by name.
    """
    return service.list_brands(session, search=search)


@admin_router.get("/{brand_id}", response_model=BrandRead)
def get_brand(
    brand_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_brand(session, brand_id)


@admin_router.post("", response_model=BrandRead, status_code=status.HTTP_201_CREATED)
def create_brand(
    data: str = Form(...),
    logo: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Create a brand with a fresh id.

    Multipart:
      - data: JSON BrandSave
      - logo: optional logo (max 2MB)
    """
    payload = parse_form_data(BrandSave, data)
    return service.save_brand(session, store, payload, logo=UploadedAsset.from_upload(logo))


@admin_router.put("/{brand_id}", response_model=BrandRead)
def save_brand(
    brand_id: uuid.UUID,
    data: str = Form(...),
    logo: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Upsert a brand by id.
    """
    payload = parse_form_data(BrandSave, data)
    return service.save_brand(
        session,
        store,
        payload,
        brand_id=brand_id,
        logo=UploadedAsset.from_upload(logo),
    )


@admin_router.delete("/{brand_id}/logo", response_model=BrandRead)
def remove_brand_logo(
    brand_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_logo(session, store, brand_id)


@admin_router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brand(
    brand_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Delete a brand and its logo file.
    """
    service.delete_brand(session, store, brand_id)
    return None
