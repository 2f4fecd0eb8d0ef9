# backoffice/routers/categories.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.catalog_repo import CategoryRepository, ProductRepository
from backoffice.schemas.catalog import CategoryRead, CategorySave
from backoffice.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])
admin_router = APIRouter(
    prefix="/admin/categories",
    tags=["Admin Categories"],
    dependencies=[Depends(require_admin)],
)

repo = CategoryRepository()
service = CategoryService(repo, ProductRepository())


@router.get("", response_model=list[CategoryRead])
def list_active_categories(session: Session = Depends(get_session)):
    return service.list_categories(session, only_active=True)


@admin_router.get("", response_model=list[CategoryRead])
def list_categories(
    session: Session = Depends(get_session),
    search: str | None = None,
):
    return service.list_categories(session, search=search)


@admin_router.get("/{category_id}", response_model=CategoryRead)
def get_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_category(session, category_id)


@admin_router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Multipart:
      - data: JSON CategorySave
      - image: optional category image
    """
    payload = parse_form_data(CategorySave, data)
    return service.save_category(session, store, payload, image=UploadedAsset.from_upload(image))


@admin_router.put("/{category_id}", response_model=CategoryRead)
def save_category(
    category_id: uuid.UUID,
    data: str = Form(...),
    image: UploadFile | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    payload = parse_form_data(CategorySave, data)
    return service.save_category(
        session,
        store,
        payload,
        category_id=category_id,
        image=UploadedAsset.from_upload(image),
    )


@admin_router.delete("/{category_id}/image", response_model=CategoryRead)
def remove_category_image(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    return service.remove_image(session, store, category_id)


@admin_router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Delete a category, its image and its product links.
    """
    service.delete_category(session, store, category_id)
    return None
