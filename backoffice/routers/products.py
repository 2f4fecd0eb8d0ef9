# backoffice/routers/products.py
import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from sqlmodel import Session

from backoffice.core.assets import UploadedAsset
from backoffice.core.auth import require_admin
from backoffice.core.forms import parse_form_data
from backoffice.core.storage_utils import AssetStore, get_asset_store
from backoffice.database import get_session
from backoffice.repositories.catalog_repo import (
    BrandRepository,
    CategoryRepository,
    ProductRepository,
)
from backoffice.schemas.catalog import ProductRead, ProductSave
from backoffice.services.product_service import ProductFileField, ProductService

router = APIRouter(prefix="/products", tags=["Products"])
admin_router = APIRouter(
    prefix="/admin/products",
    tags=["Admin Products"],
    dependencies=[Depends(require_admin)],
)

repo = ProductRepository()
service = ProductService(repo, BrandRepository(), CategoryRepository())


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def list_products(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 50,
    category: str | None = None,
    brand: str | None = None,
):
    """
    List active products.

    - `category` / `brand`: id or slug.
    """
    return service.list_products(
        session,
        skip=skip,
        limit=limit,
        only_active=True,
        category=category,
        brand=brand,
    )


@router.get("/{slug}", response_model=ProductRead)
def get_product_by_slug(
    slug: str,
    session: Session = Depends(get_session),
):
    return service.get_active_by_slug(session, slug)


# -------- Admin endpoints --------


@admin_router.get("", response_model=list[ProductRead])
def admin_list_products(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 50,
    search: str | None = None,
    category: str | None = None,
    brand: str | None = None,
):
    """
    List all products (active and inactive), optionally filtered.
    """
    return service.list_products(
        session,
        skip=skip,
        limit=limit,
        only_active=False,
        search=search,
        category=category,
        brand=brand,
    )


@admin_router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    return service.get_product(session, product_id)


@admin_router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    data: str = Form(...),
    main_image: UploadFile | None = File(None),
    datasheet: UploadFile | None = File(None),
    gallery: list[UploadFile] | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Create a product with a fresh id.

    Multipart:
      - data: JSON ProductSave
      - main_image: optional main image
      - datasheet: optional PDF
      - gallery: zero or more images appended to the gallery
    """
    payload = parse_form_data(ProductSave, data)
    return service.save_product(
        session,
        store,
        payload,
        main_image=UploadedAsset.from_upload(main_image),
        datasheet=UploadedAsset.from_upload(datasheet),
        gallery=UploadedAsset.from_uploads(gallery),
    )


@admin_router.put("/{product_id}", response_model=ProductRead)
def save_product(
    product_id: uuid.UUID,
    data: str = Form(...),
    main_image: UploadFile | None = File(None),
    datasheet: UploadFile | None = File(None),
    gallery: list[UploadFile] | None = File(None),
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Upsert a product by id.

    `images` in data lists the stored gallery URLs to keep; the rest of
    the stored gallery is deleted once the row is saved.
    """
    payload = parse_form_data(ProductSave, data)
    return service.save_product(
        session,
        store,
        payload,
        product_id=product_id,
        main_image=UploadedAsset.from_upload(main_image),
        datasheet=UploadedAsset.from_upload(datasheet),
        gallery=UploadedAsset.from_uploads(gallery),
    )


@admin_router.delete("/{product_id}/files/{field}", response_model=ProductRead)
def remove_product_file(
    product_id: uuid.UUID,
    field: ProductFileField,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Remove the main image or the datasheet.
    """
    return service.remove_file(session, store, product_id, field)


@admin_router.delete("/{product_id}/images", response_model=ProductRead)
def remove_gallery_image(
    product_id: uuid.UUID,
    url: str,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Remove one gallery image, identified by its URL (query param).
    """
    return service.remove_gallery_image(session, store, product_id, url)


@admin_router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
    store: AssetStore = Depends(get_asset_store),
):
    """
    Delete a product, its files and its category links.
    """
    service.delete_product(session, store, product_id)
    return None
